"""
Singly linked list used as the collision chain of a HashMap bucket.

Nodes keep insertion order. Searches by key or value are linear.
"""

from typing import Any, Iterator, Optional


class Node:
    """A single key/value cell of a chain."""

    __slots__ = ('key', 'value', 'next')

    def __init__(self, key: Any, value: Any, next: Optional['Node'] = None):
        self.key = key
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f'Node({self.key!r}, {self.value!r})'


class SinglyLinkedList:
    """
    Ordered chain of Nodes.

    New nodes are appended at the tail, so iterating from the head yields
    nodes in the order they were added.
    """

    __slots__ = ('_head', '_tail', '_size')

    def __init__(self):
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0

    def add(self, key: Any, value: Any) -> Node:
        """Append a node holding key and value; return it."""
        node = Node(key, value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def get_head(self) -> Optional[Node]:
        return self._head

    def get_node_by_key(self, key: Any) -> Optional[Node]:
        """Return the first node whose key equals key, or None."""
        node = self._head
        while node is not None:
            if node.key == key:
                return node
            node = node.next
        return None

    def get_node_by_value(self, value: Any) -> Optional[Node]:
        """Return the first node whose value equals value, or None."""
        node = self._head
        while node is not None:
            if node.value == value:
                return node
            node = node.next
        return None

    def contains_key(self, key: Any) -> bool:
        return self.get_node_by_key(key) is not None

    def contains_value(self, value: Any) -> bool:
        return self.get_node_by_value(value) is not None

    def remove(self, key: Any) -> bool:
        """Unlink the first node with key. Return True if one was found."""
        prev = None
        node = self._head
        while node is not None:
            if node.key == key:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                if node is self._tail:
                    self._tail = prev
                node.next = None
                self._size -= 1
                return True
            prev, node = node, node.next
        return False

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node]:
        """Iterate over nodes from head to tail."""
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        items = ' -> '.join(repr(node) for node in self)
        return f'SinglyLinkedList([{items}])'
