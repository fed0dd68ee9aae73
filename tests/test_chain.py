"""
Tests for SinglyLinkedList - the collision chain of a bucket

Tests verify:
- Appending keeps insertion order
- Lookup by key and by value
- Removal at head, middle and tail
- Size bookkeeping
"""

from pyhashmap import Node, SinglyLinkedList


def make_chain(*pairs):
    chain = SinglyLinkedList()
    for key, value in pairs:
        chain.add(key, value)
    return chain


class TestSinglyLinkedListBasics:
    """Test basic operations on SinglyLinkedList"""

    def test_empty_chain(self):
        chain = SinglyLinkedList()
        assert chain.size() == 0
        assert len(chain) == 0
        assert chain.is_empty()
        assert chain.get_head() is None
        assert list(chain) == []

    def test_add_returns_node(self):
        chain = SinglyLinkedList()
        node = chain.add('a', 1)
        assert isinstance(node, Node)
        assert chain.get_head() is node
        assert node.next is None

    def test_add_appends_at_tail(self):
        chain = make_chain(('a', 1), ('b', 2), ('c', 3))
        assert [n.key for n in chain] == ['a', 'b', 'c']
        head = chain.get_head()
        assert head.key == 'a'
        assert head.next.key == 'b'
        assert head.next.next.key == 'c'
        assert head.next.next.next is None

    def test_contains_key(self):
        chain = make_chain(('a', 1), ('b', 2))
        assert chain.contains_key('a')
        assert chain.contains_key('b')
        assert not chain.contains_key('c')

    def test_contains_value(self):
        chain = make_chain(('a', 1), ('b', 2))
        assert chain.contains_value(2)
        assert not chain.contains_value(3)

    def test_get_node_by_key(self):
        chain = make_chain(('a', 1), ('b', 2))
        assert chain.get_node_by_key('b').value == 2
        assert chain.get_node_by_key('z') is None

    def test_get_node_by_value_returns_first(self):
        chain = make_chain(('a', 'same'), ('b', 'same'))
        assert chain.get_node_by_value('same').key == 'a'


class TestSinglyLinkedListRemove:
    """Test removal"""

    def test_remove_head(self):
        chain = make_chain(('a', 1), ('b', 2), ('c', 3))
        assert chain.remove('a') is True
        assert [n.key for n in chain] == ['b', 'c']
        assert chain.size() == 2

    def test_remove_middle(self):
        chain = make_chain(('a', 1), ('b', 2), ('c', 3))
        assert chain.remove('b') is True
        assert [n.key for n in chain] == ['a', 'c']

    def test_remove_tail_then_append(self):
        chain = make_chain(('a', 1), ('b', 2), ('c', 3))
        assert chain.remove('c') is True
        chain.add('d', 4)
        assert [n.key for n in chain] == ['a', 'b', 'd']

    def test_remove_last_node(self):
        chain = make_chain(('a', 1))
        assert chain.remove('a') is True
        assert chain.is_empty()
        assert chain.get_head() is None
        chain.add('b', 2)
        assert [n.key for n in chain] == ['b']

    def test_remove_missing(self):
        chain = make_chain(('a', 1))
        assert chain.remove('z') is False
        assert chain.size() == 1

    def test_repr(self):
        chain = make_chain(('a', 1), ('b', 2))
        assert repr(chain) == "SinglyLinkedList([Node('a', 1) -> Node('b', 2)])"
