"""
Chained hash map with a fixed number of buckets.

Keys are normalized (see normalizer.py), hashed with CRC32 and reduced to a
bucket index with the division method:

    index = crc32(key_bytes(key), seed) % max_size

Colliding entries share a SinglyLinkedList. A bucket with no entries is kept
as None in the bucket table; chains are created on first insert and dropped
when their last node is removed. The table never grows.
"""

import logging
import secrets
import zlib
from typing import Any, Iterator, List, Optional, Tuple

from . import config
from .chain import Node, SinglyLinkedList
from .normalizer import NormalizedKey, key_bytes, normalize_key


logger = logging.getLogger(__name__)


class HashMap:
    """
    A mutable map from heterogeneous keys to arbitrary values.

    add() does not insert a value that is already stored in the target
    bucket: the call succeeds without changing the map. The check looks at
    that single bucket only, so an equal value stored under a key in another
    bucket is not detected.

    Example:
        m = HashMap()
        m.add('name', 'Alice')
        m.add(42, 'answer')
        m.get_node_by_key('name').value    # 'Alice'
        m.remove(42)                       # True
        m.key_set()                        # ['name']

    Not thread-safe. Guard every operation, reads included, with one lock
    if the map is shared between threads.
    """

    __slots__ = ('_bucket', '_max_size', '_seed')

    def __init__(self, max_size: Optional[int] = None, seed: Optional[int] = None):
        self._max_size = config.validate_max_size(
            config.DEFAULT_MAX_SIZE if max_size is None else max_size)
        self._seed = config.validate_seed(config.DEFAULT_SEED if seed is None else seed)
        self._initialize_bucket()

    def _initialize_bucket(self) -> None:
        self._bucket: List[Optional[SinglyLinkedList]] = [None] * self._max_size

    @property
    def max_size(self) -> int:
        """Number of buckets, fixed at construction."""
        return self._max_size

    @property
    def seed(self) -> int:
        return self._seed

    def _index(self, key: NormalizedKey) -> int:
        return zlib.crc32(key_bytes(key), self._seed) % self._max_size

    def bucket_index(self, key: Any) -> int:
        """Return the bucket that key maps to. Raises KeyTypeError for bad keys."""
        return self._index(normalize_key(key))

    def _drop_chain(self, index: int) -> None:
        self._bucket[index] = None
        logger.debug("bucket %d emptied, chain dropped", index)

    def add(self, key: Any, value: Any) -> bool:
        """
        Store value under key.

        If value is already present in the bucket key maps to, nothing is
        stored. If key is already present, its value is replaced in place
        rather than a second node with the same key being appended to the
        chain, so a key is never stored twice. Always returns True; an
        unsupported key raises a KeyTypeError subclass.
        """
        key = normalize_key(key)
        index = self._index(key)
        chain = self._bucket[index]

        if chain is None:
            chain = SinglyLinkedList()
            self._bucket[index] = chain
            logger.debug("bucket %d: chain created", index)
        elif chain.contains_value(value):
            logger.debug("bucket %d already holds value %r, add skipped", index, value)
            return True

        node = chain.get_node_by_key(key)
        if node is not None:
            node.value = value
        else:
            chain.add(key, value)
        return True

    def add_node(self, node: Any) -> bool:
        """Add the key and value of any object exposing .key and .value."""
        return self.add(node.key, node.value)

    def contains_value(self, value: Any) -> bool:
        """Check every bucket for value."""
        for chain in self._chains():
            if chain.contains_value(value):
                return True
        return False

    def contains_key(self, key: Any) -> bool:
        return self.get_node_by_key(key) is not None

    def get_node_by_value(self, value: Any) -> Optional[Node]:
        """
        Return the first node holding value, or None.

        "First" follows bucket order, not insertion order.
        """
        for chain in self._chains():
            node = chain.get_node_by_value(value)
            if node is not None:
                return node
        return None

    def get_node_by_key(self, key: Any) -> Optional[Node]:
        """Return the node stored under key, or None."""
        key = normalize_key(key)
        chain = self._bucket[self._index(key)]
        if chain is None:
            return None
        return chain.get_node_by_key(key)

    def get(self, key: Any, default=None) -> Any:
        """Get the value associated with key, or default if not present."""
        node = self.get_node_by_key(key)
        if node is None:
            return default
        return node.value

    def remove(self, key: Any) -> bool:
        """
        Remove key from the map.

        Returns True once key is no longer in the map, which includes the
        case where it was never there.
        """
        key = normalize_key(key)
        index = self._index(key)
        chain = self._bucket[index]
        if chain is None:
            return True

        head = chain.get_head()
        if chain.size() == 1 and head.key == key:
            self._drop_chain(index)
            return True

        if not chain.remove(key):
            logger.debug("bucket %d has no key %r, nothing removed", index, key)
        return True

    def clear(self) -> None:
        """Remove all buckets and their nodes."""
        self._initialize_bucket()
        logger.debug("map cleared")

    def _chains(self) -> Iterator[SinglyLinkedList]:
        for chain in self._bucket:
            if chain is not None:
                yield chain

    def _nodes(self) -> Iterator[Node]:
        for chain in self._chains():
            yield from chain

    def key_set(self) -> List[NormalizedKey]:
        """Keys in bucket order, then in insertion order within each bucket."""
        return [node.key for node in self._nodes()]

    def values(self) -> List[Any]:
        """Values, in the same order as key_set()."""
        return [node.value for node in self._nodes()]

    def items(self) -> List[Tuple[NormalizedKey, Any]]:
        """(key, value) pairs, in the same order as key_set()."""
        return [(node.key, node.value) for node in self._nodes()]

    def size(self) -> int:
        """Total number of nodes over all chains."""
        return sum(chain.size() for chain in self._chains())

    def bucket_count(self) -> int:
        """Number of buckets currently holding a chain."""
        return sum(1 for _ in self._chains())

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[NormalizedKey]:
        for node in self._nodes():
            yield node.key

    def __getitem__(self, key: Any) -> Any:
        """Get item using bracket notation. Raises KeyError if not found."""
        node = self.get_node_by_key(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.add(key, value)

    def __delitem__(self, key: Any) -> None:
        if not self.contains_key(key):
            raise KeyError(key)
        self.remove(key)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HashMap):
            return NotImplemented
        if len(self) != len(other):
            return False
        for key, val in self.items():
            node = other.get_node_by_key(key)
            if node is None or node.value != val:
                return False
        return True

    __hash__ = None

    def __repr__(self) -> str:
        items = ', '.join(f'{k!r}: {v!r}' for k, v in self.items())
        return f'HashMap({{{items}}})'

    @classmethod
    def with_random_seed(cls, max_size: Optional[int] = None) -> 'HashMap':
        """Create a map whose bucket layout cannot be predicted from its keys."""
        return cls(max_size=max_size, seed=secrets.randbits(32))

    @classmethod
    def create(cls, **kwargs) -> 'HashMap':
        """Create a HashMap from keyword arguments."""
        return cls.from_dict(kwargs)

    @classmethod
    def from_dict(cls, d: dict, max_size: Optional[int] = None,
                  seed: Optional[int] = None) -> 'HashMap':
        """Create a HashMap from a dictionary, adding entries in dict order."""
        m = cls(max_size=max_size, seed=seed)
        for k, v in d.items():
            m.add(k, v)
        return m
