"""
pyhashmap - a chained hash map with a fixed bucket table.

    from pyhashmap import HashMap

    m = HashMap()
    m.add('a', 1)
    m.get_node_by_key('a').value   # 1
"""

import logging

from .chain import Node, SinglyLinkedList
from .exceptions import (
    HashMapError,
    InvalidKeyTypeError,
    KeyTypeError,
    UnsupportedKeyTypeError,
)
from .hash_map import HashMap
from .normalizer import ObjectKey, key_bytes, normalize_key

__version__ = "1.0.0"

__all__ = [
    "HashMap",
    "Node",
    "SinglyLinkedList",
    "ObjectKey",
    "normalize_key",
    "key_bytes",
    "HashMapError",
    "KeyTypeError",
    "UnsupportedKeyTypeError",
    "InvalidKeyTypeError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
