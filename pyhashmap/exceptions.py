"""Exceptions raised by pyhashmap."""

from typing import Any


class HashMapError(Exception):
    """Base class for all pyhashmap errors."""


class KeyTypeError(HashMapError, TypeError):
    """A key could not be normalized into a hashable canonical form."""

    def __init__(self, key: Any, message: str = ""):
        self.key = key
        if not message:
            message = f"key of type {type(key).__name__!r} is not supported"
        super().__init__(message)


class UnsupportedKeyTypeError(KeyTypeError):
    """The key is of an acceptable kind but its shape cannot be hashed.

    Floats, bytes and built-in containers fall in this category.
    """


class InvalidKeyTypeError(KeyTypeError):
    """The key belongs to a category that can never be a key (``None``)."""
