"""
Key normalization for HashMap.

Keys are turned into one of three canonical variants before they are hashed:
``str``, ``int`` and ``ObjectKey`` (an identity wrapper around any other
object). Everything else is rejected with a KeyTypeError subclass.
"""

from typing import Any, Union

from .exceptions import InvalidKeyTypeError, UnsupportedKeyTypeError


# Ints up to this size hash over their decimal digits, larger ones over their
# two's complement bytes (str() refuses very long ints).
_DECIMAL_BITS = 4096

# Built-in value types whose identity is not a meaningful key.
_UNSUPPORTED_TYPES = (
    float, complex, bytes, bytearray, memoryview,
    list, tuple, dict, set, frozenset, range, slice,
)


class ObjectKey:
    """
    Identity key for arbitrary objects.

    Two ObjectKeys are equal only when they wrap the very same object. The
    wrapped object is referenced for as long as the key lives, so its id()
    cannot be recycled while it sits in a map.
    """

    __slots__ = ('obj', 'token')

    def __init__(self, obj: Any):
        self.obj = obj
        self.token = f'{type(obj).__qualname__}@{id(obj):x}'

    def __eq__(self, other) -> bool:
        return isinstance(other, ObjectKey) and other.obj is self.obj

    def __hash__(self) -> int:
        return id(self.obj)

    def __repr__(self) -> str:
        return f'ObjectKey({self.token})'


NormalizedKey = Union[str, int, ObjectKey]


def normalize_key(key: Any) -> NormalizedKey:
    """
    Convert key into its canonical form.

    Raises:
        InvalidKeyTypeError: key is None.
        UnsupportedKeyTypeError: key is a float, bytes or a built-in container.
    """
    if key is None:
        raise InvalidKeyTypeError(key, "None cannot be used as a key")
    if isinstance(key, ObjectKey):
        return key
    # bool, IntEnum and str subclasses reduce to the exact base type so equal
    # keys always hash over the same bytes.
    if isinstance(key, int):
        return int.__int__(key)
    if isinstance(key, str):
        return str.__str__(key)
    if isinstance(key, _UNSUPPORTED_TYPES):
        raise UnsupportedKeyTypeError(key)
    return ObjectKey(key)


def key_bytes(key: NormalizedKey) -> bytes:
    """Byte representation of a normalized key, the input of the hash function."""
    if isinstance(key, str):
        return key.encode('utf-8', 'surrogatepass')
    if isinstance(key, int):
        if key.bit_length() <= _DECIMAL_BITS:
            return str(key).encode('ascii')
        return key.to_bytes((key.bit_length() + 8) // 8, 'little', signed=True)
    if isinstance(key, ObjectKey):
        return key.token.encode('utf-8')
    raise UnsupportedKeyTypeError(key, f"{key!r} is not a normalized key")
