"""Defaults for HashMap construction.

Values can be overridden through the environment before the package is
imported:

    PYHASHMAP_MAX_SIZE   number of buckets (default 128)
    PYHASHMAP_SEED       CRC32 start value (default 0)
"""

import os

MAX_SEED = 1 << 32


def validate_max_size(value) -> int:
    """Return value if it is a usable bucket count, raise otherwise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"max_size must be an int, got {type(value).__name__}")
    if value < 1:
        raise ValueError(f"max_size must be at least 1, got {value}")
    return value


def validate_seed(value) -> int:
    """Return value if it fits a CRC32 start value, raise otherwise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"seed must be an int, got {type(value).__name__}")
    if not 0 <= value < MAX_SEED:
        raise ValueError(f"seed must be in [0, 2**32), got {value}")
    return value


DEFAULT_MAX_SIZE = validate_max_size(int(os.getenv("PYHASHMAP_MAX_SIZE", "128")))
DEFAULT_SEED = validate_seed(int(os.getenv("PYHASHMAP_SEED", "0")))
