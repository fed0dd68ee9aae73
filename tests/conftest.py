import itertools

import pytest

from pyhashmap import HashMap


def colliding_keys(m, count, start=0):
    """Return count int keys that all land in the same bucket of m."""
    by_bucket = {}
    for key in itertools.count(start):
        keys = by_bucket.setdefault(m.bucket_index(key), [])
        keys.append(key)
        if len(keys) == count:
            return keys


def keys_in_distinct_buckets(m, count, start=0):
    """Return count int keys that each land in a different bucket of m."""
    seen = set()
    keys = []
    for key in itertools.count(start):
        index = m.bucket_index(key)
        if index not in seen:
            seen.add(index)
            keys.append(key)
            if len(keys) == count:
                return keys


@pytest.fixture
def empty_map():
    return HashMap()


@pytest.fixture
def small_map():
    """A map with 8 buckets, so collisions are frequent."""
    return HashMap(max_size=8)


@pytest.fixture
def populated_map():
    """A map holding keys 0..499 mapped to 'value-<key>'."""
    m = HashMap()
    for i in range(500):
        m.add(i, f'value-{i}')
    return m
