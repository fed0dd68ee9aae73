"""
Setup script for pyhashmap.

Install with: pip install .
Develop with: pip install -e .[test]
Create wheel: python setup.py bdist_wheel
"""

from setuptools import setup, find_packages

long_description = """
pyhashmap - Chained Hash Map
============================

A pure Python hash map using a fixed-size bucket table, CRC32 hashing with
the division method, and singly linked chains for collisions.

Features:
- Heterogeneous keys: str, int, bool and arbitrary objects (by identity)
- Lazy chain creation, empty buckets dropped on removal
- Optional per-instance hash seed
- Java-like API (add, remove, key_set) and Pythonic API (m[k], len, in)

Example:
    from pyhashmap import HashMap

    m = HashMap()
    m.add('a', 1)
    m['b'] = 2
    m.key_set()  # ['a', 'b'] in bucket order
"""

setup(
    name="pyhashmap",
    version="1.0.0",
    description="Chained hash map with a fixed bucket table",
    long_description=long_description,
    long_description_content_type="text/plain",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    zip_safe=False,
)
