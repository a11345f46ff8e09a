"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Block digest algorithms and the hasher the comparator uses.

Every algorithm is a HashFunction: a pure function of the input bytes.
Digests are strings so that any two algorithms can share the comparison code.
"""

import hashlib
import zlib

import xxhash

from bayan.core.interfaces import Hasher, HashFunction
from bayan.core.models import HashAlgorithm


class Crc32AlgorithmImpl(HashFunction):
    @staticmethod
    def hash(data: bytes) -> str:
        return str(zlib.crc32(data) & 0xFFFFFFFF)


class Md5AlgorithmImpl(HashFunction):
    @staticmethod
    def hash(data: bytes) -> str:
        return hashlib.md5(data).hexdigest().upper()


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashFunction):
    @staticmethod
    def hash(data: bytes) -> str:
        return xxhash.xxh64(data).hexdigest()


_ALGORITHMS = {
    HashAlgorithm.CRC32: Crc32AlgorithmImpl,
    HashAlgorithm.MD5: Md5AlgorithmImpl,
    HashAlgorithm.XXHASH: XXHashAlgorithmImpl,
}


class HasherImpl(Hasher):
    """
    A hasher over any algorithm implementing the HashFunction interface.
    The algorithm is fixed at construction.
    """

    def __init__(self, algorithm: HashFunction):
        self.algorithm = algorithm

    def hash_block(self, data: bytes) -> str:
        return self.algorithm.hash(data)

    @classmethod
    def for_algorithm(cls, algorithm: HashAlgorithm) -> "HasherImpl":
        """Build a hasher for a configured HashAlgorithm value."""
        return cls(_ALGORITHMS[algorithm]())
