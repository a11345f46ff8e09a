"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Block-wise content equality of two files.

Files of different size are never equal and are rejected without reading.
Otherwise blocks 0, 1, 2, ... of both files are fetched through the block cache
and compared by digest; the first differing digest ends the comparison.
Equal digests on every block are taken as equal content.
"""

import logging
import os
from typing import Optional

from bayan.core.cache import BlockCache
from bayan.core.errors import BlockReadError
from bayan.core.hasher import HasherImpl
from bayan.core.interfaces import BlockReader, EqualityTester, Hasher
from bayan.core.models import GroupingStats, HashAlgorithm

logger = logging.getLogger(__name__)


class BlockComparator(EqualityTester):
    """
    Compares files block by block using an injected reader and hasher.

    A file that cannot be read (vanished, permission denied) is logged,
    recorded in stats.unreadable_files, and compares unequal to everything.
    """

    def __init__(self, reader: BlockReader, hasher: Hasher, stats: Optional[GroupingStats] = None):
        self.reader = reader
        self.hasher = hasher
        self.stats = stats if stats is not None else GroupingStats()

    @classmethod
    def create(cls, block_size: int, algorithm: HashAlgorithm,
               stats: Optional[GroupingStats] = None) -> "BlockComparator":
        return cls(BlockCache(block_size), HasherImpl.for_algorithm(algorithm), stats)

    def are_equal(self, first_path: str, second_path: str) -> bool:
        self.stats.comparisons += 1

        try:
            first_size = os.path.getsize(first_path)
        except OSError as e:
            return self._unreadable(first_path, e)
        try:
            second_size = os.path.getsize(second_path)
        except OSError as e:
            return self._unreadable(second_path, e)

        if first_size != second_size:
            self.stats.size_mismatches += 1
            return False

        try:
            return self._compare_blocks(first_path, second_path)
        except BlockReadError as e:
            return self._unreadable(e.path, e)

    def _compare_blocks(self, first_path: str, second_path: str) -> bool:
        index = 0
        first_block = self.reader.read_block(first_path, index)
        second_block = self.reader.read_block(second_path, index)

        while first_block is not None and second_block is not None:
            if self.hasher.hash_block(first_block) != self.hasher.hash_block(second_block):
                return False
            index += 1
            first_block = self.reader.read_block(first_path, index)
            second_block = self.reader.read_block(second_path, index)

        if first_block is not None or second_block is not None:
            # Sizes matched when we started; the file changed underneath us
            logger.warning(f"File changed during comparison: {first_path} / {second_path}")
            return False
        return True

    def _unreadable(self, path: str, error: Exception) -> bool:
        if self.stats.add_unreadable(path):
            logger.warning(f"Cannot read {path}: {error}")
        else:
            logger.debug(f"Skipping unreadable {path}")
        return False
