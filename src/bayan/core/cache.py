"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/cache.py
Per-file cache of fixed-size blocks.

A file compared against many partners is read from storage once: every block
read is appended to an in-memory buffer for that file and later requests are
sliced out of it. Buffers only grow and live for the whole grouping pass.
"""

import logging
from typing import Dict, Optional, Set

from bayan.core.errors import BlockReadError
from bayan.core.interfaces import BlockReader

logger = logging.getLogger(__name__)


class BlockCache(BlockReader):
    """
    Sequential block reader with an append-only buffer per file.

    Callers request blocks 0, 1, 2, ... of a file in order. A block beyond the
    buffered region is read from storage and appended; a block that would leave
    a gap in the buffer is still returned but not cached.

    Attributes:
        block_size: Size of every block except possibly the last one of a file
        reads: Number of block reads that went to storage
        hits: Number of blocks served from memory
    """

    def __init__(self, block_size: int):
        if block_size <= 0:
            raise ValueError("Block size must be positive")
        self.block_size = block_size
        self.reads = 0
        self.hits = 0
        self._buffers: Dict[str, bytearray] = {}
        self._complete: Set[str] = set()  # files whose end was reached

    def read_block(self, path: str, index: int) -> Optional[bytes]:
        """
        Return block `index` of `path`, or None when the block starts at or past end of file.
        Raises BlockReadError when the file cannot be opened or read.
        """
        if index < 0:
            raise ValueError(f"Block index cannot be negative: {index}")

        offset = index * self.block_size
        buffer = self._buffers.get(path)

        if buffer is not None and len(buffer) > offset:
            self.hits += 1
            return bytes(buffer[offset:offset + self.block_size])

        if path in self._complete:
            return None

        data = self._read_from_storage(path, offset)
        in_order = self.cached_size(path) == offset

        if in_order:
            if data:
                self._buffers.setdefault(path, bytearray()).extend(data)
            if len(data) < self.block_size:
                self._complete.add(path)
        else:
            logger.debug(f"Out-of-order read of block {index} of {path}, not cached")

        return data or None

    def cached_size(self, path: str) -> int:
        """Number of bytes currently buffered for `path`."""
        buffer = self._buffers.get(path)
        return len(buffer) if buffer is not None else 0

    def clear(self) -> None:
        self._buffers.clear()
        self._complete.clear()

    def _read_from_storage(self, path: str, offset: int) -> bytes:
        """Reads up to one block at the given offset; b'' at end of file."""
        self.reads += 1
        logger.debug(f"Reading {path} at offset {offset}")
        try:
            with open(path, 'rb') as f:
                f.seek(offset)
                return f.read(self.block_size)
        except OSError as e:
            raise BlockReadError(path, offset, e.strerror or str(e)) from e
