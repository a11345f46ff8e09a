"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate detection engine.
Structural typing keeps every collaborator replaceable (tests inject counting
readers, a parallel grouper could inject a locked cache).

Key Components:
---------------
- HashFunction: a single digest algorithm over a byte block.
- Hasher: block digest as used by the comparator.
- BlockReader: sequential, cached access to fixed-size file blocks.
- EqualityTester: exact content equality of two files.
- FileScanner: raw directory listing and filtered candidates.
- GroupBuilder: partition of candidates into duplicate groups.
"""

from typing import Protocol, Iterable, Iterator, List, Optional, Callable
from bayan.core.models import DirectoryEntry, FileCandidate, DuplicateGroup, GroupingStats


# ===== Interfaces =====

class HashFunction(Protocol):
    """Digest of a byte block as a printable string."""

    @staticmethod
    def hash(data: bytes) -> str:
        ...


class Hasher(Protocol):
    """Interface for hashing file blocks."""
    def hash_block(self, data: bytes) -> str: ...


class BlockReader(Protocol):
    """
    Interface for reading file content block by block.

    read_block returns None once the offset reaches end of file and raises
    BlockReadError when the file cannot be read at all.
    """
    block_size: int

    def read_block(self, path: str, index: int) -> Optional[bytes]: ...


class EqualityTester(Protocol):
    """Interface for comparing two files for identical content."""
    def are_equal(self, first_path: str, second_path: str) -> bool: ...


class FileScanner(Protocol):
    """
    Interface for walking a root directory.

    Methods:
        entries: raw listing of every file and directory below the root.
        scan: entries that pass the candidate filter, in traversal order.
    """
    def entries(self) -> Iterator[DirectoryEntry]: ...

    def scan(self) -> List[FileCandidate]: ...


class GroupBuilder(Protocol):
    """
    Interface for partitioning candidates into groups of identical files.
    """
    stats: GroupingStats

    def build_groups(
        self,
        candidates: Iterable[FileCandidate],
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[DuplicateGroup]:
        """
        Args:
            candidates: Filtered files in traversal order.
            progress_callback: Optional callback for progress updates (stage, current, total).

        Returns:
            Disjoint groups of two or more identical files.
        """
        ...
