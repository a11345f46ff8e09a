"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Directory traversal and candidate filtering.
Features:
- Walks the root directory in a stable (sorted) order with os.walk
- Yields every directory and file as a DirectoryEntry
- Keeps files matching the name mask, size floor, excluded-directory suffixes and level
- Returns an ordered list of FileCandidate objects
"""

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional
import time
import logging

from bayan.core.interfaces import FileScanner
from bayan.core.models import DirectoryEntry, FileCandidate, ScanParams
from bayan.core.pattern import compile_mask

logger = logging.getLogger(__name__)


class CandidateFilter:
    """
    Decides which entries of a raw listing take part in comparison.

    A file qualifies when ALL of the following hold:
    - it is not a directory
    - with depth restriction, its parent directory is the root itself
    - its parent directory path does not end with an excluded suffix
    - its size is at least min_size bytes
    - its name fully matches the name mask

    Raises ConfigurationError on construction if the mask is not a valid expression.
    """

    def __init__(
        self,
        root_dir: str,
        excluded_dirs: Optional[List[str]] = None,
        depth_restricted: bool = False,
        min_size: int = 0,
        name_pattern: str = "*"
    ):
        self.root_dir = os.path.abspath(root_dir)
        self.excluded_dirs = list(excluded_dirs) if excluded_dirs else []
        self.depth_restricted = depth_restricted
        self.min_size = min_size
        self.name_pattern = name_pattern
        self._regex = compile_mask(name_pattern)

    @classmethod
    def from_params(cls, params: ScanParams) -> "CandidateFilter":
        return cls(
            root_dir=params.root_dir,
            excluded_dirs=params.excluded_dirs,
            depth_restricted=params.depth_restricted,
            min_size=params.min_size_bytes,
            name_pattern=params.name_pattern,
        )

    def accepts(self, entry: DirectoryEntry) -> bool:
        if entry.is_dir:
            return False

        if self.depth_restricted and entry.parent != self.root_dir:
            return False

        if self._is_excluded_directory(entry.parent):
            logger.debug(f"Skipping {entry.path} (excluded directory)")
            return False

        if entry.size < self.min_size:
            logger.debug(f"Skipping {entry.path} (size {entry.size} bytes below minimum)")
            return False

        if self._regex.fullmatch(entry.name) is None:
            logger.debug(f"Skipping {entry.path} (name does not match '{self.name_pattern}')")
            return False

        return True

    def filter(self, entries: Iterable[DirectoryEntry]) -> List[FileCandidate]:
        """Qualifying files in the order the listing produced them."""
        return [
            FileCandidate(path=entry.path, size=entry.size, parent=entry.parent)
            for entry in entries
            if self.accepts(entry)
        ]

    def _is_excluded_directory(self, parent: str) -> bool:
        return any(parent.endswith(suffix) for suffix in self.excluded_dirs)


class FileScannerImpl(FileScanner):
    """
    Walks a root directory and produces the candidates for comparison.

    Attributes:
        root_dir: Absolute root directory to scan
        depth_restricted: Only look at direct children of the root
        candidate_filter: Filter applied to the raw listing
    """

    def __init__(self, root_dir: str, candidate_filter: CandidateFilter):
        self.root_dir = os.path.abspath(root_dir)
        self.candidate_filter = candidate_filter
        self.depth_restricted = candidate_filter.depth_restricted

    @classmethod
    def from_params(cls, params: ScanParams) -> "FileScannerImpl":
        return cls(params.root_dir, CandidateFilter.from_params(params))

    def entries(self) -> Iterator[DirectoryEntry]:
        """
        Yields every directory and file below the root, names sorted per directory.
        Any traversal error aborts the walk.
        """
        root_path = Path(self.root_dir)
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)

        for root, dirs, files in os.walk(self.root_dir, onerror=_raise_walk_error):
            dirs.sort()
            for dirname in dirs:
                path = os.path.join(root, dirname)
                yield DirectoryEntry(path=path, size=0, parent=root, is_dir=True)

            # Deeper entries can never qualify under depth restriction
            if self.depth_restricted:
                dirs[:] = []

            for filename in sorted(files):
                path = os.path.join(root, filename)
                yield DirectoryEntry(path=path, size=os.path.getsize(path), parent=root)

    def scan(self) -> List[FileCandidate]:
        """
        Returns the filtered list of files found in the directory tree.
        """
        logger.debug(f"Scanning directory: {self.root_dir}")
        start_time = time.time()

        candidates = self.candidate_filter.filter(self.entries())

        elapsed_time = time.time() - start_time
        logger.debug(f"Total scan time: {elapsed_time:.2f} seconds")
        logger.debug(f"Scan completed. Found {len(candidates)} matching files.")
        return candidates


def _raise_walk_error(error: OSError) -> None:
    raise error
