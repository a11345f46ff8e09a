"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for directory scanning and block-wise duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union, Tuple, FrozenSet
import os
from enum import Enum

from bayan.core.errors import ConfigurationError


# =============================
# Enums
# =============================

class HashAlgorithm(Enum):
    """
    Block hash used to decide whether two blocks are equal.
    """
    CRC32 = "crc32"
    MD5 = "md5"
    XXHASH = "xxhash"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            HashAlgorithm.CRC32: "CRC-32",
            HashAlgorithm.MD5: "MD5",
            HashAlgorithm.XXHASH: "xxHash64",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            HashAlgorithm.CRC32: "32-bit checksum, decimal digest (fastest)",
            HashAlgorithm.MD5: "128-bit cryptographic digest, hex",
            HashAlgorithm.XXHASH: "64-bit non-cryptographic digest, hex",
        }
        return mapping.get(self, self.value)

    @classmethod
    def from_name(cls, name: str) -> "HashAlgorithm":
        """
        Parse an algorithm name (case-insensitive, aliases allowed).
        Raises ConfigurationError for anything unknown instead of falling back to a default.
        """
        key = (name or "").strip().lower()
        algorithm = _ALGORITHM_NAMES.get(key)
        if algorithm is None:
            valid = ", ".join(sorted(_ALGORITHM_NAMES))
            raise ConfigurationError(f"Unknown hash algorithm: '{name}'. Valid options: {valid}")
        return algorithm

    def __repr__(self) -> str:
        return self.value


_ALGORITHM_NAMES = {
    "crc32": HashAlgorithm.CRC32,
    "crc": HashAlgorithm.CRC32,
    "md5": HashAlgorithm.MD5,
    "xxhash": HashAlgorithm.XXHASH,
    "xxh64": HashAlgorithm.XXHASH,
}


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class DirectoryEntry:
    """One item of a raw recursive directory listing (file or directory)."""
    path: str
    size: int
    parent: str
    is_dir: bool = False

    @property
    def name(self) -> str:
        return os.path.basename(self.path)


@dataclass(frozen=True)
class FileCandidate:
    """
    A file that passed every inclusion filter and takes part in comparison.
    """
    path: str
    size: int  # in bytes
    parent: str

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    def __repr__(self):
        return f"<FileCandidate path={self.path}, size={self.size}>"


@dataclass(frozen=True)
class DuplicateGroup:
    """
    Files known to be pairwise content-identical.
    files[0] is the representative every other member was compared against;
    the rest follow in traversal order.
    """
    size: int
    files: Tuple[str, ...]

    @property
    def paths(self) -> FrozenSet[str]:
        return frozenset(self.files)

    @property
    def representative(self) -> str:
        return self.files[0]

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.files)

    def __contains__(self, path: str) -> bool:
        return path in self.files

    def __repr__(self):
        return f"<DuplicateGroup size={self.size}, count={len(self.files)}>"


@dataclass
class GroupingStats:
    """
    Statistics collected during one grouping pass.
    """
    candidates: int = 0
    comparisons: int = 0
    size_mismatches: int = 0
    blocks_read: int = 0
    cache_hits: int = 0
    groups_found: int = 0
    total_time: float = 0.0
    unreadable_files: List[str] = field(default_factory=list)

    def add_unreadable(self, path: str) -> bool:
        """Record a path once. Returns False if it was already recorded."""
        if path in self.unreadable_files:
            return False
        self.unreadable_files.append(path)
        return True

    def print_summary(self) -> str:
        lines = [
            "Grouping Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Candidates: {self.candidates}",
            f"Comparisons: {self.comparisons} ({self.size_mismatches} rejected by size)",
            f"Blocks read from disk: {self.blocks_read}",
            f"Blocks served from cache: {self.cache_hits}",
            f"Duplicate groups: {self.groups_found}",
        ]
        if self.unreadable_files:
            lines.append(f"Unreadable files: {len(self.unreadable_files)}")
        return "\n".join(lines)


"""
DTO for scan parameters with built-in validation.
Interface-agnostic — used by the command layer and the CLI.
"""
from bayan.utils.convert_utils import ConvertUtils

DEFAULT_BLOCK_SIZE = 4096
DEFAULT_NAME_PATTERN = "*"


@dataclass
class ScanParams:
    """Parameters for one duplicate search, validated on creation."""
    root_dir: str
    excluded_dirs: List[str] = field(default_factory=list)
    level: int = 1
    min_size_bytes: int = 0
    name_pattern: str = DEFAULT_NAME_PATTERN
    block_size_bytes: int = DEFAULT_BLOCK_SIZE
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.CRC32

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ConfigurationError("Root directory cannot be empty")

        if self.min_size_bytes < 0:
            raise ConfigurationError("Minimum size cannot be negative")

        if self.block_size_bytes <= 0:
            raise ConfigurationError("Block size must be positive")

        if self.level < 0:
            raise ConfigurationError("Level cannot be negative")

        if not isinstance(self.algorithm, HashAlgorithm):
            self.algorithm = HashAlgorithm.from_name(self.algorithm)

        # Trailing separators would never match a parent directory path
        normalized = []
        for suffix in self.excluded_dirs or []:
            suffix = suffix.strip().rstrip("/\\")
            if suffix:
                normalized.append(suffix)
        self.excluded_dirs = normalized

    @property
    def depth_restricted(self) -> bool:
        """Level 0 means only direct children of the root are considered."""
        return self.level == 0

    @staticmethod
    def from_human_readable(
            root_dir: str,
            min_size_str: str = "0",
            block_size_str: str = str(DEFAULT_BLOCK_SIZE),
            excluded_dirs: Optional[List[str]] = None,
            level: int = 1,
            name_pattern: str = DEFAULT_NAME_PATTERN,
            algorithm: Union[HashAlgorithm, str] = HashAlgorithm.CRC32,
    ) -> 'ScanParams':
        """
        Factory method to create params from human-readable inputs.
        Useful for CLI argument parsing.
        """
        try:
            min_size = ConvertUtils.parse_size(min_size_str)
        except ValueError as e:
            raise ConfigurationError(f"Minimum size: {e}") from e
        try:
            block_size = ConvertUtils.parse_size(block_size_str)
        except ValueError as e:
            raise ConfigurationError(f"Block size: {e}") from e

        return ScanParams(
            root_dir=root_dir,
            excluded_dirs=list(excluded_dirs or []),
            level=level,
            min_size_bytes=min_size,
            name_pattern=name_pattern,
            block_size_bytes=block_size,
            algorithm=algorithm,
        )
