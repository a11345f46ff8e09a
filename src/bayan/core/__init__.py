"""
Core duplicate detection engine — scanner, block cache, hasher, comparator and grouper.

This package contains the whole comparison pipeline of bayan:
- FileScannerImpl + CandidateFilter: directory walk with name/size/directory/level filters
- HasherImpl: CRC-32, MD5 or xxHash64 block digests
- BlockCache: per-file append-only cache of blocks already read
- BlockComparator: block-by-block equality with size short-circuit
- FileGrouperImpl: partition of candidates into duplicate groups
- Models: FileCandidate, DuplicateGroup, ScanParams and statistics

All components are pure Python and synchronous.
"""

from .errors import ConfigurationError, BlockReadError
from .models import (
    HashAlgorithm, DirectoryEntry, FileCandidate, DuplicateGroup, GroupingStats, ScanParams)
from .hasher import HasherImpl, Crc32AlgorithmImpl, Md5AlgorithmImpl, XXHashAlgorithmImpl
from .cache import BlockCache
from .pattern import wildcard_to_regex, matches_mask
from .scanner import CandidateFilter, FileScannerImpl
from .comparator import BlockComparator
from .grouper import FileGrouperImpl

__all__ = [
    "ConfigurationError",
    "BlockReadError",
    "HashAlgorithm",
    "DirectoryEntry",
    "FileCandidate",
    "DuplicateGroup",
    "GroupingStats",
    "ScanParams",
    "HasherImpl",
    "Crc32AlgorithmImpl",
    "Md5AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "BlockCache",
    "wildcard_to_regex",
    "matches_mask",
    "CandidateFilter",
    "FileScannerImpl",
    "BlockComparator",
    "FileGrouperImpl",
]
