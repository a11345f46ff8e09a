"""
Bayan — finds groups of byte-identical files in a directory tree.

Core features:
- Name mask, minimum size, excluded directory suffixes and level filters
- Block-by-block comparison with CRC-32, MD5 or xxHash64 digests
- Per-file block cache so every block is read from disk at most once
- CLI with optional safe deletion to system trash (via send2trash)
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("bayan")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from bayan.commands import DuplicateSearchCommand
from bayan.core import (
    ScanParams, HashAlgorithm, FileCandidate, DuplicateGroup, GroupingStats, ConfigurationError)
from bayan.utils.convert_utils import ConvertUtils
from bayan.services import DuplicateService, FileService

__all__ = [
    "DuplicateSearchCommand",
    "ScanParams",
    "HashAlgorithm",
    "FileCandidate",
    "DuplicateGroup",
    "GroupingStats",
    "ConfigurationError",
    "ConvertUtils",
    "DuplicateService",
    "FileService",
    "__version__",
]
