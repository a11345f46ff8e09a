"""
Unified command orchestrator for duplicate search.
Single place where scanning and grouping are wired together — used by the CLI and by library callers.
"""
import logging
from typing import List, Optional, Callable, Tuple

from bayan.core.models import DuplicateGroup, FileCandidate, GroupingStats, ScanParams
from bayan.core.scanner import FileScannerImpl
from bayan.core.grouper import FileGrouperImpl

logger = logging.getLogger(__name__)


class DuplicateSearchCommand:
    """
    Orchestrates the whole workflow:
    1. Walk the root directory and filter candidates
    2. Group candidates by block-wise content comparison

    Usage:
        params = ScanParams.from_human_readable("~/Downloads", min_size_str="1K")
        groups, stats = DuplicateSearchCommand().execute(params, progress_callback=printer)
    """

    def __init__(self):
        self._candidates: List[FileCandidate] = []

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[List[DuplicateGroup], GroupingStats]:
        """
        Run a duplicate search with the given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            ConfigurationError: If the name pattern is invalid
            RuntimeError: If the root directory is missing
            OSError: If the directory walk fails
        """
        scanner = FileScannerImpl.from_params(params)
        self._candidates = scanner.scan()
        if progress_callback:
            progress_callback("Scanning", len(self._candidates), None)

        grouper = FileGrouperImpl.from_params(params)
        if not self._candidates:
            logger.debug("No files found matching filters")
            return [], grouper.stats

        groups = grouper.build_groups(self._candidates, progress_callback=progress_callback)
        return groups, grouper.stats

    def get_candidates(self) -> List[FileCandidate]:
        """Get scanned candidates after execution."""
        return self._candidates.copy()
