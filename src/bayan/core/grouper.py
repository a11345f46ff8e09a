"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Partitions candidates into groups of identical files.

Each candidate not yet placed in a group becomes a representative and is compared
against every later candidate that is still unassigned. Matches form a group
together with the representative; representatives without matches are dropped.
Equality per block digest is transitive, so members are never compared to each other.
Worst case is O(n²) comparisons; size mismatches are rejected before any read.
"""

import logging
import time
from typing import Callable, Iterable, List, Optional, Set

from bayan.core.comparator import BlockComparator
from bayan.core.interfaces import EqualityTester, GroupBuilder
from bayan.core.models import DuplicateGroup, FileCandidate, GroupingStats, ScanParams

logger = logging.getLogger(__name__)


class FileGrouperImpl(GroupBuilder):
    """
    Groups candidates with an injected EqualityTester.

    When the tester is a BlockComparator the grouper shares its stats object
    and copies the block cache counters into it after every pass.
    """

    def __init__(self, tester: EqualityTester, stats: Optional[GroupingStats] = None):
        self.tester = tester
        if stats is None:
            stats = getattr(tester, "stats", None) or GroupingStats()
        self.stats = stats

    @classmethod
    def from_params(cls, params: ScanParams) -> "FileGrouperImpl":
        stats = GroupingStats()
        comparator = BlockComparator.create(params.block_size_bytes, params.algorithm, stats)
        return cls(comparator, stats)

    def build_groups(
        self,
        candidates: Iterable[FileCandidate],
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[DuplicateGroup]:
        files = list(candidates)
        total = len(files)
        start_time = time.time()
        self.stats.candidates = total

        groups: List[DuplicateGroup] = []
        assigned: Set[str] = set()

        for i, representative in enumerate(files):
            if representative.path not in assigned:
                matches = [
                    other.path
                    for other in files[i + 1:]
                    if other.path not in assigned
                    and self.tester.are_equal(representative.path, other.path)
                ]
                if matches:
                    group = DuplicateGroup(size=representative.size,
                                           files=(representative.path, *matches))
                    assigned.update(group.files)
                    groups.append(group)
                    logger.debug(f"Group of {group.duplicate_count} files: {representative.path}")

            if progress_callback:
                progress_callback("Comparing", i + 1, total)

        self.stats.groups_found = len(groups)
        self.stats.total_time += time.time() - start_time
        self._collect_cache_counters()
        logger.debug(f"Grouping completed. {len(groups)} group(s) from {total} candidates.")
        return groups

    def _collect_cache_counters(self) -> None:
        reader = getattr(self.tester, "reader", None)
        if reader is None:
            return
        self.stats.blocks_read = getattr(reader, "reads", 0)
        self.stats.cache_hits = getattr(reader, "hits", 0)
