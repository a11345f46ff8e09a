from typing import List
from bayan.core.models import DuplicateGroup


class DuplicateService:
    @staticmethod
    def keep_only_one_file_per_group(groups: List[DuplicateGroup]) -> List[str]:
        """
        Keeps the representative of every group and returns the paths of the rest,
        in group order, for deletion.
        """
        files_to_delete = []
        for group in groups:
            files_to_delete.extend(group.files[1:])
        return files_to_delete

    @staticmethod
    def reclaimable_bytes(groups: List[DuplicateGroup]) -> int:
        """Space freed by keeping one file per group."""
        return sum(group.size * (group.duplicate_count - 1) for group in groups)
