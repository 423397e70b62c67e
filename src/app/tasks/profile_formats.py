from __future__ import annotations

from collections import Counter

from src.app.domain.models.curation_status import CurationStatus
from src.app.domain.models.repository_object import ObjectType, RepositoryObject
from src.app.domain.models.task_policy import TaskPolicy
from src.app.tasks.base import AbstractCurationTask

PROFILE_FORMATS_POLICY = TaskPolicy.builder().distributive().build()


class ProfileFormats(AbstractCurationTask):
    """Tally file formats across every item below an object."""

    def __init__(self) -> None:
        super().__init__()
        self._counts: Counter[str] = Counter()

    def perform(self, obj: RepositoryObject) -> int:
        self._counts.clear()
        self.distribute(obj)
        if not self._counts:
            self.set_result(f"No files found under {obj.handle}")
            return CurationStatus.SKIP
        lines = [f"{fmt} ({count})" for fmt, count in sorted(self._counts.items())]
        for line in lines:
            self.report(line)
        self.set_result(", ".join(lines))
        return CurationStatus.SUCCESS

    def perform_object(self, obj: RepositoryObject) -> None:
        if obj.type is ObjectType.ITEM:
            self._counts.update(obj.formats)
