from __future__ import annotations

from collections.abc import Sequence

from src.app.domain.models.curation_status import CurationStatus
from src.app.domain.models.repository_object import ObjectType, RepositoryObject
from src.app.domain.models.task_policy import TaskPolicy
from src.app.tasks.base import AbstractCurationTask

DEFAULT_REQUIRED_FIELDS = ("dc.title", "dc.date.issued")

REQUIRED_METADATA_POLICY = (
    TaskPolicy.builder()
    .record("requiredmetadata", "missing", [CurationStatus.FAIL])
    .build()
)


class RequiredMetadata(AbstractCurationTask):
    """Fail items lacking a value for any required metadata field."""

    def __init__(self, fields: Sequence[str] = DEFAULT_REQUIRED_FIELDS) -> None:
        super().__init__()
        self._fields = tuple(fields)

    def perform(self, obj: RepositoryObject) -> int:
        if obj.type is not ObjectType.ITEM:
            return CurationStatus.SKIP
        missing = [field for field in self._fields if not obj.metadata.get(field)]
        if missing:
            message = f"Item {obj.handle} missing required field(s): {', '.join(missing)}"
            self.report(message)
            self.set_result(message)
            return CurationStatus.FAIL
        self.set_result(f"Item {obj.handle} has all required fields")
        return CurationStatus.SUCCESS
