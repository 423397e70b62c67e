from __future__ import annotations

from src.app.domain.exceptions import TaskLifecycleError
from src.app.domain.models.context import CurationContext
from src.app.domain.models.curation_status import CurationStatus
from src.app.domain.models.repository_object import RepositoryObject
from src.app.domain.repositories import CuratorHandle


class AbstractCurationTask:
    """Convenience base for native tasks.

    Subclasses implement :meth:`perform`; distributive tasks typically call
    :meth:`distribute` from it and override :meth:`perform_object`.
    """

    def __init__(self) -> None:
        self._curator: CuratorHandle | None = None
        self._task_name: str | None = None

    def init(self, curator: CuratorHandle, task_name: str) -> None:
        self._curator = curator
        self._task_name = task_name

    @property
    def curator(self) -> CuratorHandle:
        if self._curator is None:
            raise TaskLifecycleError(type(self).__name__, "use", "CONSTRUCTED")
        return self._curator

    @property
    def task_name(self) -> str:
        return self._task_name or type(self).__name__

    def perform(self, obj: RepositoryObject) -> int:
        raise NotImplementedError

    def perform_id(self, ctx: CurationContext | None, object_id: str) -> int:
        obj = self.curator.objects.find(ctx, object_id)
        if obj is None:
            self.set_result(f"Object {object_id} could not be resolved")
            return CurationStatus.FAIL
        return self.perform(obj)

    def distribute(self, obj: RepositoryObject) -> None:
        for member in obj.walk():
            self.perform_object(member)

    def perform_object(self, obj: RepositoryObject) -> None:
        """Visit one member during :meth:`distribute`."""

    def report(self, message: str) -> None:
        self.curator.report(message)

    def set_result(self, result: str) -> None:
        self.curator.set_result(self.task_name, result)
