from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from src.app.domain.models.context import CurationContext
from src.app.domain.models.curation_job import CurationJob
from src.app.domain.models.repository_object import RepositoryObject

if TYPE_CHECKING:
    from src.app.infrastructure.plugins.registry import PluginRegistry


class Recorder(Protocol):
    """Sink that persists curation records keyed by object, actor, task and status.

    A recorder instance is shared by every task of a curation session, so
    implementations must tolerate concurrent ``record`` calls.
    """

    def init(self) -> None:
        """Prepare the sink before the first record is written."""

    def record(
        self,
        timestamp: datetime,
        object_id: str | None,
        actor_id: str | None,
        task_name: str,
        record_type: str,
        value: str,
        status: int,
        result: str | None,
    ) -> None:
        """Persist one curation record."""


@runtime_checkable
class Closeable(Protocol):
    def close(self) -> None: ...


class ObjectStore(Protocol):
    """Lookup of repository objects by persistent identifier."""

    def find(self, ctx: CurationContext | None, object_id: str) -> RepositoryObject | None:
        """Return the object identified by ``object_id`` or ``None``."""


class TaskQueueRepository(Protocol):
    """Repository contract for deferring curation jobs."""

    def enqueue(self, job: CurationJob) -> str:
        """Schedule a job and return the queue's identifier for it."""


class CuratorHandle(Protocol):
    """Services a curator offers to the tasks it drives."""

    @property
    def registry(self) -> PluginRegistry: ...

    @property
    def objects(self) -> ObjectStore: ...

    def obtain_resource(self, key: str) -> Any | None: ...

    def manage_resource(self, key: str, resource: Any, policy: str | None = None) -> None: ...

    def report(self, message: str) -> None: ...

    def set_result(self, task_name: str, result: str) -> None: ...
