from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

import pytest

from src.app.domain.exceptions import TaskInvocationError
from src.app.domain.models.context import CurationContext
from src.app.domain.models.repository_object import ObjectType, RepositoryObject
from src.app.domain.repositories import ObjectStore, Recorder
from src.app.infrastructure.memory.object_store import InMemoryObjectStore
from src.app.infrastructure.plugins.registry import PluginRegistry


class StubNativeTask:
    """Native task returning scripted status codes and logging every call."""

    def __init__(self, statuses: dict[str, int] | None = None, default: int = 0) -> None:
        self.statuses = statuses or {}
        self.default = default
        self.calls: list[tuple[str, Any]] = []
        self.curator = None
        self.task_name: str | None = None

    def init(self, curator, task_name: str) -> None:
        self.curator = curator
        self.task_name = task_name
        self.calls.append(("init", task_name))

    def perform(self, obj: RepositoryObject) -> int:
        self.calls.append(("perform", obj.handle))
        return self.statuses.get(obj.handle, self.default)

    def perform_id(self, ctx: CurationContext | None, object_id: str) -> int:
        self.calls.append(("perform_id", object_id))
        return self.statuses.get(object_id, self.default)


class StubScriptTask:
    def __init__(self, status: int = 0) -> None:
        self.status = status
        self.calls: list[tuple[str, Any]] = []

    def init(self, curator, task_name: str) -> None:
        self.calls.append(("init", task_name))

    def perform_dso(self, obj: RepositoryObject) -> int:
        self.calls.append(("perform_dso", obj.handle))
        return self.status

    def perform_id(self, ctx: CurationContext | None, object_id: str) -> int:
        self.calls.append(("perform_id", object_id))
        return self.status


class FailingTask(StubNativeTask):
    def __init__(self, fail_on: str) -> None:
        super().__init__()
        self.fail_on = fail_on

    def init(self, curator, task_name: str) -> None:
        super().init(curator, task_name)
        if self.fail_on == "init":
            raise TaskInvocationError(task_name, "cannot open configuration")

    def perform(self, obj: RepositoryObject) -> int:
        if self.fail_on == "perform":
            raise TaskInvocationError(self.task_name or "", "disk read failed")
        return super().perform(obj)


class StubRecorder:
    """In-memory recorder that counts initializations."""

    def __init__(self) -> None:
        self.init_calls = 0
        self.records: list[dict[str, Any]] = []

    def init(self) -> None:
        self.init_calls += 1

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
        self.records.append(
            {
                "timestamp": timestamp,
                "object_id": object_id,
                "actor_id": actor_id,
                "task_name": task_name,
                "type": record_type,
                "value": value,
                "status": status,
                "result": result,
            }
        )


class CloseableRecorder(StubRecorder):
    def __init__(self) -> None:
        super().__init__()
        self.closed = False

    def close(self) -> None:
        self.closed = True


class StubCuratorHandle:
    """Minimal curator exposing a resource table and a plugin registry."""

    def __init__(self, registry: PluginRegistry, objects: ObjectStore | None = None) -> None:
        self.registry = registry
        self.objects = objects or InMemoryObjectStore()
        self.resources: dict[str, tuple[Any, str | None]] = {}
        self.manage_calls = 0
        self.reports: list[str] = []
        self.results: dict[str, str] = {}

    def obtain_resource(self, key: str) -> Any | None:
        entry = self.resources.get(key)
        return entry[0] if entry is not None else None

    def manage_resource(self, key: str, resource: Any, policy: str | None = None) -> None:
        self.manage_calls += 1
        self.resources[key] = (resource, policy)

    def report(self, message: str) -> None:
        self.reports.append(message)

    def set_result(self, task_name: str, result: str) -> None:
        self.results[task_name] = result


def register_recorder(registry: PluginRegistry, factory: Callable[[], Any]) -> list[Any]:
    """Register ``factory`` as the recorder and return the list of built instances."""
    built: list[Any] = []

    def _factory() -> Any:
        recorder = factory()
        built.append(recorder)
        return recorder

    registry.register_single("curate", Recorder, _factory)
    return built


def item(handle: str, **kwargs: Any) -> RepositoryObject:
    return RepositoryObject(handle=handle, type=ObjectType.ITEM, **kwargs)


@pytest.fixture
def registry() -> PluginRegistry:
    return PluginRegistry()


@pytest.fixture
def community() -> RepositoryObject:
    """A community holding one collection of three items."""
    return RepositoryObject(
        handle="123/1",
        type=ObjectType.COMMUNITY,
        name="Physics",
        children=[
            RepositoryObject(
                handle="123/2",
                type=ObjectType.COLLECTION,
                name="Theses",
                children=[
                    item(
                        "123/3",
                        metadata={"dc.title": ["A"], "dc.date.issued": ["2020"]},
                        formats=["PDF", "Plain Text"],
                    ),
                    item("123/4", metadata={"dc.title": ["B"]}, formats=["PDF"]),
                    item(
                        "123/5",
                        metadata={"dc.title": ["C"], "dc.date.issued": ["2021"]},
                        formats=["PDF", "JPEG"],
                    ),
                ],
            )
        ],
    )
