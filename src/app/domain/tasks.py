from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from src.app.domain.models.context import CurationContext
from src.app.domain.models.repository_object import RepositoryObject
from src.app.domain.models.task_policy import TaskPolicy
from src.app.domain.repositories import CuratorHandle


class CurationTask(Protocol):
    """Contract implemented by native curation tasks."""

    def init(self, curator: CuratorHandle, task_name: str) -> None:
        """Bind the task to the curator driving it."""

    def perform(self, obj: RepositoryObject) -> int:
        """Curate ``obj`` and return a status code."""

    def perform_id(self, ctx: CurationContext | None, object_id: str) -> int:
        """Curate the object identified by ``object_id`` and return a status code."""


class ScriptTask(Protocol):
    """Contract implemented by tasks loaded from script files.

    Only the object entry point differs from ``CurationTask``: scripts curate
    objects through ``perform_dso``. ``perform_id`` keeps the native name so
    the wrapper calls it the same way for both shapes.
    """

    def init(self, curator: CuratorHandle, task_name: str) -> None: ...

    def perform_dso(self, obj: RepositoryObject) -> int: ...

    def perform_id(self, ctx: CurationContext | None, object_id: str) -> int: ...


@dataclass(frozen=True)
class NativeTask:
    impl: CurationTask
    policy: TaskPolicy = field(default_factory=TaskPolicy)


@dataclass(frozen=True)
class ScriptedTask:
    impl: ScriptTask


TaskVariant = NativeTask | ScriptedTask
