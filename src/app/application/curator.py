from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import inject

from src.app.application.resolved_task import ResolvedTask
from src.app.application.resolver import TaskResolver
from src.app.application.resources import ResourceTable
from src.app.domain.exceptions import TaskLifecycleError
from src.app.domain.models.context import CurationContext
from src.app.domain.models.curation_job import CurationJob
from src.app.domain.models.curation_status import CurationStatus
from src.app.domain.models.invocation_result import InvocationResult
from src.app.domain.models.invoked import Invoked
from src.app.domain.models.repository_object import RepositoryObject
from src.app.domain.repositories import ObjectStore, TaskQueueRepository
from src.app.infrastructure.plugins.registry import PluginRegistry

logger = logging.getLogger(__name__)


class Curator:
    """Drives a list of curation tasks over repository objects.

    The curator owns the resolved tasks and the session's resource table.
    Use it as a context manager so shared resources are disposed on exit::

        with Curator() as curator:
            curator.add_task("requiredmetadata").curate(collection)
            status = curator.get_status("requiredmetadata")
    """

    def __init__(
        self,
        registry: PluginRegistry | None = None,
        objects: ObjectStore | None = None,
        invoked: Invoked = Invoked.INTERACTIVE,
    ) -> None:
        self._registry = registry or inject.instance(PluginRegistry)
        self._objects = objects or inject.instance(ObjectStore)
        self._resolver = TaskResolver(self._registry)
        self._invoked = invoked
        self._tasks: dict[str, ResolvedTask] = {}
        self._statuses: dict[str, int] = {}
        self._results: dict[str, str | None] = {}
        self._resources = ResourceTable()
        self._reports: list[str] = []
        self._torn_down = False

    @property
    def registry(self) -> PluginRegistry:
        return self._registry

    @property
    def objects(self) -> ObjectStore:
        return self._objects

    @property
    def invoked(self) -> Invoked:
        return self._invoked

    @property
    def reports(self) -> list[str]:
        return list(self._reports)

    def add_task(self, name: str) -> Curator:
        """Resolve and initialize the named task; adding a present task is a no-op."""
        if self._torn_down:
            raise TaskLifecycleError(name, "add", "torn down")
        if name in self._tasks:
            logger.debug("Task already added", extra={"task": name})
            return self
        task = self._resolver.resolve(name)
        task.init(self)
        self._tasks[name] = task
        self._statuses[name] = CurationStatus.UNSET
        self._results[name] = None
        return self

    def remove_task(self, name: str) -> Curator:
        task = self._tasks.pop(name, None)
        if task is not None:
            task.release()
            self._statuses.pop(name, None)
            self._results.pop(name, None)
        return self

    def has_task(self, name: str) -> bool:
        return name in self._tasks

    def task_names(self) -> list[str]:
        return list(self._tasks)

    def curate(self, obj: RepositoryObject, ctx: CurationContext | None = None) -> None:
        """Run every task over ``obj``.

        Distributive tasks get ``obj`` only and walk it themselves; the curator
        walks containers for all other tasks.
        """
        for task in self._tasks.values():
            if task.is_distributive or not obj.is_container:
                self._perform(task, obj, ctx)
                continue
            for member in obj.walk():
                if not self._perform(task, member, ctx):
                    logger.info(
                        "Curation suspended",
                        extra={"task": task.name, "object": member.handle},
                    )
                    break

    def curate_id(self, ctx: CurationContext | None, object_id: str) -> None:
        """Curate the object identified by ``object_id``.

        Objects unknown to the object store are handed to each task by id.
        """
        obj = self._objects.find(ctx, object_id)
        if obj is not None:
            self.curate(obj, ctx)
            return
        for task in self._tasks.values():
            self._results[task.name] = None
            outcome = InvocationResult(
                status=task.perform_id(ctx, object_id),
                result=self._results.get(task.name),
            )
            self._statuses[task.name] = outcome.status
            task.record(object_id, ctx, outcome.status, outcome.result)

    def queue(
        self,
        task_queue: TaskQueueRepository,
        object_id: str,
        user_name: str | None = None,
    ) -> str:
        """Defer curation of ``object_id`` with the current tasks to ``task_queue``."""
        job = CurationJob(
            task_names=self.task_names(),
            object_id=object_id,
            invoked=Invoked.BATCH,
            user_name=user_name,
        )
        queue_id = task_queue.enqueue(job)
        logger.info(
            "Queued curation job",
            extra={"job": job.id, "object": object_id, "tasks": job.task_names},
        )
        return queue_id

    def get_status(self, name: str) -> int:
        return self._statuses.get(name, CurationStatus.UNSET)

    def get_result(self, name: str) -> str | None:
        return self._results.get(name)

    def set_result(self, task_name: str, result: str) -> None:
        self._results[task_name] = result

    def report(self, message: str) -> None:
        logger.info(message)
        self._reports.append(message)

    def obtain_resource(self, key: str) -> Any | None:
        return self._resources.obtain(key)

    def manage_resource(self, key: str, resource: Any, policy: str | None = None) -> None:
        self._resources.manage(key, resource, policy)

    def teardown(self) -> None:
        """Release every task and dispose the managed resources."""
        if self._torn_down:
            return
        self._torn_down = True
        for task in self._tasks.values():
            task.release()
        self._tasks.clear()
        self._resources.release_all()

    def __enter__(self) -> Curator:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.teardown()

    def _perform(
        self, task: ResolvedTask, obj: RepositoryObject, ctx: CurationContext | None
    ) -> bool:
        # a result message belongs to the object that produced it
        self._results[task.name] = None
        outcome = InvocationResult(status=task.perform(obj), result=self._results.get(task.name))
        self._statuses[task.name] = outcome.status
        task.record(obj.handle, ctx, outcome.status, outcome.result)
        return not self._suspends(task, outcome.status)

    def _suspends(self, task: ResolvedTask, status: int) -> bool:
        mode = task.mode
        if mode is None or task.codes is None:
            return False
        if mode is not Invoked.ANY and mode is not self._invoked:
            return False
        return status in task.codes
