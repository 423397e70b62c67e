from __future__ import annotations

import logging
from datetime import UTC, datetime
from enum import Enum

from src.app.application.policy import extract_policy
from src.app.application.resources import DisposalPolicy
from src.app.domain.exceptions import MissingRecorderError, TaskLifecycleError
from src.app.domain.models.context import CurationContext
from src.app.domain.models.invoked import Invoked
from src.app.domain.models.repository_object import RepositoryObject
from src.app.domain.models.task_policy import TaskPolicy
from src.app.domain.repositories import Closeable, CuratorHandle, Recorder
from src.app.domain.tasks import NativeTask, TaskVariant

logger = logging.getLogger(__name__)

RECORDER_KEY = "curate.recorder"
RECORDER_CATEGORY = "curate"


class TaskState(str, Enum):
    CONSTRUCTED = "CONSTRUCTED"
    INITIALIZED = "INITIALIZED"
    RELEASED = "RELEASED"


class ResolvedTask:
    """Uniform invocation wrapper around a native or scripted curation task.

    The policy is extracted once, at construction. ``init`` binds the shared
    recorder when the policy declares records and then initializes the task;
    ``perform``, ``perform_id`` and ``record`` are only valid afterwards.
    """

    def __init__(self, name: str, variant: TaskVariant) -> None:
        self._name = name
        self._variant = variant
        self._policy = extract_policy(variant)
        self._recorder: Recorder | None = None
        self._state = TaskState.CONSTRUCTED

    def init(self, curator: CuratorHandle) -> None:
        """Bind the recorder if one is required and initialize the wrapped task."""
        if self._state is not TaskState.CONSTRUCTED:
            raise TaskLifecycleError(self._name, "init", self._state.value)
        if self._policy.record_specs:
            self._recorder = self._bind_recorder(curator)
        self._variant.impl.init(curator, self._name)
        self._state = TaskState.INITIALIZED

    def perform(self, obj: RepositoryObject) -> int:
        self._require_initialized("perform")
        if isinstance(self._variant, NativeTask):
            return self._variant.impl.perform(obj)
        return self._variant.impl.perform_dso(obj)

    def perform_id(self, ctx: CurationContext | None, object_id: str) -> int:
        self._require_initialized("perform_id")
        # both task shapes expose the by-id entry point as ``perform_id``
        return self._variant.impl.perform_id(ctx, object_id)

    def record(
        self,
        object_id: str | None,
        ctx: CurationContext | None,
        status: int,
        result: str | None = None,
    ) -> None:
        """Emit one record per declared spec whose status codes contain ``status``."""
        self._require_initialized("record")
        if self._recorder is None or not self._policy.record_specs:
            return
        actor_id = None
        if ctx is not None and ctx.current_user is not None:
            actor_id = ctx.current_user.name
        timestamp = datetime.now(UTC)
        for spec in self._policy.record_specs:
            if spec.triggered_by(status):
                self._recorder.record(
                    timestamp,
                    object_id,
                    actor_id,
                    self._name,
                    spec.type,
                    spec.value,
                    status,
                    result,
                )

    def release(self) -> None:
        """Drop the recorder reference; the curator owns the recorder itself."""
        self._recorder = None
        self._state = TaskState.RELEASED

    @property
    def name(self) -> str:
        return self._name

    @property
    def policy(self) -> TaskPolicy:
        return self._policy

    @property
    def state(self) -> TaskState:
        return self._state

    @property
    def is_distributive(self) -> bool:
        return self._policy.distributive

    @property
    def is_mutative(self) -> bool:
        return self._policy.mutative

    @property
    def mode(self) -> Invoked | None:
        return self._policy.suspend_mode

    @property
    def codes(self) -> tuple[int, ...] | None:
        return self._policy.suspend_codes

    def _bind_recorder(self, curator: CuratorHandle) -> Recorder:
        recorder = curator.obtain_resource(RECORDER_KEY)
        if recorder is not None:
            return recorder

        recorder = curator.registry.get_single_implementation(RECORDER_CATEGORY, Recorder)
        if recorder is None:
            logger.error("No recorder configured", extra={"task": self._name})
            raise MissingRecorderError(self._name)

        recorder.init()
        policy = DisposalPolicy.CLOSE.value if isinstance(recorder, Closeable) else None
        curator.manage_resource(RECORDER_KEY, recorder, policy)
        logger.debug(
            "Bound curation recorder",
            extra={"task": self._name, "recorder": type(recorder).__name__},
        )
        return recorder

    def _require_initialized(self, operation: str) -> None:
        if self._state is not TaskState.INITIALIZED:
            raise TaskLifecycleError(self._name, operation, self._state.value)
