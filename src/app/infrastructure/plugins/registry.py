from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.app.domain.models.task_policy import TaskPolicy
from src.app.domain.tasks import CurationTask

logger = logging.getLogger(__name__)

TASK_CATEGORY = "curate"

Factory = Callable[[], Any]


@dataclass(frozen=True)
class ScriptRegistration:
    name: str
    path: Path
    factory: str = "make_task"


class PluginRegistry:
    """Registry of plugin factories keyed by category and capability.

    Single implementations are looked up by ``(category, capability)``, named
    ones by ``(category, capability, name)``. Every lookup calls the factory,
    so callers that need one shared instance must keep it themselves.
    """

    def __init__(self) -> None:
        self._single: dict[tuple[str, Any], Factory] = {}
        self._named: dict[tuple[str, Any, str], Factory] = {}
        self._task_policies: dict[str, TaskPolicy] = {}
        self._scripts: dict[str, ScriptRegistration] = {}

    def register_single(self, category: str, capability: Any, factory: Factory) -> None:
        self._single[(category, capability)] = factory

    def register_named(
        self, category: str, capability: Any, name: str, factory: Factory
    ) -> None:
        self._named[(category, capability, name)] = factory

    def get_single_implementation(self, category: str, capability: Any) -> Any | None:
        factory = self._single.get((category, capability))
        if factory is None:
            return None
        return factory()

    def get_named_implementation(
        self, category: str, capability: Any, name: str
    ) -> Any | None:
        factory = self._named.get((category, capability, name))
        if factory is None:
            return None
        return factory()

    def register_task(
        self, name: str, factory: Factory, policy: TaskPolicy | None = None
    ) -> None:
        """Register a native task together with its invocation policy."""
        self.register_named(TASK_CATEGORY, CurationTask, name, factory)
        self._task_policies[name] = policy if policy is not None else TaskPolicy()
        logger.debug("Registered curation task", extra={"task": name})

    def register_script(self, name: str, path: str | Path, factory: str = "make_task") -> None:
        """Register a scripted task loaded lazily from ``path``."""
        self._scripts[name] = ScriptRegistration(name=name, path=Path(path), factory=factory)
        logger.debug("Registered scripted task", extra={"task": name, "path": str(path)})

    def task_policy(self, name: str) -> TaskPolicy:
        return self._task_policies.get(name, TaskPolicy())

    def script_registration(self, name: str) -> ScriptRegistration | None:
        return self._scripts.get(name)

    def task_names(self) -> list[str]:
        native = {
            name
            for category, capability, name in self._named
            if category == TASK_CATEGORY and capability is CurationTask
        }
        return sorted(native | set(self._scripts))
