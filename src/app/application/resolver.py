from __future__ import annotations

from src.app.application.resolved_task import ResolvedTask
from src.app.domain.exceptions import TaskNotFoundError
from src.app.domain.tasks import CurationTask, NativeTask, ScriptedTask
from src.app.infrastructure.plugins.registry import TASK_CATEGORY, PluginRegistry
from src.app.infrastructure.plugins.scripts import load_script_task


class TaskResolver:
    """Resolve task names to wrapped implementations; native tasks win over scripts."""

    def __init__(self, registry: PluginRegistry) -> None:
        self._registry = registry

    def resolve(self, name: str) -> ResolvedTask:
        impl = self._registry.get_named_implementation(TASK_CATEGORY, CurationTask, name)
        if impl is not None:
            return ResolvedTask(name, NativeTask(impl, self._registry.task_policy(name)))

        script = self._registry.script_registration(name)
        if script is not None:
            return ResolvedTask(name, ScriptedTask(load_script_task(script)))

        raise TaskNotFoundError(name)
