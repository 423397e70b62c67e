"""Declarative task catalog.

A catalog is a JSON document listing native tasks by import target and
scripted tasks by file path, each native task with its invocation policy::

    {
      "tasks": [
        {
          "name": "requiredmetadata",
          "target": "src.app.tasks.required_metadata:RequiredMetadata",
          "policy": {"records": [{"type": "requiredmetadata", "status_codes": [1]}]}
        }
      ],
      "scripts": [{"name": "linkcheck", "path": "scripts/linkcheck.py"}]
    }
"""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from src.app.domain.models.invoked import Invoked
from src.app.domain.models.task_policy import (
    DEFAULT_RECORD_CODES,
    DEFAULT_RECORD_TYPE,
    DEFAULT_SUSPEND_CODES,
    TaskPolicy,
)
from src.app.infrastructure.plugins.registry import PluginRegistry


class SuspendDescriptor(BaseModel):
    invoked: Invoked = Field(default=Invoked.ANY, description="Mode the suspension applies to.")
    status_codes: list[int] = Field(
        default_factory=lambda: list(DEFAULT_SUSPEND_CODES),
        description="Status codes that suspend iteration.",
    )


class RecordDescriptor(BaseModel):
    type: str = Field(default=DEFAULT_RECORD_TYPE, description="Record type.")
    value: str = Field(default="", description="Record value.")
    status_codes: list[int] = Field(
        default_factory=lambda: list(DEFAULT_RECORD_CODES),
        description="Status codes that trigger the record.",
    )


class PolicyDescriptor(BaseModel):
    distributive: bool = False
    mutative: bool = False
    suspendable: SuspendDescriptor | None = None
    records: list[RecordDescriptor] = Field(default_factory=list)

    def to_policy(self) -> TaskPolicy:
        builder = TaskPolicy.builder()
        if self.distributive:
            builder.distributive()
        if self.mutative:
            builder.mutative()
        if self.suspendable is not None:
            builder.suspendable(self.suspendable.invoked, self.suspendable.status_codes)
        for record in self.records:
            builder.record(record.type, record.value, record.status_codes)
        return builder.build()


class TaskDescriptor(BaseModel):
    name: str = Field(description="Local name the task is resolved by.")
    target: str = Field(description="Import target in 'module:attribute' form.")
    policy: PolicyDescriptor = Field(default_factory=PolicyDescriptor)


class ScriptDescriptor(BaseModel):
    name: str = Field(description="Local name the task is resolved by.")
    path: str = Field(description="Script file, relative to the catalog file.")
    factory: str = Field(default="make_task", description="Callable building the task.")


class TaskCatalog(BaseModel):
    tasks: list[TaskDescriptor] = Field(default_factory=list)
    scripts: list[ScriptDescriptor] = Field(default_factory=list)

    def install(self, registry: PluginRegistry, base_dir: Path | None = None) -> None:
        """Register every catalog entry with ``registry``."""
        for task in self.tasks:
            registry.register_task(task.name, import_target(task.target), task.policy.to_policy())
        for script in self.scripts:
            path = Path(script.path)
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            registry.register_script(script.name, path, script.factory)


def import_target(target: str) -> Any:
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"Invalid task target {target!r}; expected 'module:attribute'")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attribute)
    except AttributeError as exc:
        raise ValueError(f"Module {module_name!r} has no attribute {attribute!r}") from exc


def load_catalog(path: str | Path) -> TaskCatalog:
    """Parse the catalog JSON document at ``path``."""
    raw = Path(path).read_text(encoding="utf-8")
    try:
        return TaskCatalog.model_validate_json(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid task catalog {str(path)!r}") from exc
