from __future__ import annotations

import importlib.util
import logging

from src.app.domain.exceptions import ScriptLoadError
from src.app.domain.tasks import ScriptTask
from src.app.infrastructure.plugins.registry import ScriptRegistration

logger = logging.getLogger(__name__)


def load_script_task(registration: ScriptRegistration) -> ScriptTask:
    """Execute the script file and build a task with its factory callable."""
    path = registration.path
    if not path.is_file():
        raise ScriptLoadError(registration.name, str(path), "file not found")

    module_name = f"curation_script_{registration.name}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ScriptLoadError(registration.name, str(path), "not a Python source file")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise ScriptLoadError(registration.name, str(path), str(exc)) from exc

    factory = getattr(module, registration.factory, None)
    if not callable(factory):
        raise ScriptLoadError(
            registration.name, str(path), f"no callable named {registration.factory!r}"
        )
    logger.debug(
        "Loaded scripted task",
        extra={"task": registration.name, "path": str(path)},
    )
    return factory()
