from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import inject

from src.app.application.resolved_task import RECORDER_CATEGORY
from src.app.domain.repositories import ObjectStore, Recorder, TaskQueueRepository
from src.app.infrastructure.log_recorder import LoggingRecorder
from src.app.infrastructure.memory.object_store import InMemoryObjectStore
from src.app.infrastructure.plugins.catalog import load_catalog
from src.app.infrastructure.plugins.registry import PluginRegistry
from src.app.infrastructure.sql.recorder import SqlRecorder
from src.app.infrastructure.streams.client import StreamsClient
from src.app.infrastructure.streams.recorder import StreamRecorder
from src.app.tasks import register_bundled_tasks
from src.setup.celery_config import get_celery_settings
from src.setup.curation_config import CurationSettings, get_curation_settings

logger = logging.getLogger(__name__)


def build_recorder_factory(settings: CurationSettings) -> Callable[[], Recorder] | None:
    """Return a factory for the configured recorder, or ``None`` when recording is off."""
    if settings.CURATE_RECORDER == "log":
        return LoggingRecorder
    if settings.CURATE_RECORDER == "sql":
        return lambda: SqlRecorder(settings.CURATE_DATABASE_URL)
    if settings.CURATE_RECORDER == "stream":
        return lambda: StreamRecorder(
            StreamsClient(settings.REDIS_URL), settings.CURATE_RECORD_STREAM
        )
    return None


def build_plugin_registry(settings: CurationSettings | None = None) -> PluginRegistry:
    """Build a registry with bundled tasks, catalog entries and the configured recorder."""
    if settings is None:
        settings = get_curation_settings()
    registry = PluginRegistry()
    register_bundled_tasks(registry)

    if settings.CURATE_TASKS_FILE:
        catalog_path = Path(settings.CURATE_TASKS_FILE)
        load_catalog(catalog_path).install(registry, base_dir=catalog_path.parent)

    recorder_factory = build_recorder_factory(settings)
    if recorder_factory is not None:
        registry.register_single(RECORDER_CATEGORY, Recorder, recorder_factory)
    logger.info(
        "Curation plugins configured",
        extra={"tasks": registry.task_names(), "recorder": settings.CURATE_RECORDER},
    )
    return registry


def _build_task_queue() -> TaskQueueRepository:
    # The Celery app is only built once a queue is requested.
    from src.app.infrastructure.celery.repositories import CeleryTaskQueue

    return CeleryTaskQueue(queue=get_celery_settings().CURATE_QUEUE)


def configure_di(settings: CurationSettings | None = None) -> None:
    """Bind the plugin registry, object store and task queue into the DI container."""
    if inject.is_configured():
        return
    registry = build_plugin_registry(settings)

    def _config(binder: inject.Binder) -> None:
        binder.bind(PluginRegistry, registry)
        binder.bind(ObjectStore, InMemoryObjectStore())
        binder.bind_to_provider(TaskQueueRepository, _build_task_queue)

    inject.configure(_config)
