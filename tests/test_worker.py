from __future__ import annotations

from types import SimpleNamespace

import pytest

from conftest import StubNativeTask
from src.app.application.curator import Curator
from src.app.domain.models.curation_job import CurationJob
from src.app.domain.models.curation_status import CurationStatus
from src.app.domain.repositories import ObjectStore
from src.app.infrastructure.celery.repositories import CURATE_TASK_NAME, CeleryTaskQueue
from src.app.infrastructure.memory.object_store import InMemoryObjectStore
from src.app.infrastructure.plugins.registry import PluginRegistry
from src.app.worker.tasks import curate as curate_module


class StubCeleryApp:
    def __init__(self) -> None:
        self.sent: list[tuple[str, dict]] = []

    def send_task(self, name: str, **kwargs):
        self.sent.append((name, kwargs))
        return SimpleNamespace(id=kwargs["task_id"])


def test_celery_queue_sends_curate_task() -> None:
    app = StubCeleryApp()
    job = CurationJob(task_names=["requiredmetadata"], object_id="123/3", user_name="jane")

    queue_id = CeleryTaskQueue(app, queue="curation").enqueue(job)

    assert queue_id == job.id
    (name, kwargs) = app.sent[0]
    assert name == CURATE_TASK_NAME
    assert kwargs["queue"] == "curation"
    assert kwargs["args"][0]["task_names"] == ["requiredmetadata"]
    assert kwargs["args"][0]["invoked"] == "BATCH"


def test_run_job_reports_each_task(registry, community) -> None:
    impl = StubNativeTask(statuses={"123/4": CurationStatus.FAIL})
    registry.register_task("walker", lambda: impl)
    curator = Curator(registry=registry, objects=InMemoryObjectStore([community]))
    job = CurationJob(task_names=["walker"], object_id="123/4", user_name="jane")

    outcome = curate_module.run_job(job, curator)

    assert outcome == {"walker": {"status": CurationStatus.FAIL, "result": None}}
    assert curator.task_names() == []


def test_curate_task_runs_job_from_payload(
    registry, community, monkeypatch: pytest.MonkeyPatch
) -> None:
    import inject

    impl = StubNativeTask()
    registry.register_task("walker", lambda: impl)
    objects = InMemoryObjectStore([community])

    def fake_instance(interface: object) -> object:
        if interface is PluginRegistry:
            return registry
        if interface is ObjectStore:
            return objects
        raise RuntimeError(f"Unexpected dependency request: {interface}")

    monkeypatch.setattr(inject, "instance", fake_instance)
    monkeypatch.setattr(curate_module, "configure_di", lambda: None)
    job = CurationJob(task_names=["walker"], object_id="123/2")

    outcome = curate_module.curate(job.model_dump(mode="json"))

    assert outcome == {"walker": {"status": CurationStatus.SUCCESS, "result": None}}
    assert [target for call, target in impl.calls if call == "perform"] == [
        "123/2",
        "123/3",
        "123/4",
        "123/5",
    ]
