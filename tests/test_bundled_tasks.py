from __future__ import annotations

from conftest import StubCuratorHandle, StubRecorder, item, register_recorder
from src.app.application.curator import Curator
from src.app.domain.models.curation_status import CurationStatus
from src.app.infrastructure.memory.object_store import InMemoryObjectStore
from src.app.tasks import ProfileFormats, RequiredMetadata, register_bundled_tasks


def test_required_metadata_flags_missing_fields(registry) -> None:
    curator = StubCuratorHandle(registry)
    task = RequiredMetadata()
    task.init(curator, "requiredmetadata")

    status = task.perform(item("123/4", metadata={"dc.title": ["B"]}))

    assert status == CurationStatus.FAIL
    assert "dc.date.issued" in curator.results["requiredmetadata"]
    assert curator.reports == [curator.results["requiredmetadata"]]


def test_required_metadata_accepts_complete_items(registry) -> None:
    curator = StubCuratorHandle(registry)
    task = RequiredMetadata(fields=["dc.title"])
    task.init(curator, "requiredmetadata")

    assert task.perform(item("123/4", metadata={"dc.title": ["B"]})) == CurationStatus.SUCCESS


def test_required_metadata_skips_containers(registry, community) -> None:
    task = RequiredMetadata()
    task.init(StubCuratorHandle(registry), "requiredmetadata")

    assert task.perform(community) == CurationStatus.SKIP


def test_perform_id_fails_for_unknown_object(registry) -> None:
    curator = StubCuratorHandle(registry)
    task = RequiredMetadata()
    task.init(curator, "requiredmetadata")

    assert task.perform_id(None, "999/9") == CurationStatus.FAIL
    assert curator.results["requiredmetadata"] == "Object 999/9 could not be resolved"


def test_perform_id_resolves_through_object_store(registry, community) -> None:
    curator = StubCuratorHandle(registry, InMemoryObjectStore([community]))
    task = RequiredMetadata()
    task.init(curator, "requiredmetadata")

    assert task.perform_id(None, "123/3") == CurationStatus.SUCCESS


def test_profile_formats_tallies_subtree(registry, community) -> None:
    curator = StubCuratorHandle(registry)
    task = ProfileFormats()
    task.init(curator, "profileformats")

    assert task.perform(community) == CurationStatus.SUCCESS
    assert curator.results["profileformats"] == "JPEG (1), PDF (3), Plain Text (1)"


def test_profile_formats_skips_empty_subtree(registry) -> None:
    curator = StubCuratorHandle(registry)
    task = ProfileFormats()
    task.init(curator, "profileformats")

    assert task.perform(item("123/9")) == CurationStatus.SKIP


def test_bundled_tasks_run_under_curator(registry, community) -> None:
    register_bundled_tasks(registry)
    built = register_recorder(registry, StubRecorder)

    with Curator(registry=registry, objects=InMemoryObjectStore([community])) as curator:
        curator.add_task("profileformats").add_task("requiredmetadata")
        curator.curate(community)

        assert curator.get_status("profileformats") == CurationStatus.SUCCESS
        # The last item visited is complete.
        assert curator.get_status("requiredmetadata") == CurationStatus.SUCCESS
        assert any("123/4" in line for line in curator.reports)

    records = built[0].records
    assert [(entry["object_id"], entry["type"]) for entry in records] == [
        ("123/4", "requiredmetadata")
    ]
