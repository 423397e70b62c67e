import pytest
from pydantic import ValidationError

from conftest import StubNativeTask, StubScriptTask
from src.app.application.policy import extract_policy
from src.app.domain.models.curation_status import CurationStatus
from src.app.domain.models.invoked import Invoked
from src.app.domain.models.task_policy import RecordSpec, TaskPolicy
from src.app.domain.tasks import NativeTask, ScriptedTask


def test_builder_defaults_to_plain_policy() -> None:
    policy = TaskPolicy.builder().build()

    assert policy == TaskPolicy()
    assert not policy.suspendable
    assert policy.record_specs == ()


def test_builder_keeps_record_declaration_order() -> None:
    policy = (
        TaskPolicy.builder()
        .record("audit", "one", [CurationStatus.SUCCESS])
        .record("audit", "two", [CurationStatus.FAIL, CurationStatus.ERROR])
        .build()
    )

    assert [spec.value for spec in policy.record_specs] == ["one", "two"]
    assert policy.record_specs[1].status_codes == frozenset({1, -1})


def test_builder_suspend_defaults() -> None:
    policy = TaskPolicy.builder().suspendable().build()

    assert policy.suspend_mode is Invoked.ANY
    assert policy.suspend_codes == (CurationStatus.FAIL, CurationStatus.ERROR)


def test_record_spec_defaults() -> None:
    spec = RecordSpec()

    assert spec.type == "action"
    assert spec.triggered_by(CurationStatus.SUCCESS)
    assert spec.triggered_by(CurationStatus.FAIL)
    assert not spec.triggered_by(CurationStatus.SKIP)


def test_policy_is_immutable() -> None:
    policy = TaskPolicy.builder().mutative().build()

    with pytest.raises(ValidationError):
        policy.mutative = False


def test_suspend_mode_requires_codes() -> None:
    with pytest.raises(ValidationError):
        TaskPolicy(suspend_mode=Invoked.BATCH)


def test_extract_policy_returns_declared_native_policy() -> None:
    policy = TaskPolicy.builder().distributive().build()

    assert extract_policy(NativeTask(StubNativeTask(), policy)) is policy


def test_extract_policy_for_scripted_task_is_default() -> None:
    assert extract_policy(ScriptedTask(StubScriptTask())) == TaskPolicy()
