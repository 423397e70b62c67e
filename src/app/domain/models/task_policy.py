from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.app.domain.models.curation_status import CurationStatus
from src.app.domain.models.invoked import Invoked

DEFAULT_SUSPEND_CODES: tuple[int, ...] = (CurationStatus.FAIL, CurationStatus.ERROR)
DEFAULT_RECORD_TYPE = "action"
DEFAULT_RECORD_CODES: tuple[int, ...] = (CurationStatus.SUCCESS, CurationStatus.FAIL)


class RecordSpec(BaseModel):
    """A record to emit when the task returns one of ``status_codes``."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(default=DEFAULT_RECORD_TYPE, description="Record type.")
    value: str = Field(default="", description="Record value.")
    status_codes: frozenset[int] = Field(
        default=frozenset(DEFAULT_RECORD_CODES),
        description="Status codes that trigger this record.",
    )

    def triggered_by(self, status: int) -> bool:
        return status in self.status_codes


class TaskPolicy(BaseModel):
    """Invocation policy declared for a curation task at registration time."""

    model_config = ConfigDict(frozen=True)

    distributive: bool = Field(
        default=False, description="Task distributes itself through containers."
    )
    mutative: bool = Field(default=False, description="Task alters the objects it visits.")
    suspend_mode: Invoked | None = Field(
        default=None, description="Invocation mode the suspend policy applies to."
    )
    suspend_codes: tuple[int, ...] | None = Field(
        default=None, description="Status codes that suspend iteration."
    )
    record_specs: tuple[RecordSpec, ...] = Field(
        default=(), description="Records emitted for matching status codes, in order."
    )

    @model_validator(mode="after")
    def _check_suspend(self) -> TaskPolicy:
        if (self.suspend_mode is None) != (self.suspend_codes is None):
            raise ValueError("suspend_mode and suspend_codes must be declared together")
        return self

    @property
    def suspendable(self) -> bool:
        return self.suspend_mode is not None

    @classmethod
    def builder(cls) -> TaskPolicyBuilder:
        return TaskPolicyBuilder()


class TaskPolicyBuilder:
    """Fluent construction of a :class:`TaskPolicy`.

    Example::

        policy = (
            TaskPolicy.builder()
            .mutative()
            .suspendable(Invoked.BATCH, [CurationStatus.ERROR])
            .record("audit", "changed", [CurationStatus.SUCCESS])
            .build()
        )
    """

    def __init__(self) -> None:
        self._distributive = False
        self._mutative = False
        self._suspend_mode: Invoked | None = None
        self._suspend_codes: tuple[int, ...] | None = None
        self._records: list[RecordSpec] = []

    def distributive(self) -> TaskPolicyBuilder:
        self._distributive = True
        return self

    def mutative(self) -> TaskPolicyBuilder:
        self._mutative = True
        return self

    def suspendable(
        self,
        invoked: Invoked = Invoked.ANY,
        status_codes: Iterable[int] = DEFAULT_SUSPEND_CODES,
    ) -> TaskPolicyBuilder:
        self._suspend_mode = invoked
        self._suspend_codes = tuple(int(code) for code in status_codes)
        return self

    def record(
        self,
        type: str = DEFAULT_RECORD_TYPE,
        value: str = "",
        status_codes: Iterable[int] = DEFAULT_RECORD_CODES,
    ) -> TaskPolicyBuilder:
        self._records.append(
            RecordSpec(
                type=type,
                value=value,
                status_codes=frozenset(int(code) for code in status_codes),
            )
        )
        return self

    def build(self) -> TaskPolicy:
        return TaskPolicy(
            distributive=self._distributive,
            mutative=self._mutative,
            suspend_mode=self._suspend_mode,
            suspend_codes=self._suspend_codes,
            record_specs=tuple(self._records),
        )
