from __future__ import annotations

import logging
from datetime import datetime

from src.app.domain.models.curation_record import CurationRecord


class LoggingRecorder:
    """Recorder writing each curation record to a logger."""

    def __init__(self, logger_name: str = "curation.records") -> None:
        self._logger = logging.getLogger(logger_name)

    def init(self) -> None:
        self._logger.debug("Curation record logging started")

    def record(
        self,
        timestamp: datetime,
        object_id: str | None,
        actor_id: str | None,
        task_name: str,
        record_type: str,
        value: str,
        status: int,
        result: str | None,
    ) -> None:
        record = CurationRecord(
            timestamp=timestamp,
            object_id=object_id,
            actor_id=actor_id,
            task_name=task_name,
            type=record_type,
            value=value,
            status=status,
            result=result,
        )
        self._logger.info(
            "Curation record",
            extra={"curation_record": record.model_dump(mode="json")},
        )
