from __future__ import annotations

from src.app.domain.models.curation_record import CurationRecord
from src.app.infrastructure.sql.orm import CurationRecordRow


class RecordMapper:
    @staticmethod
    def to_row(record: CurationRecord) -> CurationRecordRow:
        return CurationRecordRow(
            recorded_at=record.timestamp,
            object_id=record.object_id,
            actor_id=record.actor_id,
            task_name=record.task_name,
            record_type=record.type,
            value=record.value,
            status=record.status,
            result=record.result,
        )

    @staticmethod
    def to_domain(row: CurationRecordRow) -> CurationRecord:
        return CurationRecord(
            timestamp=row.recorded_at,
            object_id=row.object_id,
            actor_id=row.actor_id,
            task_name=row.task_name,
            type=row.record_type,
            value=row.value,
            status=row.status,
            result=row.result,
        )
