from __future__ import annotations

import threading
from datetime import datetime

from sqlalchemy import select

from src.app.domain.models.curation_record import CurationRecord
from src.app.infrastructure.sql.mappers import RecordMapper
from src.app.infrastructure.sql.orm import Base, CurationRecordRow, SqlOrm


class SqlRecorder:
    """Recorder persisting curation records to a relational table."""

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self._orm = SqlOrm(database_url, echo=echo)
        # One recorder is shared by every task of a session.
        self._lock = threading.Lock()

    def init(self) -> None:
        """Create the records table when it does not exist yet."""
        Base.metadata.create_all(self._orm.engine)

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
        row = RecordMapper.to_row(
            CurationRecord(
                timestamp=timestamp,
                object_id=object_id,
                actor_id=actor_id,
                task_name=task_name,
                type=record_type,
                value=value,
                status=status,
                result=result,
            )
        )
        with self._lock:
            with self._orm.session_factory() as session:
                with session.begin():
                    session.add(row)

    def list_records(
        self,
        *,
        task_name: str | None = None,
        object_id: str | None = None,
        limit: int = 100,
    ) -> list[CurationRecord]:
        """List stored records, oldest first, with optional filters."""
        statement = select(CurationRecordRow)
        if task_name is not None:
            statement = statement.where(CurationRecordRow.task_name == task_name)
        if object_id is not None:
            statement = statement.where(CurationRecordRow.object_id == object_id)
        statement = statement.order_by(CurationRecordRow.id).limit(limit)

        with self._orm.session_factory() as session:
            rows = session.execute(statement).scalars().all()
        return [RecordMapper.to_domain(row) for row in rows]

    def close(self) -> None:
        self._orm.engine.dispose()
