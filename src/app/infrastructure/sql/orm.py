from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Engine, Integer, String, Text, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker


class Base(DeclarativeBase):
    pass


class CurationRecordRow(Base):
    __tablename__ = "curation_records"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recorded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    object_id: Mapped[str | None] = mapped_column(String(256), index=True)
    actor_id: Mapped[str | None] = mapped_column(String(256))
    task_name: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    record_type: Mapped[str] = mapped_column(String(128), nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")
    status: Mapped[int] = mapped_column(Integer, nullable=False)
    result: Mapped[str | None] = mapped_column(Text)


class SqlOrm:
    """
    SQLAlchemy ORM holder. Create once and share where needed.
    """

    def __init__(self, database_url: str, *, echo: bool = False) -> None:
        self._engine: Engine = create_engine(database_url, echo=echo)
        self._session_factory: sessionmaker[Session] = sessionmaker(
            self._engine, expire_on_commit=False
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        return self._session_factory
