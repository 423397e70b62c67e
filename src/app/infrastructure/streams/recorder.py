from __future__ import annotations

import logging
from datetime import datetime

from src.app.domain.models.curation_record import CurationRecord
from src.app.infrastructure.streams.client import StreamsClient
from src.app.infrastructure.streams.serializers import encode_record

logger = logging.getLogger(__name__)


class StreamRecorder:
    """Recorder appending curation records to a Redis stream."""

    def __init__(
        self,
        client: StreamsClient,
        stream: str,
        *,
        maxlen: int | None = None,
        approximate: bool = True,
    ) -> None:
        self._client = client
        self._stream = stream
        self._maxlen = maxlen
        self._approximate = approximate

    def init(self) -> None:
        self._client.redis.ping()
        logger.info("Recording curation to stream", extra={"stream": self._stream})

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
        self._client.redis.xadd(
            self._stream,
            encode_record(record),
            maxlen=self._maxlen,
            approximate=self._approximate,
        )

    def close(self) -> None:
        self._client.close()
