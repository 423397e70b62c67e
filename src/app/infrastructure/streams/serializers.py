from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ValidationError

from src.app.domain.models.curation_record import CurationRecord

# Redis stream fields are flat strings; absent optionals are stored as "".


def _as_str(value: Any) -> str:
    return str(value)


def _optional(value: Any) -> str | None:
    text = _as_str(value) if value is not None else ""
    return text or None


def encode_record(record: CurationRecord) -> dict[str, str | bytes]:
    return {
        "ts": record.timestamp.isoformat(),
        "object_id": record.object_id or "",
        "actor_id": record.actor_id or "",
        "task_name": record.task_name,
        "type": record.type,
        "value": record.value,
        "status": str(record.status),
        "result": record.result or "",
    }


def decode_record(fields: dict[str, Any]) -> CurationRecord:
    try:
        record_data = {
            "timestamp": datetime.fromisoformat(_as_str(fields.get("ts", ""))),
            "object_id": _optional(fields.get("object_id")),
            "actor_id": _optional(fields.get("actor_id")),
            "task_name": _as_str(fields.get("task_name", "")),
            "type": _as_str(fields.get("type", "")),
            "value": _as_str(fields.get("value", "")),
            "status": int(_as_str(fields.get("status", ""))),
            "result": _optional(fields.get("result")),
        }
    except ValueError as exc:
        raise ValueError("Invalid record fields") from exc
    try:
        return CurationRecord.model_validate(record_data)
    except ValidationError as exc:
        raise ValueError("Invalid record schema") from exc
