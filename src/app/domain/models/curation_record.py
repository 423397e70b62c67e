from datetime import datetime

from pydantic import BaseModel, Field


class CurationRecord(BaseModel):
    timestamp: datetime = Field(description="When the record was emitted.")
    object_id: str | None = Field(default=None, description="Identifier of the curated object.")
    actor_id: str | None = Field(default=None, description="Name of the acting user.")
    task_name: str = Field(description="Local name of the task.")
    type: str = Field(description="Record type declared by the task.")
    value: str = Field(default="", description="Record value declared by the task.")
    status: int = Field(description="Status code returned by the task.")
    result: str | None = Field(default=None, description="Result message set by the task.")
