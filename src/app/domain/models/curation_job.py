from uuid import uuid4

from pydantic import BaseModel, Field

from src.app.domain.models.invoked import Invoked


class CurationJob(BaseModel):
    """A curation run deferred to a task queue."""

    id: str = Field(default_factory=lambda: uuid4().hex, description="Job identifier.")
    task_names: list[str] = Field(min_length=1, description="Tasks to run, in order.")
    object_id: str = Field(description="Identifier of the object to curate.")
    invoked: Invoked = Field(default=Invoked.BATCH, description="Invocation mode.")
    user_name: str | None = Field(default=None, description="User the job runs for.")
