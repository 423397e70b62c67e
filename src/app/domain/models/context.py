from pydantic import BaseModel, Field


class Actor(BaseModel):
    name: str = Field(description="Name recorded as the acting user.")
    email: str | None = Field(default=None, description="Contact address, if known.")


class CurationContext(BaseModel):
    """Per-request context handed to tasks and recorders."""

    current_user: Actor | None = Field(
        default=None, description="Authenticated user, if any."
    )
