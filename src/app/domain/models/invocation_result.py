from pydantic import BaseModel, ConfigDict, Field


class InvocationResult(BaseModel):
    """Outcome of one ``perform`` call, consumed by ``record``."""

    model_config = ConfigDict(frozen=True)

    status: int = Field(description="Status code returned by the task.")
    result: str | None = Field(default=None, description="Result message, if any.")
