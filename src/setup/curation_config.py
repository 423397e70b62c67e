from typing import Literal

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class CurationSettings(BaseSettings):
    """Configuration for task resolution and curation recording."""
    CURATE_RECORDER: Literal["log", "sql", "stream"] | None = None
    CURATE_TASKS_FILE: str | None = None
    CURATE_DATABASE_URL: str = "sqlite:///curation_records.db"
    CURATE_RECORD_STREAM: str = "curation:records"
    REDIS_URL: str = "redis://redis:6379/0"

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_curation_settings() -> CurationSettings:
    """Return a fresh curation settings instance."""
    return CurationSettings()
