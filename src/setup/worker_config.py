from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class WorkerSettings(BaseSettings):
    """Configuration for the curation worker process."""
    LOG_LEVEL: str = "INFO"
    CELERY_CONCURRENCY: int = 2
    CELERY_QUEUES: str = "celery"

    model_config = ConfigDict(env_file=".env", extra="ignore")

def get_worker_settings() -> WorkerSettings:
    """Return a fresh worker settings instance."""
    return WorkerSettings()
