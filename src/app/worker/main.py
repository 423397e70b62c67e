import logging

from src.app.infrastructure.celery.app import celery_app
from src.app.worker.tasks import curate  # noqa: F401
from src.setup.app_config import configure_di
from src.setup.worker_config import get_worker_settings


def main() -> None:
    settings = get_worker_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    configure_di()
    celery_app.worker_main(
        [
            "worker",
            "-l",
            settings.LOG_LEVEL,
            "--concurrency",
            str(settings.CELERY_CONCURRENCY),
            "-Q",
            settings.CELERY_QUEUES,
        ]
    )


if __name__ == "__main__":
    main()
