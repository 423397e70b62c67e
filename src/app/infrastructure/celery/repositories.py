from __future__ import annotations

from src.app.domain.models.curation_job import CurationJob
from src.app.domain.repositories import TaskQueueRepository
from src.app.infrastructure.celery.app import celery_app

CURATE_TASK_NAME = "curate"


class CeleryTaskQueue(TaskQueueRepository):
    """
    Defers curation jobs to Celery workers.
    """

    def __init__(self, celery_app_instance=celery_app, queue: str | None = None):
        self._celery_app = celery_app_instance
        self._queue = queue

    def enqueue(self, job: CurationJob) -> str:
        """
        Send the job to the ``curate`` worker task and return the Celery task id.
        """
        async_result = self._celery_app.send_task(
            CURATE_TASK_NAME,
            args=[job.model_dump(mode="json")],
            queue=self._queue,
            task_id=job.id,
        )
        return async_result.id
