from __future__ import annotations

import logging

from src.app.application.curator import Curator
from src.app.domain.models.context import Actor, CurationContext
from src.app.domain.models.curation_job import CurationJob
from src.app.infrastructure.celery.app import celery_app
from src.app.infrastructure.celery.repositories import CURATE_TASK_NAME
from src.setup.app_config import configure_di

logger = logging.getLogger(__name__)


def run_job(job: CurationJob, curator: Curator | None = None) -> dict:
    """Run a deferred curation job and return each task's status and result."""
    if curator is None:
        curator = Curator(invoked=job.invoked)
    ctx = CurationContext(current_user=Actor(name=job.user_name)) if job.user_name else None
    with curator:
        for name in job.task_names:
            curator.add_task(name)
        curator.curate_id(ctx, job.object_id)
        outcome = {
            name: {"status": int(curator.get_status(name)), "result": curator.get_result(name)}
            for name in job.task_names
        }
    logger.info("Curation job finished", extra={"job": job.id, "object": job.object_id})
    return outcome


@celery_app.task(name=CURATE_TASK_NAME, bind=True)
def curate(self, payload: dict) -> dict:
    """
    Deferred curation task.
    Runs the job's tasks over one object.
    """
    configure_di()
    job = CurationJob.model_validate(payload)
    return run_job(job)
