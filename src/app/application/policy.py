from __future__ import annotations

import logging

from src.app.domain.models.task_policy import TaskPolicy
from src.app.domain.tasks import NativeTask, TaskVariant

logger = logging.getLogger(__name__)


def extract_policy(variant: TaskVariant) -> TaskPolicy:
    """Return the invocation policy declared for a task variant.

    Native tasks carry the policy attached when they were registered.
    Scripted tasks cannot declare a policy yet and always get the default one.
    """
    if isinstance(variant, NativeTask):
        return variant.policy
    logger.debug("Scripted tasks declare no policy; using defaults")
    return TaskPolicy()
