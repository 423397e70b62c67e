from src.app.domain.models.context import Actor, CurationContext
from src.app.domain.models.curation_job import CurationJob
from src.app.domain.models.curation_record import CurationRecord
from src.app.domain.models.curation_status import CurationStatus
from src.app.domain.models.invocation_result import InvocationResult
from src.app.domain.models.invoked import Invoked
from src.app.domain.models.repository_object import ObjectType, RepositoryObject
from src.app.domain.models.task_policy import RecordSpec, TaskPolicy, TaskPolicyBuilder

__all__ = [
    "Actor",
    "CurationContext",
    "CurationJob",
    "CurationRecord",
    "CurationStatus",
    "InvocationResult",
    "Invoked",
    "ObjectType",
    "RepositoryObject",
    "RecordSpec",
    "TaskPolicy",
    "TaskPolicyBuilder",
]
