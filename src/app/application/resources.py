from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class DisposalPolicy(str, Enum):
    CLOSE = "close"


@dataclass
class ManagedResource:
    resource: Any
    policy: DisposalPolicy | None = None


class ResourceTable:
    """Resources shared by the tasks of one curation session."""

    def __init__(self) -> None:
        self._resources: dict[str, ManagedResource] = {}
        self._lock = threading.Lock()

    def obtain(self, key: str) -> Any | None:
        with self._lock:
            managed = self._resources.get(key)
        return managed.resource if managed is not None else None

    def manage(self, key: str, resource: Any, policy: str | None = None) -> None:
        disposal = DisposalPolicy(policy) if policy is not None else None
        with self._lock:
            self._resources[key] = ManagedResource(resource=resource, policy=disposal)

    def release_all(self) -> None:
        """Dispose every resource per its policy and empty the table.

        All resources are visited even if one fails to close; the first
        failure is raised afterwards.
        """
        with self._lock:
            resources = list(self._resources.items())
            self._resources.clear()

        first_error: Exception | None = None
        for key, managed in resources:
            if managed.policy is not DisposalPolicy.CLOSE:
                continue
            try:
                managed.resource.close()
            except Exception as exc:
                logger.error("Failed to close resource", extra={"key": key}, exc_info=True)
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error
