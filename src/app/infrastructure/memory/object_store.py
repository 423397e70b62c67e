from __future__ import annotations

from collections.abc import Iterable

from src.app.domain.models.context import CurationContext
from src.app.domain.models.repository_object import RepositoryObject


class InMemoryObjectStore:
    """Object store indexing repository hierarchies by handle."""

    def __init__(self, roots: Iterable[RepositoryObject] = ()) -> None:
        self._index: dict[str, RepositoryObject] = {}
        for root in roots:
            self.add(root)

    def add(self, root: RepositoryObject) -> None:
        for obj in root.walk():
            self._index[obj.handle] = obj

    def find(self, ctx: CurationContext | None, object_id: str) -> RepositoryObject | None:
        return self._index.get(object_id)
