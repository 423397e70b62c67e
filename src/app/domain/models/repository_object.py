from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, Field


class ObjectType(str, Enum):
    SITE = "SITE"
    COMMUNITY = "COMMUNITY"
    COLLECTION = "COLLECTION"
    ITEM = "ITEM"


class RepositoryObject(BaseModel):
    """An item or container in the repository hierarchy."""

    handle: str = Field(description="Persistent identifier of the object.")
    type: ObjectType = Field(description="Kind of repository object.")
    name: str = Field(default="", description="Display name.")
    metadata: dict[str, list[str]] = Field(
        default_factory=dict, description="Metadata values keyed by field name."
    )
    formats: list[str] = Field(
        default_factory=list, description="Formats of the files attached to an item."
    )
    children: list[RepositoryObject] = Field(
        default_factory=list, description="Members of a container."
    )

    @property
    def is_container(self) -> bool:
        return self.type is not ObjectType.ITEM

    def walk(self) -> Iterator[RepositoryObject]:
        """Yield this object and all its members, containers before their members."""
        yield self
        for child in self.children:
            yield from child.walk()
