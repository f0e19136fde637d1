"""Abstract repository interfaces (ports) for the child records of a music group."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from catalog.domain.entities import Album, Artist

ChildT = TypeVar("ChildT", Album, Artist)


class ChildRepository(ABC, Generic[ChildT]):
    """Port for one kind of child record, addressed by its own ID."""

    @abstractmethod
    async def get_by_id(self, child_id: str) -> ChildT | None:
        """Retrieve a single record by its ID."""
        ...

    @abstractmethod
    async def create(self, child: ChildT) -> ChildT:
        """Persist a new record and return it with the generated ID.

        The ID on ``child`` is ignored. Raises DuplicateEntityError on conflict.
        """
        ...

    @abstractmethod
    async def update(self, child: ChildT) -> ChildT:
        """Update an existing record. Raises EntityNotFoundError if it is gone."""
        ...

    @abstractmethod
    async def delete(self, child_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if it was already absent."""
        ...


class AlbumRepository(ChildRepository[Album]):
    """Port for album persistence."""


class ArtistRepository(ChildRepository[Artist]):
    """Port for artist persistence."""
