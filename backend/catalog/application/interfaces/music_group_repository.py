"""Abstract repository interfaces (ports) for the music group aggregate."""

from abc import ABC, abstractmethod

from catalog.domain.entities import MusicGroup


class MusicGroupRepository(ABC):
    """Port for music group persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, group_id: str) -> MusicGroup | None:
        """Retrieve a group's own attributes, without children."""
        ...

    @abstractmethod
    async def get_aggregate(self, group_id: str) -> MusicGroup | None:
        """Retrieve a group with its albums and artists freshly loaded."""
        ...

    @abstractmethod
    async def list_page(
        self,
        *,
        search: str | None = None,
        seeded: bool | None = None,
        skip: int = 0,
        limit: int = 10,
    ) -> list[MusicGroup]:
        """Retrieve a filtered, paginated list of groups (children included)."""
        ...

    @abstractmethod
    async def count(self, *, search: str | None = None, seeded: bool | None = None) -> int:
        """Count the groups matching the same filter as ``list_page``."""
        ...

    @abstractmethod
    async def create(self, group: MusicGroup) -> MusicGroup:
        """Persist a new group (attributes only) and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, group: MusicGroup) -> MusicGroup:
        """Update a group's attributes. Raises EntityNotFoundError if it is gone."""
        ...

    @abstractmethod
    async def delete(self, group_id: str) -> bool:
        """Delete a group and its children. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def delete_seeded(self, seeded: bool) -> int:
        """Delete every group whose seeded flag equals ``seeded``. Returns the number removed."""
        ...
