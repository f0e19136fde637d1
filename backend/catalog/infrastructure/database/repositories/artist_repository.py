"""Concrete repository implementation for Artist backed by SQLAlchemy."""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.interfaces import ArtistRepository
from catalog.domain.entities import Artist
from catalog.domain.exceptions import EntityNotFoundError
from catalog.infrastructure.database.models import ArtistModel


class SQLAlchemyArtistRepository(ArtistRepository):
    """Implements the ArtistRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: ArtistModel) -> Artist:
        """Map ORM model → domain entity."""
        return Artist(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            music_group_id=model.music_group_id,
            birth_day=model.birth_day,
            seeded=model.seeded,
        )

    async def get_by_id(self, child_id: str) -> Artist | None:
        model = await self._session.get(ArtistModel, child_id)
        return self._to_entity(model) if model else None

    async def create(self, child: Artist) -> Artist:
        model = ArtistModel(
            id=str(uuid.uuid4()),
            first_name=child.first_name,
            last_name=child.last_name,
            birth_day=child.birth_day,
            seeded=child.seeded,
            music_group_id=child.music_group_id,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, child: Artist) -> Artist:
        model = await self._session.get(ArtistModel, child.id)
        if model is None:
            raise EntityNotFoundError("Artist", child.id)
        model.first_name = child.first_name
        model.last_name = child.last_name
        model.birth_day = child.birth_day
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, child_id: str) -> bool:
        model = await self._session.get(ArtistModel, child_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
