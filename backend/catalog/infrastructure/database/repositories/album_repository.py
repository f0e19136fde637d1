"""Concrete repository implementation for Album backed by SQLAlchemy."""

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.interfaces import AlbumRepository
from catalog.domain.entities import Album
from catalog.domain.exceptions import EntityNotFoundError
from catalog.infrastructure.database.models import AlbumModel


class SQLAlchemyAlbumRepository(AlbumRepository):
    """Implements the AlbumRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @staticmethod
    def _to_entity(model: AlbumModel) -> Album:
        """Map ORM model → domain entity."""
        return Album(
            id=model.id,
            name=model.name,
            release_year=model.release_year,
            music_group_id=model.music_group_id,
            copies_sold=model.copies_sold,
            seeded=model.seeded,
        )

    async def get_by_id(self, child_id: str) -> Album | None:
        model = await self._session.get(AlbumModel, child_id)
        return self._to_entity(model) if model else None

    async def create(self, child: Album) -> Album:
        model = AlbumModel(
            id=str(uuid.uuid4()),
            name=child.name,
            release_year=child.release_year,
            copies_sold=child.copies_sold,
            seeded=child.seeded,
            music_group_id=child.music_group_id,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, child: Album) -> Album:
        model = await self._session.get(AlbumModel, child.id)
        if model is None:
            raise EntityNotFoundError("Album", child.id)
        model.name = child.name
        model.release_year = child.release_year
        model.copies_sold = child.copies_sold
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, child_id: str) -> bool:
        model = await self._session.get(AlbumModel, child_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
