"""Concrete repository implementation for MusicGroup backed by SQLAlchemy."""

import uuid

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog.application.interfaces import MusicGroupRepository
from catalog.domain.entities import MusicGenre, MusicGroup
from catalog.domain.exceptions import EntityNotFoundError
from catalog.infrastructure.database.models import MusicGroupModel
from catalog.infrastructure.database.repositories.album_repository import SQLAlchemyAlbumRepository
from catalog.infrastructure.database.repositories.artist_repository import SQLAlchemyArtistRepository


class SQLAlchemyMusicGroupRepository(MusicGroupRepository):
    """Implements the MusicGroupRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    # ── Mapping ──────────────────────────────────────────────────────

    @staticmethod
    def _to_entity(model: MusicGroupModel, with_children: bool = True) -> MusicGroup:
        """Map ORM model → domain entity. Children must already be loaded."""
        group = MusicGroup(
            id=model.id,
            name=model.name,
            established_year=model.established_year,
            genre=MusicGenre(model.genre),
            seeded=model.seeded,
        )
        if with_children:
            group.albums = [SQLAlchemyAlbumRepository._to_entity(a) for a in model.albums]
            group.artists = [SQLAlchemyArtistRepository._to_entity(a) for a in model.artists]
        return group

    @staticmethod
    def _with_children(stmt: Select) -> Select:
        # populate_existing: a re-read must reflect creates and deletes flushed
        # through the child repositories since the group was first loaded.
        return stmt.options(
            selectinload(MusicGroupModel.albums),
            selectinload(MusicGroupModel.artists),
        ).execution_options(populate_existing=True)

    @staticmethod
    def _filtered(stmt: Select, search: str | None, seeded: bool | None) -> Select:
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(MusicGroupModel.name.ilike(pattern), MusicGroupModel.genre.ilike(pattern))
            )
        if seeded is not None:
            stmt = stmt.where(MusicGroupModel.seeded == seeded)
        return stmt

    # ── Reads ────────────────────────────────────────────────────────

    async def get_by_id(self, group_id: str) -> MusicGroup | None:
        model = await self._session.get(MusicGroupModel, group_id)
        return self._to_entity(model, with_children=False) if model else None

    async def get_aggregate(self, group_id: str) -> MusicGroup | None:
        stmt = self._with_children(select(MusicGroupModel).where(MusicGroupModel.id == group_id))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_page(
        self,
        *,
        search: str | None = None,
        seeded: bool | None = None,
        skip: int = 0,
        limit: int = 10,
    ) -> list[MusicGroup]:
        stmt = self._filtered(select(MusicGroupModel), search, seeded)
        stmt = self._with_children(
            stmt.order_by(MusicGroupModel.name, MusicGroupModel.id).offset(skip).limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count(self, *, search: str | None = None, seeded: bool | None = None) -> int:
        stmt = self._filtered(select(func.count()).select_from(MusicGroupModel), search, seeded)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    # ── Writes ───────────────────────────────────────────────────────

    async def create(self, group: MusicGroup) -> MusicGroup:
        model = MusicGroupModel(
            id=str(uuid.uuid4()),
            name=group.name,
            established_year=group.established_year,
            genre=group.genre.value,
            seeded=group.seeded,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model, with_children=False)

    async def update(self, group: MusicGroup) -> MusicGroup:
        model = await self._session.get(MusicGroupModel, group.id)
        if model is None:
            raise EntityNotFoundError("MusicGroup", group.id)
        model.name = group.name
        model.established_year = group.established_year
        model.genre = group.genre.value
        await self._session.flush()
        return group

    async def delete(self, group_id: str) -> bool:
        stmt = self._with_children(select(MusicGroupModel).where(MusicGroupModel.id == group_id))
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    async def delete_seeded(self, seeded: bool) -> int:
        stmt = self._with_children(select(MusicGroupModel).where(MusicGroupModel.seeded == seeded))
        models = (await self._session.execute(stmt)).scalars().all()
        for model in models:
            await self._session.delete(model)
        await self._session.flush()
        return len(models)
