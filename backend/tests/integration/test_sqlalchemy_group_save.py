"""Saves music groups through the SQLAlchemy repositories on an in-memory SQLite database."""

import pytest
import pytest_asyncio
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog.application.schemas.group_edit import AlbumEdit, ArtistEdit, ChildKind, PersistentId
from catalog.application.services import MusicGroupEditService, MusicGroupService, SeedService
from catalog.application.services.edit_staging import (
    stage_delete_child,
    stage_edit_child,
    stage_insert_child,
)
from catalog.domain.entities import MusicGenre
from catalog.domain.exceptions import ConsistencyError
from catalog.infrastructure.database import Base
from catalog.infrastructure.database.models import AlbumModel, ArtistModel
from catalog.infrastructure.database.repositories import (
    SQLAlchemyAlbumRepository,
    SQLAlchemyArtistRepository,
    SQLAlchemyMusicGroupRepository,
)


@pytest_asyncio.fixture
async def db_session():
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


def _edit_service(session: AsyncSession) -> MusicGroupEditService:
    return MusicGroupEditService(
        group_repository=SQLAlchemyMusicGroupRepository(session),
        album_repository=SQLAlchemyAlbumRepository(session),
        artist_repository=SQLAlchemyArtistRepository(session),
    )


async def _create_group(service: MusicGroupEditService):
    edit = service.new_session()
    edit.name = "The Crimson Pilots"
    edit.established_year = 1994
    edit.genre = MusicGenre.ROCK
    for name, year in (("Gravity Dawn", 1996), ("Neon Ashes", 1999)):
        edit.new_album = AlbumEdit(album_name=name, release_year=year)
        edit = stage_insert_child(edit, ChildKind.ALBUM)
    edit.new_artist = ArtistEdit(first_name="Sara", last_name="Dahl")
    edit = stage_insert_child(edit, ChildKind.ARTIST)
    return await service.save(edit)


@pytest.mark.asyncio
async def test_new_group_with_children_is_stored(db_session: AsyncSession):
    service = _edit_service(db_session)

    result = await _create_group(service)

    assert result.created is True
    assert [a.name for a in result.music_group.albums] == ["Gravity Dawn", "Neon Ashes"]
    stored = (await db_session.execute(select(AlbumModel))).scalars().all()
    assert {a.music_group_id for a in stored} == {result.music_group_id}


@pytest.mark.asyncio
async def test_reread_reflects_deletes_inserts_and_updates(db_session: AsyncSession):
    service = _edit_service(db_session)
    created = await _create_group(service)

    edit = await service.open_session(created.music_group_id)
    first, second = edit.albums
    edit = stage_delete_child(edit, ChildKind.ALBUM, first.key)
    edit.albums[1].edit_album_name = "Neon Ashes (Live)"
    edit = stage_edit_child(edit, ChildKind.ALBUM, second.key)
    edit.new_album = AlbumEdit(album_name="Orbit Hollow", release_year=2003)
    edit = stage_insert_child(edit, ChildKind.ALBUM)
    edit.name = "The Crimson Pilots Revisited"

    result = await service.save(edit)

    assert [a.name for a in result.music_group.albums] == ["Neon Ashes (Live)", "Orbit Hollow"]
    assert result.music_group.name == "The Crimson Pilots Revisited"
    assert all(isinstance(row.key, PersistentId) for row in edit.albums)
    assert await db_session.get(AlbumModel, first.key.value) is None

    reopened = await service.open_session(created.music_group_id)
    assert [a.album_name for a in reopened.albums] == ["Neon Ashes (Live)", "Orbit Hollow"]


@pytest.mark.asyncio
async def test_update_of_removed_child_raises_consistency_error(db_session: AsyncSession):
    service = _edit_service(db_session)
    created = await _create_group(service)

    edit = await service.open_session(created.music_group_id)
    target = edit.artists[0]
    edit.artists[0].edit_first_name = "Sanna"
    edit = stage_edit_child(edit, ChildKind.ARTIST, target.key)
    await db_session.delete(await db_session.get(ArtistModel, target.key.value))
    await db_session.flush()

    with pytest.raises(ConsistencyError) as exc_info:
        await service.save(edit)

    assert exc_info.value.stage == "update_artists"


@pytest.mark.asyncio
async def test_browse_and_delete_group(db_session: AsyncSession):
    service = _edit_service(db_session)
    created = await _create_group(service)
    browser = MusicGroupService(SQLAlchemyMusicGroupRepository(db_session), page_size=5)

    page = await browser.list_groups(search="crimson")
    assert page.total == 1
    assert len(page.items[0].albums) == 2

    assert (await browser.list_groups(search="jazz")).total == 0

    await browser.delete_group(created.music_group_id)
    assert (await db_session.execute(select(AlbumModel))).scalars().all() == []
    assert (await db_session.execute(select(ArtistModel))).scalars().all() == []


@pytest.mark.asyncio
async def test_seed_and_clear(db_session: AsyncSession):
    seeder = SeedService(
        SQLAlchemyMusicGroupRepository(db_session),
        SQLAlchemyAlbumRepository(db_session),
        SQLAlchemyArtistRepository(db_session),
    )
    await _create_group(_edit_service(db_session))

    info = await seeder.seed(4)
    assert (info.seeded, info.unseeded) == (4, 1)

    await seeder.remove_all()
    assert (await seeder.info()).total == 0
