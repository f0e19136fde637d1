"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.config import get_settings
from catalog.application.services import MusicGroupEditService, MusicGroupService, SeedService
from catalog.infrastructure.database.session import get_db_session
from catalog.infrastructure.database.repositories import (
    SQLAlchemyAlbumRepository,
    SQLAlchemyArtistRepository,
    SQLAlchemyMusicGroupRepository,
)


async def get_music_group_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[MusicGroupService, None]:
    """Provides a MusicGroupService with paging configured from settings."""
    settings = get_settings()
    yield MusicGroupService(
        SQLAlchemyMusicGroupRepository(session),
        page_size=settings.page_size,
        max_visible_pages=settings.max_visible_pages,
    )


async def get_group_edit_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[MusicGroupEditService, None]:
    """Provides a MusicGroupEditService; all three repositories share one DB session."""
    yield MusicGroupEditService(
        group_repository=SQLAlchemyMusicGroupRepository(session),
        album_repository=SQLAlchemyAlbumRepository(session),
        artist_repository=SQLAlchemyArtistRepository(session),
    )


async def get_seed_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SeedService, None]:
    """Provides a SeedService with its repositories wired up."""
    yield SeedService(
        group_repository=SQLAlchemyMusicGroupRepository(session),
        album_repository=SQLAlchemyAlbumRepository(session),
        artist_repository=SQLAlchemyArtistRepository(session),
    )
