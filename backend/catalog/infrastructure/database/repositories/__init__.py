from .album_repository import SQLAlchemyAlbumRepository
from .artist_repository import SQLAlchemyArtistRepository
from .music_group_repository import SQLAlchemyMusicGroupRepository

__all__ = [
    "SQLAlchemyAlbumRepository",
    "SQLAlchemyArtistRepository",
    "SQLAlchemyMusicGroupRepository",
]
