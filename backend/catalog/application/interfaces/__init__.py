from .child_repository import AlbumRepository, ArtistRepository, ChildRepository
from .music_group_repository import MusicGroupRepository

__all__ = [
    "AlbumRepository",
    "ArtistRepository",
    "ChildRepository",
    "MusicGroupRepository",
]
