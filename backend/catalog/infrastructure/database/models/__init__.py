from .music_group import AlbumModel, ArtistModel, MusicGroupModel

__all__ = [
    "AlbumModel",
    "ArtistModel",
    "MusicGroupModel",
]
