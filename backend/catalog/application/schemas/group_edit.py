"""Pydantic models for a music group being edited across several requests.

The edit session is the client-held working copy of one aggregate. Every
row carries a change tag and a key; rows added during the session hold a
TemporaryId until the save assigns a persistent one.
"""

from enum import Enum
from typing import Annotated, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from catalog.domain.entities import Album, Artist, ChangeTag, MusicGenre, MusicGroup


class ChildKind(str, Enum):
    """The two child collections of a music group."""

    ALBUM = "album"
    ARTIST = "artist"


class PersistentId(BaseModel):
    """Identifier assigned by the backend."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["persistent"] = "persistent"
    value: str = Field(..., min_length=1)


class TemporaryId(BaseModel):
    """Session-local identifier for a row the backend has not seen yet."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["temporary"] = "temporary"
    value: str = Field(default_factory=lambda: str(uuid4()))


RecordKey = Annotated[PersistentId | TemporaryId, Field(discriminator="kind")]


class AlbumEdit(BaseModel):
    """An album row: current values plus the pending values of an in-place edit."""

    tag: ChangeTag = ChangeTag.UNKNOWN
    key: RecordKey | None = None
    album_name: str | None = None
    release_year: int | None = None
    edit_album_name: str | None = None
    edit_release_year: int | None = None

    @classmethod
    def from_entity(cls, album: Album) -> "AlbumEdit":
        return cls(
            tag=ChangeTag.UNCHANGED,
            key=PersistentId(value=album.id),
            album_name=album.name,
            release_year=album.release_year,
            edit_album_name=album.name,
            edit_release_year=album.release_year,
        )

    def reset_pending_edit(self) -> None:
        self.edit_album_name = self.album_name
        self.edit_release_year = self.release_year

    def apply_pending_edit(self) -> None:
        self.album_name = self.edit_album_name
        self.release_year = self.edit_release_year

    def to_entity(self, music_group_id: str) -> Album:
        """Build a creation payload. It never carries the row key."""
        return Album(
            name=self.album_name,
            release_year=self.release_year,
            music_group_id=music_group_id,
        )

    def overlay(self, album: Album) -> Album:
        album.name = self.album_name
        album.release_year = self.release_year
        return album


class ArtistEdit(BaseModel):
    """An artist row: current values plus the pending values of an in-place edit."""

    tag: ChangeTag = ChangeTag.UNKNOWN
    key: RecordKey | None = None
    first_name: str | None = None
    last_name: str | None = None
    edit_first_name: str | None = None
    edit_last_name: str | None = None

    @classmethod
    def from_entity(cls, artist: Artist) -> "ArtistEdit":
        return cls(
            tag=ChangeTag.UNCHANGED,
            key=PersistentId(value=artist.id),
            first_name=artist.first_name,
            last_name=artist.last_name,
            edit_first_name=artist.first_name,
            edit_last_name=artist.last_name,
        )

    def reset_pending_edit(self) -> None:
        self.edit_first_name = self.first_name
        self.edit_last_name = self.last_name

    def apply_pending_edit(self) -> None:
        self.first_name = self.edit_first_name
        self.last_name = self.edit_last_name

    def to_entity(self, music_group_id: str) -> Artist:
        """Build a creation payload. It never carries the row key."""
        return Artist(
            first_name=self.first_name,
            last_name=self.last_name,
            music_group_id=music_group_id,
        )

    def overlay(self, artist: Artist) -> Artist:
        artist.first_name = self.first_name
        artist.last_name = self.last_name
        return artist


class GroupEditSession(BaseModel):
    """Working copy of one music group and its albums and artists."""

    tag: ChangeTag = ChangeTag.UNKNOWN
    music_group_id: str | None = None
    name: str | None = None
    established_year: int | None = None
    genre: MusicGenre | None = None
    albums: list[AlbumEdit] = Field(default_factory=list)
    artists: list[ArtistEdit] = Field(default_factory=list)

    # Blank forms bound to the "add album" / "add artist" inputs.
    new_album: AlbumEdit = Field(default_factory=AlbumEdit)
    new_artist: ArtistEdit = Field(default_factory=ArtistEdit)

    @classmethod
    def from_aggregate(cls, group: MusicGroup) -> "GroupEditSession":
        return cls(
            tag=ChangeTag.UNCHANGED,
            music_group_id=group.id,
            name=group.name,
            established_year=group.established_year,
            genre=group.genre,
            albums=[AlbumEdit.from_entity(a) for a in group.albums],
            artists=[ArtistEdit.from_entity(a) for a in group.artists],
        )

    @classmethod
    def blank(cls) -> "GroupEditSession":
        """Session for a group that does not exist yet; genre must be chosen actively."""
        return cls(tag=ChangeTag.INSERTED, genre=None)

    def rows(self, kind: ChildKind) -> list[AlbumEdit] | list[ArtistEdit]:
        return self.albums if kind is ChildKind.ALBUM else self.artists

    def new_row(self, kind: ChildKind) -> AlbumEdit | ArtistEdit:
        return self.new_album if kind is ChildKind.ALBUM else self.new_artist

    def clear_new_row(self, kind: ChildKind) -> None:
        if kind is ChildKind.ALBUM:
            self.new_album = AlbumEdit()
        else:
            self.new_artist = ArtistEdit()

    def to_entity(self) -> MusicGroup:
        """Creation payload for the group itself, without children or id."""
        return MusicGroup(
            name=self.name,
            established_year=self.established_year,
            genre=self.genre,
        )

    def overlay(self, group: MusicGroup) -> MusicGroup:
        group.update(name=self.name, established_year=self.established_year, genre=self.genre)
        return group
