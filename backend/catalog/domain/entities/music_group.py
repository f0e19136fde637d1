"""Domain entities for the music group aggregate — pure Python, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from math import ceil


class MusicGenre(str, Enum):
    """Genres a music group can be filed under."""

    ROCK = "rock"
    BLUES = "blues"
    JAZZ = "jazz"
    METAL = "metal"


@dataclass
class Album:
    """An album released by a music group."""

    name: str
    release_year: int
    music_group_id: str | None = None
    id: str | None = None
    copies_sold: int = 0
    seeded: bool = False


@dataclass
class Artist:
    """A member of a music group."""

    first_name: str
    last_name: str
    music_group_id: str | None = None
    id: str | None = None
    birth_day: date | None = None
    seeded: bool = False


@dataclass
class MusicGroup:
    """Aggregate root: a music group owning its albums and artists.

    The id is assigned by the backend on creation and is never changed
    afterwards; children reference the group through it.
    """

    name: str
    established_year: int
    genre: MusicGenre
    id: str | None = None
    albums: list[Album] = field(default_factory=list)
    artists: list[Artist] = field(default_factory=list)
    seeded: bool = False

    def update(
        self,
        name: str | None = None,
        established_year: int | None = None,
        genre: MusicGenre | None = None,
    ) -> None:
        """Overlay scalar attributes; children and id are left untouched."""
        if name is not None:
            self.name = name
        if established_year is not None:
            self.established_year = established_year
        if genre is not None:
            self.genre = genre


@dataclass
class MusicGroupPage:
    """One page of music groups plus the numbers needed to page through the rest.

    Pages are numbered from 0.
    """

    items: list[MusicGroup]
    total: int
    page: int = 0
    page_size: int = 10
    max_visible_pages: int = 10

    @property
    def page_count(self) -> int:
        return ceil(self.total / self.page_size) if self.page_size > 0 else 0

    @property
    def prev_page(self) -> int:
        return max(0, self.page - 1)

    @property
    def next_page(self) -> int:
        return max(0, min(self.page_count - 1, self.page + 1))

    @property
    def visible_pages(self) -> int:
        return min(self.max_visible_pages, self.page_count)
