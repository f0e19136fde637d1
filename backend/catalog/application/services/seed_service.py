"""Seed Service — fills the catalogue with generated music groups for demos and tests."""

import logging
import random
from dataclasses import dataclass
from datetime import date, timedelta

from catalog.application.interfaces import AlbumRepository, ArtistRepository, MusicGroupRepository
from catalog.domain.entities import Album, Artist, MusicGenre, MusicGroup

logger = logging.getLogger(__name__)

_GROUP_ADJECTIVES = ("Electric", "Silent", "Crimson", "Midnight", "Velvet", "Iron", "Golden", "Wild")
_GROUP_NOUNS = ("Wolves", "Echoes", "Pilots", "Ravens", "Comets", "Saints", "Tides", "Machines")
_ALBUM_WORDS = ("Dawn", "Horizon", "Static", "Gravity", "Ashes", "Neon", "Harbor", "Fever", "Orbit", "Hollow")
_FIRST_NAMES = ("Anna", "Erik", "Maja", "Johan", "Sara", "Lars", "Nina", "Oskar", "Ida", "Karl")
_LAST_NAMES = ("Berg", "Lind", "Holm", "Strand", "Nyström", "Ek", "Dahl", "Sjöberg", "Wall", "Falk")

_FIRST_YEAR = 1960
_LAST_YEAR = 2024


@dataclass
class SeedInfo:
    """How many groups are in the catalogue, split by origin."""

    seeded: int
    unseeded: int

    @property
    def total(self) -> int:
        return self.seeded + self.unseeded


class SeedService:
    """Generates random, plausible music groups flagged as seeded."""

    def __init__(
        self,
        group_repository: MusicGroupRepository,
        album_repository: AlbumRepository,
        artist_repository: ArtistRepository,
        rng: random.Random | None = None,
    ):
        self._groups = group_repository
        self._albums = album_repository
        self._artists = artist_repository
        self._rng = rng or random.Random()

    async def info(self) -> SeedInfo:
        return SeedInfo(
            seeded=await self._groups.count(seeded=True),
            unseeded=await self._groups.count(seeded=False),
        )

    async def remove_all(self) -> int:
        """Remove seeded and user-created groups alike."""
        removed = await self._groups.delete_seeded(True)
        removed += await self._groups.delete_seeded(False)
        logger.info("Removed %d music group(s)", removed)
        return removed

    async def seed(self, count: int, remove_existing: bool = False) -> SeedInfo:
        if count < 0:
            raise ValueError("count must not be negative")
        if remove_existing:
            await self.remove_all()

        for _ in range(count):
            await self._seed_group()

        logger.info("Seeded %d music group(s)", count)
        return await self.info()

    async def _seed_group(self) -> None:
        rng = self._rng
        established = rng.randint(_FIRST_YEAR, _LAST_YEAR - 5)
        group = await self._groups.create(
            MusicGroup(
                name=f"The {rng.choice(_GROUP_ADJECTIVES)} {rng.choice(_GROUP_NOUNS)}",
                established_year=established,
                genre=rng.choice(list(MusicGenre)),
                seeded=True,
            )
        )

        for _ in range(rng.randint(1, 4)):
            await self._albums.create(
                Album(
                    name=f"{rng.choice(_ALBUM_WORDS)} {rng.choice(_ALBUM_WORDS)}",
                    release_year=rng.randint(established, _LAST_YEAR),
                    music_group_id=group.id,
                    copies_sold=rng.randint(1_000, 5_000_000),
                    seeded=True,
                )
            )

        for _ in range(rng.randint(2, 5)):
            born = date(established - 20, 1, 1) + timedelta(days=rng.randint(0, 3650))
            await self._artists.create(
                Artist(
                    first_name=rng.choice(_FIRST_NAMES),
                    last_name=rng.choice(_LAST_NAMES),
                    music_group_id=group.id,
                    birth_day=born,
                    seeded=True,
                )
            )
