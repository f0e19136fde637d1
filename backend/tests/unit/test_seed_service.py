"""Unit tests for SeedService."""

import random

import pytest

from catalog.application.services import SeedService
from tests.unit.fakes import (
    FakeAlbumRepository,
    FakeArtistRepository,
    FakeMusicGroupRepository,
    FakeStore,
    seed_group,
)


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def service(store: FakeStore) -> SeedService:
    return SeedService(
        FakeMusicGroupRepository(store),
        FakeAlbumRepository(store),
        FakeArtistRepository(store),
        rng=random.Random(7),
    )


@pytest.mark.asyncio
async def test_seed_creates_flagged_groups_with_children(store, service):
    info = await service.seed(5)

    assert (info.seeded, info.unseeded, info.total) == (5, 0, 5)
    assert all(g.seeded for g in store.groups.values())
    for group_id in store.groups:
        albums = [a for a in store.albums.values() if a.music_group_id == group_id]
        artists = [a for a in store.artists.values() if a.music_group_id == group_id]
        assert 1 <= len(albums) <= 4
        assert 2 <= len(artists) <= 5
        assert all(1900 <= a.release_year <= 2024 for a in albums)


@pytest.mark.asyncio
async def test_seed_keeps_user_groups_unless_asked(store, service):
    seed_group(store, name="My Own Band")

    info = await service.seed(2)
    assert (info.seeded, info.unseeded) == (2, 1)

    info = await service.seed(1, remove_existing=True)
    assert (info.seeded, info.unseeded) == (1, 0)


@pytest.mark.asyncio
async def test_remove_all_clears_everything(store, service):
    seed_group(store)
    await service.seed(3)

    removed = await service.remove_all()

    assert removed == 4
    assert store.groups == {} and store.albums == {} and store.artists == {}


@pytest.mark.asyncio
async def test_negative_count_rejected(service):
    with pytest.raises(ValueError):
        await service.seed(-1)
