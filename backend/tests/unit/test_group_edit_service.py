"""Unit tests for MusicGroupEditService save orchestration."""

import pytest

from catalog.application.schemas.group_edit import AlbumEdit, ArtistEdit, ChildKind, PersistentId, TemporaryId
from catalog.application.services import MusicGroupEditService
from catalog.application.services.edit_staging import (
    stage_delete_child,
    stage_edit_child,
    stage_insert_child,
)
from catalog.domain.entities import ChangeTag, MusicGenre
from catalog.domain.exceptions import (
    ConsistencyError,
    EditValidationError,
    EntityNotFoundError,
    PersistenceError,
)
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
def service(store: FakeStore) -> MusicGroupEditService:
    return MusicGroupEditService(
        group_repository=FakeMusicGroupRepository(store),
        album_repository=FakeAlbumRepository(store),
        artist_repository=FakeArtistRepository(store),
    )


@pytest.mark.asyncio
async def test_add_one_delete_one_child(store, service):
    group_id = seed_group(store)
    session = await service.open_session(group_id)
    removed_key = session.albums[0].key
    session.new_album = AlbumEdit(album_name="Golden Orbit", release_year=2004)
    session = stage_insert_child(session, ChildKind.ALBUM)
    temp_key = session.albums[-1].key
    session = stage_delete_child(session, ChildKind.ALBUM, removed_key)
    store.clear_calls()

    result = await service.save(session)

    album_mutations = [c for c in store.mutations if c[1] == "album"]
    assert album_mutations == [
        ("delete", "album", removed_key.value),
        ("create", "album", group_id),
    ]
    assert len(result.music_group.albums) == 2
    new_album = next(a for a in result.music_group.albums if a.name == "Golden Orbit")
    assert new_album.id != temp_key.value
    assert removed_key.value not in {a.id for a in result.music_group.albums}
    assert all(isinstance(row.key, PersistentId) for row in session.albums)


@pytest.mark.asyncio
async def test_new_group_is_created_before_its_children(store, service):
    session = service.new_session()
    session.name = "The Silent Ravens"
    session.established_year = 2001
    session.genre = MusicGenre.BLUES
    session.new_artist = ArtistEdit(first_name="Ida", last_name="Strand")
    session = stage_insert_child(session, ChildKind.ARTIST)

    result = await service.save(session)

    assert result.created is True
    assert store.mutations == [
        ("create", "group", None),
        ("create", "artist", result.music_group_id),
        ("update", "group", result.music_group_id),
    ]
    assert session.tag is ChangeTag.UNCHANGED
    assert session.music_group_id == result.music_group_id
    assert [a.music_group_id for a in store.artists.values()] == [result.music_group_id]


@pytest.mark.asyncio
async def test_editing_one_child_issues_a_single_child_update(store, service):
    group_id = seed_group(store)
    session = await service.open_session(group_id)
    target = session.albums[1]
    target.edit_album_name = "Static Harbor (Deluxe)"
    session = stage_edit_child(session, ChildKind.ALBUM, target.key)
    store.clear_calls()

    result = await service.save(session)

    child_mutations = [c for c in store.mutations if c[1] != "group"]
    assert child_mutations == [("update", "album", target.key.value)]
    assert store.albums[target.key.value].name == "Static Harbor (Deluxe)"
    assert result.created is False


@pytest.mark.asyncio
async def test_failed_child_update_stops_the_save(store, service):
    group_id = seed_group(store)
    session = await service.open_session(group_id)
    session.name = "Renamed Band"
    target = session.albums[0]
    target.edit_album_name = "Changed"
    session = stage_edit_child(session, ChildKind.ALBUM, target.key)
    store.fail_on.add(("update", "album"))
    store.clear_calls()

    with pytest.raises(PersistenceError) as exc_info:
        await service.save(session)

    error = exc_info.value
    assert error.stage == "reconcile_albums"
    assert error.music_group_id == group_id
    assert isinstance(error.cause, EntityNotFoundError)
    assert ("update", "group", group_id) not in store.calls
    assert not any(c[1] == "artist" for c in store.calls)
    assert store.groups[group_id].name == "The Velvet Tides"


@pytest.mark.asyncio
async def test_vanished_child_surfaces_as_consistency_error(store, service):
    group_id = seed_group(store)
    session = await service.open_session(group_id)
    target = session.artists[0]
    target.edit_first_name = "Annika"
    session = stage_edit_child(session, ChildKind.ARTIST, target.key)
    del store.artists[target.key.value]

    with pytest.raises(ConsistencyError) as exc_info:
        await service.save(session)

    assert exc_info.value.stage == "update_artists"


@pytest.mark.asyncio
async def test_partial_writes_are_not_rolled_back(store, service):
    session = service.new_session()
    session.name = "The Wild Saints"
    session.established_year = 1977
    session.genre = MusicGenre.ROCK
    session.new_album = AlbumEdit(album_name="Fever Ashes", release_year=1979)
    session = stage_insert_child(session, ChildKind.ALBUM)
    store.fail_on.add(("create", "album"))

    with pytest.raises(PersistenceError) as exc_info:
        await service.save(session)

    assert exc_info.value.stage == "reconcile_albums"
    assert list(store.groups) == [exc_info.value.music_group_id]


@pytest.mark.asyncio
async def test_invalid_group_fields_make_no_calls(store, service):
    session = service.new_session()
    session.name = ""
    session.established_year = 1850

    with pytest.raises(EditValidationError) as exc_info:
        await service.save(session)

    assert {m.path.field for m in exc_info.value.report.messages} == {"name", "established_year", "genre"}
    assert store.calls == []


@pytest.mark.asyncio
async def test_existing_session_without_id_is_rejected(service):
    session = service.new_session().model_copy(
        update={"tag": ChangeTag.UNCHANGED, "name": "X", "established_year": 2000, "genre": MusicGenre.JAZZ}
    )
    with pytest.raises(ValueError):
        await service.save(session)


@pytest.mark.asyncio
async def test_saving_twice_makes_no_further_child_calls(store, service):
    group_id = seed_group(store)
    session = await service.open_session(group_id)
    session.new_album = AlbumEdit(album_name="Hollow Neon", release_year=2015)
    session = stage_insert_child(session, ChildKind.ALBUM)
    await service.save(session)
    store.clear_calls()

    await service.save(session)

    assert [c for c in store.mutations if c[1] != "group"] == []


@pytest.mark.asyncio
async def test_undo_reloads_the_stored_group(store, service):
    group_id = seed_group(store)
    session = await service.open_session(group_id)
    session = stage_delete_child(session, ChildKind.ALBUM, session.albums[0].key)
    session.new_artist = ArtistEdit(first_name="Oskar", last_name="Wall")
    session = stage_insert_child(session, ChildKind.ARTIST)

    restored = await service.undo(group_id)

    assert restored == await service.open_session(group_id)
    assert all(row.tag is ChangeTag.UNCHANGED for row in restored.albums + restored.artists)
    assert not any(isinstance(row.key, TemporaryId) for row in restored.artists)


@pytest.mark.asyncio
async def test_undo_without_id_returns_blank_session(service):
    restored = await service.undo(None)
    assert restored.tag is ChangeTag.INSERTED
    assert restored.genre is None
    assert restored.albums == [] and restored.artists == []


@pytest.mark.asyncio
async def test_open_unknown_group_raises(service):
    with pytest.raises(EntityNotFoundError):
        await service.open_session("nope")
