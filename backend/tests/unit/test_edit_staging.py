"""Unit tests for staging row inserts, deletes and edits on an edit session."""

import pytest

from catalog.application.schemas.group_edit import (
    AlbumEdit,
    ArtistEdit,
    ChildKind,
    GroupEditSession,
    PersistentId,
    TemporaryId,
)
from catalog.application.services.edit_staging import (
    stage_delete_child,
    stage_edit_child,
    stage_insert_child,
)
from catalog.domain.entities import Album, Artist, ChangeTag, MusicGenre, MusicGroup
from catalog.domain.exceptions import EditValidationError, EntityNotFoundError


@pytest.fixture
def session() -> GroupEditSession:
    group = MusicGroup(
        id="g1",
        name="The Iron Comets",
        established_year=1985,
        genre=MusicGenre.METAL,
        albums=[Album(id="a1", name="Orbit Fever", release_year=1988, music_group_id="g1")],
        artists=[Artist(id="r1", first_name="Lars", last_name="Holm", music_group_id="g1")],
    )
    return GroupEditSession.from_aggregate(group)


def test_insert_moves_new_form_into_collection(session: GroupEditSession):
    session.new_album = AlbumEdit(album_name="Hollow Gravity", release_year=1991)

    staged = stage_insert_child(session, ChildKind.ALBUM)

    added = staged.albums[-1]
    assert added.tag is ChangeTag.INSERTED
    assert isinstance(added.key, TemporaryId)
    assert added.edit_album_name == "Hollow Gravity"
    assert staged.new_album == AlbumEdit()
    # the submitted session is left untouched
    assert len(session.albums) == 1


def test_invalid_insert_stages_nothing(session: GroupEditSession):
    session.new_artist = ArtistEdit(first_name="", last_name="Ek")

    with pytest.raises(EditValidationError) as exc_info:
        stage_insert_child(session, ChildKind.ARTIST)

    assert [str(m.path) for m in exc_info.value.report.messages] == ["new_artist.first_name"]
    assert len(session.artists) == 1


def test_delete_tags_row(session: GroupEditSession):
    staged = stage_delete_child(session, ChildKind.ARTIST, PersistentId(value="r1"))
    assert staged.artists[0].tag is ChangeTag.DELETED
    assert session.artists[0].tag is ChangeTag.UNCHANGED


def test_delete_unknown_key_raises(session: GroupEditSession):
    with pytest.raises(EntityNotFoundError):
        stage_delete_child(session, ChildKind.ALBUM, TemporaryId())


def test_edit_commits_pending_values(session: GroupEditSession):
    session.albums[0].edit_album_name = "Orbit Fever (Remastered)"

    staged = stage_edit_child(session, ChildKind.ALBUM, PersistentId(value="a1"))

    row = staged.albums[0]
    assert row.tag is ChangeTag.MODIFIED
    assert row.album_name == "Orbit Fever (Remastered)"


def test_edit_of_inserted_row_stays_inserted(session: GroupEditSession):
    session.new_album = AlbumEdit(album_name="Draft", release_year=2000)
    staged = stage_insert_child(session, ChildKind.ALBUM)
    key = staged.albums[-1].key
    staged.albums[-1].edit_album_name = "Final"

    staged = stage_edit_child(staged, ChildKind.ALBUM, key)

    assert staged.albums[-1].tag is ChangeTag.INSERTED
    assert staged.albums[-1].album_name == "Final"


def test_invalid_edit_is_rejected_without_change(session: GroupEditSession):
    session.artists[0].edit_last_name = " "

    with pytest.raises(EditValidationError):
        stage_edit_child(session, ChildKind.ARTIST, PersistentId(value="r1"))

    assert session.artists[0].tag is ChangeTag.UNCHANGED
    assert session.artists[0].last_name == "Holm"


def test_edit_after_delete_leaves_row_deleted(session: GroupEditSession):
    staged = stage_delete_child(session, ChildKind.ALBUM, PersistentId(value="a1"))
    staged = stage_edit_child(staged, ChildKind.ALBUM, PersistentId(value="a1"))
    assert staged.albums[0].tag is ChangeTag.DELETED
