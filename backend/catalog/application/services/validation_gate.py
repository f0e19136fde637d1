"""Partial validation of an edit session.

The edit surface submits many small actions (add a row, edit a row, save
the group) against one shared session. Each action validates only its own
fields, so half-filled inputs elsewhere never block it.
"""

from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints, ValidationError

from catalog.application.schemas.group_edit import ChildKind, GroupEditSession
from catalog.domain.entities import (
    FieldPath,
    FormSection,
    MusicGenre,
    ValidationMessage,
    ValidationReport,
)

MIN_YEAR = 1900
MAX_YEAR = 2024

_YEAR_MESSAGE = f"You must provide a year between {MIN_YEAR} and {MAX_YEAR}"

_MESSAGES: dict[str, str] = {
    "name": "You must provide a group name",
    "established_year": _YEAR_MESSAGE,
    "genre": "You must select a music genre",
    "album_name": "You must enter an album name",
    "edit_album_name": "You must enter an album name",
    "release_year": _YEAR_MESSAGE,
    "edit_release_year": _YEAR_MESSAGE,
    "first_name": "You must provide a first name",
    "edit_first_name": "You must provide a first name",
    "last_name": "You must provide a last name",
    "edit_last_name": "You must provide a last name",
}

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Year = Annotated[int, Field(ge=MIN_YEAR, le=MAX_YEAR)]


class _AlbumRules(BaseModel):
    album_name: RequiredText
    release_year: Year
    edit_album_name: RequiredText
    edit_release_year: Year


class _ArtistRules(BaseModel):
    first_name: RequiredText
    last_name: RequiredText
    edit_first_name: RequiredText
    edit_last_name: RequiredText


class _GroupRules(BaseModel):
    name: RequiredText
    established_year: Year
    genre: MusicGenre
    albums: list[_AlbumRules]
    artists: list[_ArtistRules]
    new_album: _AlbumRules
    new_artist: _ArtistRules


GROUP_SAVE_FIELDS: tuple[FieldPath, ...] = (
    FieldPath(FormSection.GROUP, "name"),
    FieldPath(FormSection.GROUP, "established_year"),
    FieldPath(FormSection.GROUP, "genre"),
)


def new_child_fields(kind: ChildKind) -> tuple[FieldPath, ...]:
    """Fields of the blank "add" form for ``kind``."""
    if kind is ChildKind.ALBUM:
        return (
            FieldPath(FormSection.NEW_ALBUM, "album_name"),
            FieldPath(FormSection.NEW_ALBUM, "release_year"),
        )
    return (
        FieldPath(FormSection.NEW_ARTIST, "first_name"),
        FieldPath(FormSection.NEW_ARTIST, "last_name"),
    )


def edit_child_fields(kind: ChildKind, index: int) -> tuple[FieldPath, ...]:
    """Pending-edit fields of row ``index`` of the ``kind`` collection."""
    if kind is ChildKind.ALBUM:
        return (
            FieldPath(FormSection.ALBUMS, "edit_album_name", index),
            FieldPath(FormSection.ALBUMS, "edit_release_year", index),
        )
    return (
        FieldPath(FormSection.ARTISTS, "edit_first_name", index),
        FieldPath(FormSection.ARTISTS, "edit_last_name", index),
    )


def validate_partial(candidate: GroupEditSession, paths: tuple[FieldPath, ...] | list[FieldPath]) -> ValidationReport:
    """Validate ``candidate`` and keep only the failures located at ``paths``."""
    try:
        _GroupRules.model_validate(candidate.model_dump())
    except ValidationError as exc:
        failed = {tuple(err["loc"]) for err in exc.errors()}
    else:
        failed = set()

    return ValidationReport(
        messages=[
            ValidationMessage(path=path, message=_MESSAGES[path.field])
            for path in paths
            if path.loc in failed
        ]
    )
