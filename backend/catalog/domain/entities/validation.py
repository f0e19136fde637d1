"""Typed field addressing for partial validation of an edit session."""

from dataclasses import dataclass, field
from enum import Enum


class FormSection(str, Enum):
    """Part of an edit session a field lives in."""

    GROUP = "group"
    NEW_ALBUM = "new_album"
    NEW_ARTIST = "new_artist"
    ALBUMS = "albums"
    ARTISTS = "artists"


_GROUP_FIELDS = frozenset({"name", "established_year", "genre"})
_ALBUM_FIELDS = frozenset({"album_name", "release_year", "edit_album_name", "edit_release_year"})
_ARTIST_FIELDS = frozenset({"first_name", "last_name", "edit_first_name", "edit_last_name"})

SECTION_FIELDS: dict[FormSection, frozenset[str]] = {
    FormSection.GROUP: _GROUP_FIELDS,
    FormSection.NEW_ALBUM: _ALBUM_FIELDS,
    FormSection.ALBUMS: _ALBUM_FIELDS,
    FormSection.NEW_ARTIST: _ARTIST_FIELDS,
    FormSection.ARTISTS: _ARTIST_FIELDS,
}

_INDEXED = frozenset({FormSection.ALBUMS, FormSection.ARTISTS})


@dataclass(frozen=True)
class FieldPath:
    """Address of one validated field, e.g. the pending name of the 3rd album."""

    section: FormSection
    field: str
    index: int | None = None

    def __post_init__(self) -> None:
        if self.field not in SECTION_FIELDS[self.section]:
            raise ValueError(f"Unknown field '{self.field}' for section '{self.section.value}'")
        if self.section in _INDEXED:
            if self.index is None or self.index < 0:
                raise ValueError(f"Section '{self.section.value}' needs a non-negative row index")
        elif self.index is not None:
            raise ValueError(f"Section '{self.section.value}' does not take a row index")

    @property
    def loc(self) -> tuple[str | int, ...]:
        """Location of the field inside a serialized edit session."""
        if self.section is FormSection.GROUP:
            return (self.field,)
        if self.index is None:
            return (self.section.value, self.field)
        return (self.section.value, self.index, self.field)

    def __str__(self) -> str:
        if self.section is FormSection.GROUP:
            return self.field
        if self.index is None:
            return f"{self.section.value}.{self.field}"
        return f"{self.section.value}[{self.index}].{self.field}"


@dataclass(frozen=True)
class ValidationMessage:
    path: FieldPath
    message: str


@dataclass
class ValidationReport:
    """Outcome of validating a subset of fields."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.messages
