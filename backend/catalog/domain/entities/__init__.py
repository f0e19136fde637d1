from .change_tag import ChangeEvent, ChangeTag, next_tag
from .music_group import Album, Artist, MusicGenre, MusicGroup, MusicGroupPage
from .validation import FieldPath, FormSection, ValidationMessage, ValidationReport

__all__ = [
    "ChangeEvent",
    "ChangeTag",
    "next_tag",
    "Album",
    "Artist",
    "MusicGenre",
    "MusicGroup",
    "MusicGroupPage",
    "FieldPath",
    "FormSection",
    "ValidationMessage",
    "ValidationReport",
]
