"""Tag operations on editable rows, driven by the change-tag state machine."""

from catalog.application.schemas.group_edit import AlbumEdit, ArtistEdit, PersistentId, TemporaryId
from catalog.domain.entities import ChangeEvent, ChangeTag, next_tag

EditableRow = AlbumEdit | ArtistEdit


def mark_inserted(row: EditableRow) -> None:
    """Tag a freshly built row as inserted and give it a temporary key."""
    row.tag = next_tag(row.tag, ChangeEvent.INSERT)
    if row.tag is ChangeTag.INSERTED:
        row.key = TemporaryId()


def mark_deleted(row: EditableRow) -> None:
    """Stage a deletion. Nothing is sent to storage until the group is saved."""
    row.tag = next_tag(row.tag, ChangeEvent.DELETE)


def mark_modified_if_needed(row: EditableRow) -> None:
    """Commit the pending edit; rows never persisted stay inserted."""
    tag = next_tag(row.tag, ChangeEvent.EDIT)
    if tag is not ChangeTag.DELETED:
        row.apply_pending_edit()
    row.tag = tag


def mark_persisted(row: EditableRow, persistent_id: str) -> None:
    """Record that storage now holds this row under ``persistent_id``."""
    row.tag = next_tag(row.tag, ChangeEvent.PERSIST)
    row.key = PersistentId(value=persistent_id)
