"""Per-row edit actions on a group edit session.

Each action validates only the fields it submits, then returns an updated
copy of the session. Nothing here talks to storage; the staged changes are
applied when the session is saved.
"""

from catalog.application.schemas.group_edit import ChildKind, GroupEditSession, RecordKey
from catalog.application.services.change_tracking import (
    EditableRow,
    mark_deleted,
    mark_inserted,
    mark_modified_if_needed,
)
from catalog.application.services.validation_gate import (
    edit_child_fields,
    new_child_fields,
    validate_partial,
)
from catalog.domain.entities import ChangeTag
from catalog.domain.exceptions import EditValidationError, EntityNotFoundError


def _find_row(session: GroupEditSession, kind: ChildKind, key: RecordKey) -> tuple[int, EditableRow]:
    for index, row in enumerate(session.rows(kind)):
        if row.key == key:
            return index, row
    raise EntityNotFoundError(kind.value.capitalize(), key.value)


def stage_insert_child(session: GroupEditSession, kind: ChildKind) -> GroupEditSession:
    """Move the filled-in "add" form of ``kind`` into the collection as a new row."""
    report = validate_partial(session, new_child_fields(kind))
    if not report.ok:
        raise EditValidationError(report)

    staged = session.model_copy(deep=True)
    row = staged.new_row(kind).model_copy(update={"tag": ChangeTag.UNKNOWN, "key": None})
    row.reset_pending_edit()
    mark_inserted(row)
    staged.rows(kind).append(row)
    staged.clear_new_row(kind)
    return staged


def stage_delete_child(session: GroupEditSession, kind: ChildKind, key: RecordKey) -> GroupEditSession:
    """Tag the row addressed by ``key`` as deleted."""
    staged = session.model_copy(deep=True)
    _, row = _find_row(staged, kind, key)
    mark_deleted(row)
    return staged


def stage_edit_child(session: GroupEditSession, kind: ChildKind, key: RecordKey) -> GroupEditSession:
    """Commit the pending edit of the row addressed by ``key``."""
    index, _ = _find_row(session, kind, key)
    report = validate_partial(session, edit_child_fields(kind, index))
    if not report.ok:
        raise EditValidationError(report)

    staged = session.model_copy(deep=True)
    mark_modified_if_needed(staged.rows(kind)[index])
    return staged
