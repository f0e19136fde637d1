"""Change-tag state machine for records edited in memory before a save."""

from enum import Enum

from catalog.domain.exceptions import InvalidTransitionError


class ChangeTag(str, Enum):
    """Lifecycle state of an editable record."""

    UNKNOWN = "unknown"
    UNCHANGED = "unchanged"
    INSERTED = "inserted"
    MODIFIED = "modified"
    DELETED = "deleted"


class ChangeEvent(str, Enum):
    """Things that can happen to an editable record."""

    INSERT = "insert"
    EDIT = "edit"
    DELETE = "delete"
    PERSIST = "persist"


_T = ChangeTag
_E = ChangeEvent

# Missing (tag, event) pairs are illegal.
_TRANSITIONS: dict[tuple[ChangeTag, ChangeEvent], ChangeTag] = {
    (_T.UNKNOWN, _E.INSERT): _T.INSERTED,
    (_T.UNCHANGED, _E.EDIT): _T.MODIFIED,
    (_T.UNCHANGED, _E.DELETE): _T.DELETED,
    (_T.UNCHANGED, _E.PERSIST): _T.UNCHANGED,
    (_T.INSERTED, _E.EDIT): _T.INSERTED,
    (_T.INSERTED, _E.DELETE): _T.DELETED,
    (_T.INSERTED, _E.PERSIST): _T.UNCHANGED,
    (_T.MODIFIED, _E.EDIT): _T.MODIFIED,
    (_T.MODIFIED, _E.DELETE): _T.DELETED,
    (_T.MODIFIED, _E.PERSIST): _T.UNCHANGED,
    (_T.DELETED, _E.INSERT): _T.DELETED,
    (_T.DELETED, _E.EDIT): _T.DELETED,
    (_T.DELETED, _E.DELETE): _T.DELETED,
    (_T.DELETED, _E.PERSIST): _T.DELETED,
}


def next_tag(tag: ChangeTag, event: ChangeEvent) -> ChangeTag:
    """Return the tag a record moves to when ``event`` happens.

    Deleted is absorbing. Raises InvalidTransitionError for pairs with no
    defined outcome, e.g. deleting a record that was never tagged.
    """
    try:
        return _TRANSITIONS[(tag, event)]
    except KeyError:
        raise InvalidTransitionError(tag.value, event.value) from None
