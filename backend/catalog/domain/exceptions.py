"""Domain-specific exceptions — framework-independent."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalog.domain.entities.validation import ValidationReport


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidTransitionError(Exception):
    """Raised when a change tag receives an event it cannot accept."""

    def __init__(self, tag: str, event: str):
        self.tag = tag
        self.event = event
        super().__init__(f"Cannot apply '{event}' to a record tagged '{tag}'")


class EditValidationError(Exception):
    """Raised when the fields relevant to an edit action fail validation.

    Nothing has been persisted or staged when this is raised.
    """

    def __init__(self, report: ValidationReport):
        self.report = report
        super().__init__("; ".join(m.message for m in report.messages) or "Validation failed")


class SaveIncompleteError(Exception):
    """Base for terminal save failures.

    Saving an aggregate is a sequence of independent calls with no enclosing
    transaction and no compensation. Steps completed before the failure stay
    applied, so the stored group may be partially updated.
    """

    def __init__(self, stage: str, music_group_id: str | None, message: str):
        self.stage = stage
        self.music_group_id = music_group_id
        super().__init__(
            f"Save of music group '{music_group_id}' incomplete at stage '{stage}': {message}. "
            "Changes applied before this point were not rolled back."
        )


class ConsistencyError(SaveIncompleteError):
    """A modified record has no counterpart in the freshly re-read aggregate."""

    def __init__(self, stage: str, music_group_id: str | None, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            stage,
            music_group_id,
            f"{entity_type} '{entity_id}' is missing from the stored aggregate",
        )


class PersistenceError(SaveIncompleteError):
    """A repository call failed while saving; the underlying error is chained."""

    def __init__(self, stage: str, music_group_id: str | None, cause: Exception):
        self.cause = cause
        super().__init__(stage, music_group_id, f"{type(cause).__name__}: {cause}")
