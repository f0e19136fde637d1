"""Request/response DTOs for the group edit actions."""

from pydantic import BaseModel, Field

from catalog.application.schemas.group_edit import GroupEditSession, RecordKey
from catalog.application.schemas.music_group import MusicGroupResponse
from catalog.domain.entities import ValidationReport


class RowActionRequest(BaseModel):
    """A session plus the key of the row an edit or delete applies to."""

    session: GroupEditSession
    key: RecordKey


class UndoRequest(BaseModel):
    music_group_id: str | None = None


class FieldErrorSchema(BaseModel):
    field: str = Field(..., examples=["albums[0].edit_album_name"])
    message: str = Field(..., examples=["You must enter an album name"])


class ValidationFailureResponse(BaseModel):
    """Returned when the submitted fields are invalid; the session comes back unchanged."""

    session: GroupEditSession
    errors: list[FieldErrorSchema]

    @classmethod
    def build(cls, session: GroupEditSession, report: ValidationReport) -> "ValidationFailureResponse":
        return cls(
            session=session,
            errors=[FieldErrorSchema(field=str(m.path), message=m.message) for m in report.messages],
        )


class SaveResponse(BaseModel):
    """Returned after a save; ``next`` points at the group's view."""

    music_group_id: str
    created: bool
    next: str
    music_group: MusicGroupResponse


class SeedRequest(BaseModel):
    count: int | None = Field(None, ge=0, le=10_000, description="Defaults to the configured seed count")
    remove_existing: bool = True


class SeedInfoResponse(BaseModel):
    seeded: int
    unseeded: int
    total: int
