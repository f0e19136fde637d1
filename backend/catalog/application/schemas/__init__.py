from .edit_actions import (
    FieldErrorSchema,
    RowActionRequest,
    SaveResponse,
    SeedInfoResponse,
    SeedRequest,
    UndoRequest,
    ValidationFailureResponse,
)
from .group_edit import (
    AlbumEdit,
    ArtistEdit,
    ChildKind,
    GroupEditSession,
    PersistentId,
    RecordKey,
    TemporaryId,
)
from .music_group import (
    AlbumResponse,
    ArtistResponse,
    MusicGroupPageResponse,
    MusicGroupResponse,
    PaginationResponse,
)

__all__ = [
    "FieldErrorSchema",
    "RowActionRequest",
    "SaveResponse",
    "SeedInfoResponse",
    "SeedRequest",
    "UndoRequest",
    "ValidationFailureResponse",
    "AlbumEdit",
    "ArtistEdit",
    "ChildKind",
    "GroupEditSession",
    "PersistentId",
    "RecordKey",
    "TemporaryId",
    "AlbumResponse",
    "ArtistResponse",
    "MusicGroupPageResponse",
    "MusicGroupResponse",
    "PaginationResponse",
]
