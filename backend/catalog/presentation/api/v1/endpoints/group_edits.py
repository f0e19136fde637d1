"""Group edit session endpoints.

The client keeps the edit session and posts it back with every action.
Row actions only return an updated session; nothing reaches the database
until the session is saved.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from catalog.application.schemas import (
    ChildKind,
    GroupEditSession,
    MusicGroupResponse,
    RowActionRequest,
    SaveResponse,
    UndoRequest,
    ValidationFailureResponse,
)
from catalog.application.services import MusicGroupEditService
from catalog.application.services.edit_staging import (
    stage_delete_child,
    stage_edit_child,
    stage_insert_child,
)
from catalog.domain.exceptions import (
    ConsistencyError,
    EditValidationError,
    EntityNotFoundError,
    InvalidTransitionError,
    PersistenceError,
)
from catalog.infrastructure.dependencies import get_group_edit_service

router = APIRouter(prefix="/group-edits", tags=["Group Edits"])


def _validation_failure(session: GroupEditSession, error: EditValidationError) -> JSONResponse:
    body = ValidationFailureResponse.build(session, error.report)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=body.model_dump(mode="json"),
    )


@router.get("/new", response_model=GroupEditSession)
async def new_session(
    service: MusicGroupEditService = Depends(get_group_edit_service),
) -> GroupEditSession:
    """Start editing a music group that does not exist yet."""
    return service.new_session()


@router.get("/{group_id}", response_model=GroupEditSession)
async def open_session(
    group_id: str,
    service: MusicGroupEditService = Depends(get_group_edit_service),
) -> GroupEditSession:
    """Start editing a stored music group."""
    try:
        return await service.open_session(group_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{kind}/insert", response_model=GroupEditSession)
async def insert_row(kind: ChildKind, session: GroupEditSession):
    """Add the filled-in new album/artist form as a row."""
    try:
        return stage_insert_child(session, kind)
    except EditValidationError as e:
        return _validation_failure(session, e)
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/{kind}/delete", response_model=GroupEditSession)
async def delete_row(kind: ChildKind, request: RowActionRequest):
    """Mark a row as deleted."""
    try:
        return stage_delete_child(request.session, kind, request.key)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/{kind}/edit", response_model=GroupEditSession)
async def edit_row(kind: ChildKind, request: RowActionRequest):
    """Commit the pending edit of a row."""
    try:
        return stage_edit_child(request.session, kind, request.key)
    except EditValidationError as e:
        return _validation_failure(request.session, e)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidTransitionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/undo", response_model=GroupEditSession)
async def undo(
    request: UndoRequest,
    service: MusicGroupEditService = Depends(get_group_edit_service),
) -> GroupEditSession:
    """Discard every staged change and reload the stored group."""
    try:
        return await service.undo(request.music_group_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/save", response_model=SaveResponse)
async def save(
    session: GroupEditSession,
    service: MusicGroupEditService = Depends(get_group_edit_service),
):
    """Persist the session.

    Save failures are returned rather than raised so the request still
    commits: calls that succeeded before the failure stay applied, which is
    the documented contract of a save.
    """
    try:
        result = await service.save(session)
    except EditValidationError as e:
        return _validation_failure(session, e)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ConsistencyError as e:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(e), "stage": e.stage, "music_group_id": e.music_group_id},
        )
    except PersistenceError as e:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": str(e), "stage": e.stage, "music_group_id": e.music_group_id},
        )

    return SaveResponse(
        music_group_id=result.music_group_id,
        created=result.created,
        next=f"/api/v1/groups/{result.music_group_id}",
        music_group=MusicGroupResponse.model_validate(result.music_group, from_attributes=True),
    )
