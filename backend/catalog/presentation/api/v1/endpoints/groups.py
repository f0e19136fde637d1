"""Music group browse, view and delete endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from catalog.application.schemas import MusicGroupPageResponse, MusicGroupResponse
from catalog.application.services import MusicGroupService
from catalog.domain.exceptions import EntityNotFoundError
from catalog.infrastructure.dependencies import get_music_group_service

router = APIRouter(prefix="/groups", tags=["Music Groups"])


@router.get("", response_model=MusicGroupPageResponse)
async def list_groups(
    search: str | None = Query(None, description="Match on group name or genre"),
    page: int = Query(0, ge=0),
    seeded: bool | None = Query(None, description="Only seeded (true) or user-created (false) groups"),
    service: MusicGroupService = Depends(get_music_group_service),
) -> MusicGroupPageResponse:
    """Retrieve one page of music groups."""
    result = await service.list_groups(search=search, page=page, seeded=seeded)
    return MusicGroupPageResponse.from_page(result)


@router.get("/{group_id}", response_model=MusicGroupResponse)
async def get_group(
    group_id: str,
    service: MusicGroupService = Depends(get_music_group_service),
) -> MusicGroupResponse:
    """Retrieve a music group with its albums and artists."""
    try:
        group = await service.get_group(group_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MusicGroupResponse.model_validate(group, from_attributes=True)


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_group(
    group_id: str,
    service: MusicGroupService = Depends(get_music_group_service),
) -> None:
    """Delete a music group together with its albums and artists."""
    try:
        await service.delete_group(group_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
