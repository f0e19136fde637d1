"""Seeding endpoints — fill or reset the catalogue with generated groups."""

from fastapi import APIRouter, Depends

from catalog.config import get_settings
from catalog.application.schemas import SeedInfoResponse, SeedRequest
from catalog.application.services import SeedService
from catalog.infrastructure.dependencies import get_seed_service

router = APIRouter(prefix="/seed", tags=["Seed"])


@router.get("", response_model=SeedInfoResponse)
async def seed_info(
    service: SeedService = Depends(get_seed_service),
) -> SeedInfoResponse:
    """How many seeded and user-created groups exist."""
    info = await service.info()
    return SeedInfoResponse(seeded=info.seeded, unseeded=info.unseeded, total=info.total)


@router.post("", response_model=SeedInfoResponse)
async def seed(
    data: SeedRequest,
    service: SeedService = Depends(get_seed_service),
) -> SeedInfoResponse:
    """Generate ``count`` groups, optionally clearing the catalogue first."""
    count = data.count if data.count is not None else get_settings().seed_default_count
    info = await service.seed(count, remove_existing=data.remove_existing)
    return SeedInfoResponse(seeded=info.seeded, unseeded=info.unseeded, total=info.total)
