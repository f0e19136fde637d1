"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from catalog.presentation.api.v1.endpoints.health import router as health_router
from catalog.presentation.api.v1.endpoints.groups import router as groups_router
from catalog.presentation.api.v1.endpoints.group_edits import router as group_edits_router
from catalog.presentation.api.v1.endpoints.seed import router as seed_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(groups_router)
router.include_router(group_edits_router)
router.include_router(seed_router)
