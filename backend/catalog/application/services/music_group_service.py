"""Application service (use case) for browsing and removing music groups."""

import logging

from catalog.application.interfaces import MusicGroupRepository
from catalog.domain.entities import MusicGroup, MusicGroupPage
from catalog.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class MusicGroupService:
    """Orchestrates read-side group logic. Depends on the repository port (DI)."""

    def __init__(self, repository: MusicGroupRepository, page_size: int = 10, max_visible_pages: int = 10):
        self._repository = repository
        self._page_size = page_size
        self._max_visible_pages = max_visible_pages

    async def get_group(self, group_id: str) -> MusicGroup:
        group = await self._repository.get_aggregate(group_id)
        if group is None:
            raise EntityNotFoundError("MusicGroup", group_id)
        return group

    async def list_groups(
        self,
        *,
        search: str | None = None,
        page: int = 0,
        seeded: bool | None = None,
    ) -> MusicGroupPage:
        search = search.strip() if search else None
        page = max(0, page)
        items = await self._repository.list_page(
            search=search,
            seeded=seeded,
            skip=page * self._page_size,
            limit=self._page_size,
        )
        total = await self._repository.count(search=search, seeded=seeded)
        return MusicGroupPage(
            items=items,
            total=total,
            page=page,
            page_size=self._page_size,
            max_visible_pages=self._max_visible_pages,
        )

    async def delete_group(self, group_id: str) -> bool:
        exists = await self._repository.get_by_id(group_id)
        if exists is None:
            raise EntityNotFoundError("MusicGroup", group_id)
        logger.info("Deleting music group %s with its albums and artists", group_id)
        return await self._repository.delete(group_id)
