"""Reconciles one edited child collection of a music group against storage."""

import logging
from typing import Generic, TypeVar

from catalog.application.interfaces import ChildRepository, MusicGroupRepository
from catalog.application.schemas.group_edit import AlbumEdit, ArtistEdit, ChildKind, PersistentId
from catalog.application.services.change_tracking import mark_persisted
from catalog.domain.entities import Album, Artist, ChangeTag, MusicGroup
from catalog.domain.exceptions import ConsistencyError
from catalog.infrastructure.logging.colored_logger import SaveLogger, SaveStage

logger = logging.getLogger(__name__)
plog = SaveLogger("ChildCollectionReconciler")

RowT = TypeVar("RowT", AlbumEdit, ArtistEdit)
ChildT = TypeVar("ChildT", Album, Artist)


class ChildCollectionReconciler(Generic[RowT, ChildT]):
    """Applies the staged deletes, inserts and updates of one child collection.

    The order is fixed: deletes, then inserts, then a mandatory re-read of
    the aggregate, then updates matched against the re-read. Create and
    delete calls do not hand back the collection as storage now holds it,
    and an update must only target a record known to exist, so the re-read
    is what the updates are matched against.

    A failing repository call stops the sequence. Calls already made stay
    applied; nothing is compensated.
    """

    def __init__(
        self,
        kind: ChildKind,
        repository: ChildRepository[ChildT],
        group_repository: MusicGroupRepository,
    ):
        self._kind = kind
        self._repository = repository
        self._group_repository = group_repository
        self._entity_type = kind.value.capitalize()

    @property
    def kind(self) -> ChildKind:
        return self._kind

    def _members(self, group: MusicGroup) -> list[ChildT]:
        return group.albums if self._kind is ChildKind.ALBUM else group.artists

    async def reconcile(self, edited: list[RowT], parent_id: str) -> list[ChildT]:
        """Persist the staged changes in ``edited`` and return the stored collection.

        ``edited`` is updated in place: handled deletions are dropped and
        inserted or updated rows take their persistent key and an unchanged tag.
        """
        if not parent_id:
            raise ValueError("Children can only be reconciled once the music group exists")

        deleted = [row for row in edited if row.tag is ChangeTag.DELETED]
        inserted = [row for row in edited if row.tag is ChangeTag.INSERTED]
        modified = [row for row in edited if row.tag is ChangeTag.MODIFIED]
        noun = f"{self._kind.value}(s)"

        if deleted:
            with plog.timed_step(SaveStage.DELETE, f"Deleting {len(deleted)} {noun}", group_id=parent_id):
                for row in deleted:
                    await self._delete(row)
            edited[:] = [row for row in edited if row.tag is not ChangeTag.DELETED]

        if inserted:
            with plog.timed_step(SaveStage.INSERT, f"Creating {len(inserted)} {noun}", group_id=parent_id):
                for row in inserted:
                    created = await self._repository.create(row.to_entity(parent_id))
                    plog.detail(f"{self._entity_type} created", id=created.id)
                    mark_persisted(row, created.id)

        with plog.timed_step(SaveStage.REREAD, f"Re-reading music group before {self._kind.value} updates"):
            group = await self._group_repository.get_aggregate(parent_id)
        if group is None:
            raise ConsistencyError(f"reread_{self._kind.value}s", parent_id, "MusicGroup", parent_id)

        members = self._members(group)
        positions = {member.id: i for i, member in enumerate(members)}

        if modified:
            with plog.timed_step(SaveStage.UPDATE, f"Updating {len(modified)} {noun}", group_id=parent_id):
                for row in modified:
                    key = row.key
                    if not isinstance(key, PersistentId) or key.value not in positions:
                        missing = key.value if key is not None else "<no key>"
                        raise ConsistencyError(
                            f"update_{self._kind.value}s", parent_id, self._entity_type, missing
                        )
                    i = positions[key.value]
                    members[i] = await self._repository.update(row.overlay(members[i]))
                    mark_persisted(row, key.value)

        logger.debug(
            "Reconciled %ss of %s: -%d +%d ~%d",
            self._kind.value, parent_id, len(deleted), len(inserted), len(modified),
        )
        return members

    async def _delete(self, row: RowT) -> None:
        if not isinstance(row.key, PersistentId):
            # Added and removed in the same session: storage never saw it.
            plog.detail(f"Discarding unsaved {self._kind.value}")
            return
        removed = await self._repository.delete(row.key.value)
        if not removed:
            plog.detail(f"{self._entity_type} already absent", id=row.key.value)
