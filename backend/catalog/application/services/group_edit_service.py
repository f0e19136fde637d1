"""Application service (use case) that saves an edited music group aggregate."""

import logging
from dataclasses import dataclass

from catalog.application.interfaces import AlbumRepository, ArtistRepository, MusicGroupRepository
from catalog.application.schemas.group_edit import ChildKind, GroupEditSession
from catalog.application.services.child_reconciler import ChildCollectionReconciler
from catalog.application.services.validation_gate import GROUP_SAVE_FIELDS, validate_partial
from catalog.domain.entities import ChangeEvent, ChangeTag, MusicGroup, next_tag
from catalog.domain.exceptions import (
    ConsistencyError,
    EditValidationError,
    EntityNotFoundError,
    PersistenceError,
    SaveIncompleteError,
)
from catalog.infrastructure.logging.colored_logger import SaveLogger, SaveStage

logger = logging.getLogger(__name__)
plog = SaveLogger("MusicGroupEditService")


@dataclass
class SaveResult:
    """Outcome of a completed save; callers continue to the group's view."""

    music_group_id: str
    created: bool
    music_group: MusicGroup


class MusicGroupEditService:
    """Opens, resets and saves group edit sessions.

    A save is a saga of independent repository calls: optional group
    creation, album reconciliation, artist reconciliation, a re-read and the
    final group update. There is no enclosing transaction and no
    compensation. When a step fails, the steps before it stay applied and
    the failure is raised as a SaveIncompleteError.
    """

    def __init__(
        self,
        group_repository: MusicGroupRepository,
        album_repository: AlbumRepository,
        artist_repository: ArtistRepository,
    ):
        self._groups = group_repository
        # Albums first, then artists; the two share no keys.
        self._reconcilers = (
            ChildCollectionReconciler(ChildKind.ALBUM, album_repository, group_repository),
            ChildCollectionReconciler(ChildKind.ARTIST, artist_repository, group_repository),
        )

    def new_session(self) -> GroupEditSession:
        return GroupEditSession.blank()

    async def open_session(self, music_group_id: str) -> GroupEditSession:
        group = await self._groups.get_aggregate(music_group_id)
        if group is None:
            raise EntityNotFoundError("MusicGroup", music_group_id)
        return GroupEditSession.from_aggregate(group)

    async def undo(self, music_group_id: str | None) -> GroupEditSession:
        """Throw away every staged edit and reload the stored group."""
        if not music_group_id:
            return self.new_session()
        logger.info("Discarding staged edits of music group %s", music_group_id)
        return await self.open_session(music_group_id)

    async def save(self, session: GroupEditSession) -> SaveResult:
        """Persist everything staged in ``session``.

        Raises:
            EditValidationError: group fields are invalid; nothing was written.
            ConsistencyError: a modified row vanished from storage mid-save.
            PersistenceError: a repository call failed; earlier calls stay applied.
        """
        report = validate_partial(session, GROUP_SAVE_FIELDS)
        if not report.ok:
            plog.step_error(SaveStage.VALIDATE, f"Rejected save: {len(report.messages)} invalid field(s)")
            raise EditValidationError(report)

        created = session.tag is ChangeTag.INSERTED
        if not created and not session.music_group_id:
            raise ValueError("Only a new music group may be saved without an id")

        group_id = session.music_group_id
        plog.separator(f"Saving music group {group_id or '(new)'}")
        stage = "create_group"
        try:
            if created:
                with plog.timed_step(SaveStage.CREATE_ROOT, f"Creating music group '{session.name}'"):
                    new_group = await self._groups.create(session.to_entity())
                group_id = new_group.id
                session.music_group_id = group_id

            for reconciler in self._reconcilers:
                stage = f"reconcile_{reconciler.kind.value}s"
                await reconciler.reconcile(session.rows(reconciler.kind), group_id)

            stage = "reread_group"
            with plog.timed_step(SaveStage.REREAD, "Re-reading music group before final update"):
                group = await self._groups.get_aggregate(group_id)
            if group is None:
                raise ConsistencyError(stage, group_id, "MusicGroup", group_id)

            stage = "update_group"
            with plog.timed_step(SaveStage.UPDATE_ROOT, "Updating music group attributes", group_id=group_id):
                group = await self._groups.update(session.overlay(group))
        except SaveIncompleteError:
            raise
        except Exception as exc:
            plog.step_error(SaveStage.ERROR, f"Save aborted at '{stage}'", error=exc)
            raise PersistenceError(stage, group_id, exc) from exc

        if created:
            session.tag = next_tag(session.tag, ChangeEvent.PERSIST)
        plog.step_complete(SaveStage.COMPLETE, "Music group saved", group_id=group_id, created=created)
        return SaveResult(music_group_id=group_id, created=created, music_group=group)
