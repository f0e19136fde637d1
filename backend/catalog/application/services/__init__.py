from .child_reconciler import ChildCollectionReconciler
from .group_edit_service import MusicGroupEditService, SaveResult
from .music_group_service import MusicGroupService
from .seed_service import SeedInfo, SeedService

__all__ = [
    "ChildCollectionReconciler",
    "MusicGroupEditService",
    "SaveResult",
    "MusicGroupService",
    "SeedInfo",
    "SeedService",
]
