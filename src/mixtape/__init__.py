"""Tag editing for mixtape media items.

Independent entry points:
- mixtape.staging (edit sessions, catalog, controller)
- mixtape.store (item stores, staged change ledger)
- mixtape.tag (audio file persistence)

Convenience exports are provided but optional.
"""

from .staging import Item, MediaKind, RenderModel, StagingController, TagCatalog
from .store import ChangeLedger, InMemoryItemStore, JsonItemStore
from .tag import FileTagCommitter

__all__ = [
    "StagingController",
    "TagCatalog",
    "Item",
    "MediaKind",
    "RenderModel",
    "InMemoryItemStore",
    "JsonItemStore",
    "ChangeLedger",
    "FileTagCommitter",
]
