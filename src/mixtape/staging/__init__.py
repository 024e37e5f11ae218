"""Tag edit staging.

Public API:
- StagingController
- TagCatalog
- EditSession, Item, RenderModel
- available_pool
"""

from .catalog import CatalogAction, CatalogChange, TagCatalog
from .controller import StagingController
from .models import (
    AddTag,
    ApplyEdit,
    CancelEdit,
    EditOutcome,
    EditSession,
    Item,
    MediaKind,
    RemoveTag,
    RenderModel,
    StartEdit,
)
from .pool import available_pool

__all__ = [
    "StagingController",
    "TagCatalog",
    "CatalogAction",
    "CatalogChange",
    "EditSession",
    "EditOutcome",
    "Item",
    "MediaKind",
    "RenderModel",
    "StartEdit",
    "AddTag",
    "RemoveTag",
    "ApplyEdit",
    "CancelEdit",
    "available_pool",
]
