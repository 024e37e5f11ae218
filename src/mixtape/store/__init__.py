"""Item store collaborators and the staged change ledger.

Public API:
- ItemStore (protocol)
- InMemoryItemStore
- JsonItemStore
- ChangeLedger
"""

from .base import ItemStore
from .io.json_store import JsonItemStore
from .ledger import ChangeAction, ChangeLedger, MediaItemChange, SaveReport
from .memory import InMemoryItemStore

__all__ = [
    "ItemStore",
    "InMemoryItemStore",
    "JsonItemStore",
    "ChangeLedger",
    "ChangeAction",
    "MediaItemChange",
    "SaveReport",
]
