from __future__ import annotations

from typing import Callable, Iterable, List, Protocol

from mixtape.staging.models import Item

RemovedListener = Callable[[str], None]


class ItemStore(Protocol):
    """Owner of the Item records the staging controller edits."""

    def get(self, item_id: str) -> Item:
        raise NotImplementedError

    def items(self) -> List[Item]:
        raise NotImplementedError

    def set_tags(self, item_id: str, tags: Iterable[str]) -> Item:
        raise NotImplementedError

    def remove(self, item_id: str) -> bool:
        raise NotImplementedError

    def on_removed(self, listener: RemovedListener) -> Callable[[], None]:
        raise NotImplementedError
