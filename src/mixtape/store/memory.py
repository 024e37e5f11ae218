from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from mixtape import logger as logger_mod
from mixtape.errors import UnknownItemError
from mixtape.staging.models import Item, dedupe_tags

from .base import RemovedListener

log = logger_mod.get_logger()


class InMemoryItemStore:
    """Ordered, in-process item store."""

    def __init__(self, items: Iterable[Item] = ()):
        self._items: Dict[str, Item] = {}
        self._removed_listeners: List[RemovedListener] = []
        for item in items:
            self.add(item)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: Item) -> Item:
        self._items[item.id] = item
        return item

    def get(self, item_id: str) -> Item:
        try:
            return self._items[item_id]
        except KeyError:
            raise UnknownItemError(f"Unknown item: {item_id!r}") from None

    def items(self) -> List[Item]:
        return list(self._items.values())

    def set_tags(self, item_id: str, tags: Iterable[str]) -> Item:
        item = self.get(item_id)
        item.tags = dedupe_tags(tags)
        return item

    def remove(self, item_id: str) -> bool:
        if self._items.pop(item_id, None) is None:
            return False
        log.debug(f"[ITEM-STORE] removed {item_id!r}")
        for listener in list(self._removed_listeners):
            listener(item_id)
        return True

    def on_removed(self, listener: RemovedListener) -> Callable[[], None]:
        self._removed_listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._removed_listeners:
                self._removed_listeners.remove(listener)

        return _unsubscribe
