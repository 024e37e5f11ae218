from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from mixtape import logger as logger_mod
from mixtape.errors import TagCatalogError

from .models import dedupe_tags

log = logger_mod.get_logger()


class CatalogAction(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    RENAMED = "renamed"
    REPLACED = "replaced"


@dataclass(frozen=True)
class CatalogChange:
    action: CatalogAction
    tag: Optional[str] = None
    new_tag: Optional[str] = None


CatalogListener = Callable[[CatalogChange], None]


class TagCatalog:
    """Global ordered, duplicate-free set of tag names.

    Mutations come from whoever owns tag management (create/delete/rename).
    Listeners are notified once the catalog is fully updated.
    """

    def __init__(self, tags: Iterable[str] = ()):
        self._tags: List[str] = dedupe_tags(tags)
        self._listeners: List[CatalogListener] = []

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TagCatalog({self._tags!r})"

    @property
    def tags(self) -> Tuple[str, ...]:
        return tuple(self._tags)

    def subscribe(self, listener: CatalogListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self, change: CatalogChange) -> None:
        for listener in list(self._listeners):
            listener(change)

    def add(self, tag: str) -> bool:
        if tag in self._tags:
            log.debug(f"[CATALOG] {tag!r} already present")
            return False
        self._tags.append(tag)
        self._notify(CatalogChange(CatalogAction.ADDED, tag))
        return True

    def remove(self, tag: str) -> bool:
        if tag not in self._tags:
            return False
        self._tags.remove(tag)
        self._notify(CatalogChange(CatalogAction.REMOVED, tag))
        return True

    def rename(self, old: str, new: str) -> None:
        if old not in self._tags:
            raise TagCatalogError(f"Cannot rename unknown tag: {old!r}")
        if old == new:
            return
        if new in self._tags:
            raise TagCatalogError(f"Cannot rename {old!r}: {new!r} already exists")
        self._tags[self._tags.index(old)] = new
        self._notify(CatalogChange(CatalogAction.RENAMED, old, new))

    def replace(self, tags: Iterable[str]) -> None:
        """Swap in a freshly loaded tag list."""
        self._tags = dedupe_tags(tags)
        self._notify(CatalogChange(CatalogAction.REPLACED))
