from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Tuple

from mixtape import logger as logger_mod
from mixtape.staging.models import Item

log = logger_mod.get_logger()

TagWriter = Callable[[str, Tuple[str, ...]], bool]


class ChangeAction(str, Enum):
    UPDATE_TAGS = "update_tags"


@dataclass(frozen=True)
class MediaItemChange:
    item_id: str
    action: ChangeAction
    new_tags: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class SaveReport:
    success_count: int
    failure_count: int
    message: str

    @property
    def ok(self) -> bool:
        return self.success_count > 0 and self.failure_count == 0


class ChangeLedger:
    """Tag commits held until the user saves.

    An instance can be passed straight to StagingController as its persistence
    callback. Only the latest tag update per item is kept.
    """

    def __init__(self):
        self._changes: List[MediaItemChange] = []

    def __call__(self, item: Item, tags: Iterable[str]) -> MediaItemChange:
        return self.stage(item, tags)

    @property
    def changes(self) -> Tuple[MediaItemChange, ...]:
        return tuple(self._changes)

    def stage(self, item: Item, tags: Iterable[str]) -> MediaItemChange:
        self._changes = [
            c
            for c in self._changes
            if not (c.item_id == item.id and c.action == ChangeAction.UPDATE_TAGS)
        ]
        change = MediaItemChange(item.id, ChangeAction.UPDATE_TAGS, tuple(tags))
        self._changes.append(change)
        log.debug(f"[LEDGER] staged tag update for {item.id!r}: {list(change.new_tags)}")
        return change

    def is_empty(self) -> bool:
        return not self._changes

    def has_changes(self) -> bool:
        return not self.is_empty()

    def change_count(self) -> int:
        return len(self._changes)

    def description(self) -> str:
        parts = []
        tag_updates = sum(
            1 for c in self._changes if c.action == ChangeAction.UPDATE_TAGS
        )
        if tag_updates:
            parts.append(f"{tag_updates} tag update(s)")
        return ", ".join(parts)

    def discard(self) -> None:
        if self._changes:
            log.debug(f"[LEDGER] discarded {len(self._changes)} staged change(s)")
        self._changes = []

    def save_all(self, writer: TagWriter) -> SaveReport:
        """Push every staged change through `writer` and summarize the result.

        The ledger is cleared only if at least one change was saved, so a fully
        failed save can be retried as-is.
        """
        if self.is_empty():
            return SaveReport(0, 0, "No changes to save")

        success_count = 0
        failure_count = 0
        for change in self._changes:
            try:
                saved = writer(change.item_id, change.new_tags or ())
            except Exception as e:
                log.error(f"[LEDGER] failed saving tags for {change.item_id!r}: {e!r}")
                saved = False
            if saved:
                success_count += 1
            else:
                failure_count += 1

        if success_count and not failure_count:
            message = "All changes saved successfully!"
        elif success_count and failure_count:
            message = f"{success_count} saved, {failure_count} failed"
        elif failure_count:
            message = "Failed to save changes"
        else:
            message = "No changes processed"

        if success_count:
            self._changes = []
        log.info(f"[LEDGER] {message}")
        return SaveReport(success_count, failure_count, message)
