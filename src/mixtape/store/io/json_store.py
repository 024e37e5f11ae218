from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from mixtape import config
from mixtape import json as json_mod
from mixtape import logger as logger_mod
from mixtape.staging.models import Item, MediaKind

from ..memory import InMemoryItemStore

log = logger_mod.get_logger()


def item_to_record(item: Item) -> Dict[str, Any]:
    return {
        "id": item.id,
        "kind": item.kind.value,
        "title": item.title,
        "artist": item.artist,
        "album": item.album,
        "duration_seconds": item.duration_seconds,
        "tags": list(item.tags),
    }


def item_from_record(record: Dict[str, Any]) -> Item:
    return Item(
        id=str(record["id"]),
        tags=[str(t) for t in record.get("tags") or []],
        title=record.get("title", ""),
        artist=record.get("artist", ""),
        album=record.get("album", ""),
        duration_seconds=int(record.get("duration_seconds") or 0),
        kind=MediaKind(record.get("kind", MediaKind.SONG.value)),
    )


class JsonItemStore(InMemoryItemStore):
    """Item store loaded from, and saved to, a JSON snapshot file."""

    def __init__(self, path: Optional[str] = None):
        super().__init__()
        self.path = path or config.ITEM_STORE_PATH
        self.load()

    def load(self) -> None:
        snapshot = json_mod.read_json_snapshot(self.path, config.ITEM_STORE_ROOT_KEY)
        self._items.clear()
        for record in snapshot[config.ITEM_STORE_ROOT_KEY]:
            self.add(item_from_record(record))
        log.debug(f"[ITEM-STORE] loaded {len(self)} item(s) from {self.path}")

    def save(self) -> None:
        snapshot = json_mod.create_collection_snapshot(config.ITEM_STORE_ROOT_KEY)
        snapshot[config.ITEM_STORE_ROOT_KEY] = [
            item_to_record(item) for item in self.items()
        ]
        json_mod.write_json_snapshot(snapshot, self.path)
        log.info(f"[ITEM-STORE] saved {len(self)} item(s) to {self.path}")

    def write_tags(self, item_id: str, tags: Iterable[str]) -> bool:
        """Writer for ChangeLedger.save_all: update one item and save the file."""
        self.set_tags(item_id, tags)
        self.save()
        return True
