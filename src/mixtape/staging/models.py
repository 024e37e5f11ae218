from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union


def dedupe_tags(tags: Iterable[str]) -> List[str]:
    """Return tags in order with later duplicates dropped."""
    seen = set()
    out: List[str] = []
    for tag in tags:
        if tag in seen:
            continue
        seen.add(tag)
        out.append(tag)
    return out


class MediaKind(str, Enum):
    SONG = "song"
    VIDEO = "video"


@dataclass
class Item:
    """A song or video owning an ordered, duplicate-free tag list."""

    id: str
    tags: List[str] = field(default_factory=list)
    title: str = ""
    artist: str = ""
    album: str = ""
    duration_seconds: int = 0
    kind: MediaKind = MediaKind.SONG

    def __post_init__(self) -> None:
        self.tags = dedupe_tags(self.tags)
        self.kind = MediaKind(self.kind)

    def duration_formatted(self) -> str:
        minutes, seconds = divmod(max(int(self.duration_seconds), 0), 60)
        return f"{minutes}:{seconds:02d}"


class EditSession:
    """Staging state for one item's tag edits.

    `original_tags` is fixed when the session opens. `current_tags` is a working
    copy owned by the session; it is never the item's own list.
    """

    def __init__(self, item_id: str, tags: Iterable[str]):
        self.item_id = item_id
        self.original_tags: Tuple[str, ...] = tuple(dedupe_tags(tags))
        self.current_tags: List[str] = list(self.original_tags)
        self.is_open = True

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return (
            f"EditSession(item_id={self.item_id!r}, {state}, "
            f"original={list(self.original_tags)!r}, current={self.current_tags!r})"
        )

    def is_original(self, tag: str) -> bool:
        return tag in self.original_tags

    def add(self, tag: str) -> bool:
        if tag in self.current_tags:
            return False
        self.current_tags.append(tag)
        return True

    def remove(self, tag: str) -> bool:
        if tag not in self.current_tags:
            return False
        self.current_tags.remove(tag)
        return True

    def reset(self) -> None:
        self.current_tags = list(self.original_tags)

    def close(self) -> None:
        self.is_open = False


@dataclass(frozen=True)
class RenderModel:
    """What a two-list tag picker needs to draw one item."""

    item_id: str
    assigned_tags: Tuple[str, ...]
    available_tags: Tuple[str, ...]
    session_open: bool


# --- Commands ---------------------------------------------------------------


@dataclass(frozen=True)
class StartEdit:
    item_id: str


@dataclass(frozen=True)
class AddTag:
    item_id: str
    tag: str


@dataclass(frozen=True)
class RemoveTag:
    item_id: str
    tag: str


@dataclass(frozen=True)
class ApplyEdit:
    item_id: str


@dataclass(frozen=True)
class CancelEdit:
    item_id: str


EditCommand = Union[StartEdit, AddTag, RemoveTag, ApplyEdit, CancelEdit]


@dataclass(frozen=True)
class EditOutcome:
    """Result of one edit command.

    `committed_tags` is the snapshot handed to the persistence callback, or None
    when the command stayed local.
    """

    command: EditCommand
    changed: bool
    render: Optional[RenderModel]
    committed_tags: Optional[Tuple[str, ...]] = None

    @property
    def committed(self) -> bool:
        return self.committed_tags is not None
