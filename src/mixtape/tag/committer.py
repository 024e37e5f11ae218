from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple

from mixtape import logger as logger_mod
from mixtape.errors import UnknownItemError
from mixtape.staging.models import Item

from .io.music_tag_io import MusicTagIO

log = logger_mod.get_logger()


@dataclass(frozen=True)
class CommitOutcome:
    item_id: str
    tags: Tuple[str, ...]
    ok: bool
    error: str = ""


class FileTagCommitter:
    """Persistence callback that writes an item's tags into its audio file.

    Contract:
    - called as `committer(item, tags)`; returns a CommitOutcome
    - failures (unknown path, unreadable file) are logged and reported in the
      outcome, never raised
    """

    def __init__(self, paths: Mapping[str, str], io: Optional[MusicTagIO] = None):
        self._paths = dict(paths)
        self._io = io or MusicTagIO()
        self.outcomes: List[CommitOutcome] = []

    def __call__(self, item: Item, tags: Iterable[str]) -> CommitOutcome:
        outcome = self.commit(item.id, tags)
        self.outcomes.append(outcome)
        return outcome

    def path_for(self, item_id: str) -> str:
        try:
            return self._paths[item_id]
        except KeyError:
            raise UnknownItemError(f"No file known for item {item_id!r}") from None

    def commit(self, item_id: str, tags: Iterable[str]) -> CommitOutcome:
        snapshot = tuple(tags)
        try:
            self._io.write_tags(self.path_for(item_id), snapshot)
        except Exception as e:
            log.error(f"[TAG-WRITE] {item_id!r}: failed writing {list(snapshot)}: {e!r}")
            return CommitOutcome(item_id, snapshot, ok=False, error=str(e))
        return CommitOutcome(item_id, snapshot, ok=True)

    def write(self, item_id: str, tags: Iterable[str]) -> bool:
        """Writer for ChangeLedger.save_all."""
        return self.commit(item_id, tags).ok

    def read_tags(self, item_id: str) -> List[str]:
        return self._io.read_tags(self.path_for(item_id))
