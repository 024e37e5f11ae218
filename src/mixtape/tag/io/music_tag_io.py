from __future__ import annotations

import os
from typing import Iterable, List, Optional

try:
    import music_tag  # type: ignore
except Exception as e:  # pragma: no cover
    music_tag = None
    _music_tag_err = e
else:
    _music_tag_err = None

try:
    from mutagen.id3 import ID3, ID3NoHeaderError  # type: ignore
except Exception as e:  # pragma: no cover
    ID3 = ID3NoHeaderError = None  # type: ignore
    _mutagen_err = e
else:
    _mutagen_err = None

from mixtape import config
from mixtape import logger as logger_mod

log = logger_mod.get_logger()


class MusicTagIO:
    """Adapter around the `music_tag` library.

    Stores an item's tag list in a single text field of a local audio file,
    joined with `separator`.
    """

    def __init__(
        self,
        field: Optional[str] = None,
        separator: Optional[str] = None,
        ensure_virtualdj_compat: Optional[bool] = None,
    ):
        self.field = field or config.TAG_FIELD
        self.separator = separator or config.TAG_SEPARATOR
        if ensure_virtualdj_compat is None:
            ensure_virtualdj_compat = config.VIRTUALDJ_COMPAT
        self.ensure_virtualdj_compat = ensure_virtualdj_compat

    def _require_music_tag(self) -> None:
        if music_tag is None:  # pragma: no cover
            raise ImportError(
                "music-tag is required for tag persistence. Install music-tag to use MusicTagIO."
            ) from _music_tag_err

    def split(self, raw: Optional[str]) -> List[str]:
        if not raw:
            return []
        sep = self.separator.strip() or self.separator
        out: List[str] = []
        for part in str(raw).split(sep):
            tag = part.strip()
            if tag and tag not in out:
                out.append(tag)
        return out

    def join(self, tags: Iterable[str]) -> str:
        return self.separator.join(tags)

    def read_tags(self, path: str) -> List[str]:
        self._require_music_tag()
        f = music_tag.load_file(path)
        if self.field not in f:
            return []
        v = f[self.field]
        if isinstance(v, list):
            v = self.separator.join([str(x) for x in v if x is not None])
        return self.split("" if v is None else str(v))

    def write_tags(self, path: str, tags: Iterable[str]) -> None:
        """Write tags into the field; every tag must read back unchanged.

        Raises ValueError for a tag holding the separator or surrounding
        whitespace, before the file is touched.
        """
        tags = list(tags)
        for tag in tags:
            if self.split(tag) != [tag]:
                raise ValueError(
                    f"Tag {tag!r} cannot be stored in {self.field!r} "
                    f"with separator {self.separator!r}"
                )
        self._require_music_tag()
        f = music_tag.load_file(path)
        f[self.field] = self.join(tags)
        f.save()
        if self.ensure_virtualdj_compat:
            self._save_virtualdj_id3_compat(path)

    def _save_virtualdj_id3_compat(self, path: str) -> None:
        """Best-effort: re-save as ID3v2.3 so VirtualDJ reads the field (mp3 only)."""
        if ID3 is None:  # pragma: no cover
            return
        ext = os.path.splitext(path)[1].lower().lstrip(".")
        if ext != "mp3":
            return
        try:
            try:
                id3 = ID3(path)
            except ID3NoHeaderError:
                id3 = ID3()
            id3.save(path, v2_version=3)
        except Exception as e:
            log.warning(f"[TAG-WRITE] {path}: ID3v2.3 re-save failed: {e!r}")
