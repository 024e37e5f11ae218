"""File-backed tag persistence.

Public API:
- FileTagCommitter
- CommitOutcome
- MusicTagIO
"""

from .committer import CommitOutcome, FileTagCommitter
from .io.music_tag_io import MusicTagIO

__all__ = ["FileTagCommitter", "CommitOutcome", "MusicTagIO"]
