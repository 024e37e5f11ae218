from .music_tag_io import MusicTagIO

__all__ = ["MusicTagIO"]
