"""Domain records for playlistkit."""

from .base import Describable, describe
from .playlist import Playlist
from .track import Track

__all__ = ["Describable", "Playlist", "Track", "describe"]
