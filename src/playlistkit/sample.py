"""Built-in sample library used by the command-line interface."""

from __future__ import annotations

import logging

from playlistkit.models import Playlist, Track

logger = logging.getLogger(__name__)

SAMPLE_PLAYLIST_NAME = "My Swift Playlist"
SAMPLE_PLAYLIST_RATING = 5


def sample_tracks() -> list[Track]:
    """Return fresh copies of the sample tracks, in display order."""
    return [
        Track(title="Welcome To New York", price=1.29, rating=1),
        Track(title="Blank Space", price=1.29, rating=None),
        Track(title="Shake It Off", price=1.29, rating=3),
    ]


def sample_playlist() -> Playlist:
    """Return a new playlist holding the sample tracks."""
    tracks = sample_tracks()
    logger.debug("Building sample playlist %r with %d tracks", SAMPLE_PLAYLIST_NAME, len(tracks))
    return Playlist(name=SAMPLE_PLAYLIST_NAME, tracks=tracks, rating=SAMPLE_PLAYLIST_RATING)
