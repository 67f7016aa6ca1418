"""Ordered collections of tracks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from playlistkit.rating import stars_for

from .track import Track


@dataclass(slots=True)
class Playlist:
    """A named, rated, ordered list of tracks.

    The playlist keeps its own copies of the tracks handed to it, both at
    construction and when ``tracks`` is reassigned, so later changes to the
    caller's ``Track`` objects do not leak into it. Use :meth:`add_track` to
    append with the same guarantee.
    """

    name: str
    tracks: list[Track]
    rating: int | None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "tracks":
            value = _copy_tracks(value)
        object.__setattr__(self, name, value)

    def add_track(self, track: Track) -> None:
        """Append a copy of ``track`` to the end of the playlist."""
        self.tracks.append(track.copy())

    def describe(self) -> str:
        """Return the name and stars, then the bracketed track descriptions on a new line."""
        listing = ", ".join(track.describe() for track in self.tracks)
        return f"{self.name} {stars_for(self)} \n[{listing}]"

    def __str__(self) -> str:
        return self.describe()


def _copy_tracks(tracks: Iterable[Track]) -> list[Track]:
    return [track.copy() for track in tracks]
