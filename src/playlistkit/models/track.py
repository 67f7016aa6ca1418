"""Data structures representing purchasable tracks."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, replace
from typing import Any

from playlistkit.rating import stars_for


@dataclass(slots=True)
class Track:
    """A single track with a price and an optional rating.

    ``title`` is fixed once the track exists; ``price`` and ``rating`` may be
    reassigned freely. ``rating=None`` means the track has not been rated yet.
    """

    title: str
    price: float
    rating: int | None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "title" and hasattr(self, "title"):
            raise FrozenInstanceError("cannot assign to field 'title'")
        object.__setattr__(self, name, value)

    def describe(self) -> str:
        """Return ``"<title> $<price> - <stars>"``."""
        return f"{self.title} ${self.price} - {stars_for(self)}"

    def copy(self) -> Track:
        """Return an independent track with the same fields."""
        return replace(self)

    def __str__(self) -> str:
        return self.describe()
