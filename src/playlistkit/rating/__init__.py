"""Rating helpers for playlistkit."""

from .stars import (
    EMPTY_STAR,
    FILLED_STAR,
    NOT_RATED,
    STAR_COUNT,
    Rateable,
    stars_for,
    stars_from_rating,
)

__all__ = [
    "EMPTY_STAR",
    "FILLED_STAR",
    "NOT_RATED",
    "STAR_COUNT",
    "Rateable",
    "stars_for",
    "stars_from_rating",
]
