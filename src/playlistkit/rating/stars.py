"""Star rendering for optional ratings."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

FILLED_STAR = "★"
EMPTY_STAR = "☆"
NOT_RATED = "Not rated"
STAR_COUNT = 5


@runtime_checkable
class Rateable(Protocol):
    """Anything carrying an optional integer rating."""

    rating: int | None


def stars_from_rating(rating: int | None) -> str:
    """Render a rating as five filled/empty stars, or ``NOT_RATED`` when absent.

    Values outside 0..5 are not rejected: anything at or below zero shows
    no filled stars and anything at or above ``STAR_COUNT`` shows all of them.
    """
    if rating is None:
        return NOT_RATED

    return "".join(
        FILLED_STAR if position < rating else EMPTY_STAR for position in range(STAR_COUNT)
    )


def stars_for(item: Rateable) -> str:
    """Return the star rendering for any object with a ``rating`` attribute."""
    return stars_from_rating(item.rating)
