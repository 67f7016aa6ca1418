from __future__ import annotations

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from playlistkit.models import Describable, Track, describe
from playlistkit.rating import Rateable


@pytest.mark.parametrize(
    ("track", "expected"),
    [
        (Track("Welcome To New York", 1.29, 1), "Welcome To New York $1.29 - ★☆☆☆☆"),
        (Track("Blank Space", 1.29, None), "Blank Space $1.29 - Not rated"),
        (Track("Shake It Off", 1.29, 3), "Shake It Off $1.29 - ★★★☆☆"),
    ],
)
def test_track_description(track: Track, expected: str) -> None:
    assert track.describe() == expected
    assert str(track) == expected
    assert describe(track) == expected


def test_price_uses_shortest_round_trip_rendering() -> None:
    assert Track("Intro", 2.0, 0).describe() == "Intro $2.0 - ☆☆☆☆☆"
    assert Track("Interlude", 0.1 + 0.2, 0).describe().startswith("Interlude $0.30000000000000004 ")


@pytest.mark.parametrize(
    ("price", "expected"),
    [
        (Decimal("1.29"), "A $1.29 - ★☆☆☆☆"),
        (2, "A $2 - ★☆☆☆☆"),
    ],
)
def test_integer_and_decimal_prices_render_with_str(price: int | Decimal, expected: str) -> None:
    assert Track("A", price, 1).describe() == expected


def test_identical_fields_produce_identical_descriptions() -> None:
    first = Track("Style", 1.29, 4)
    second = Track("Style", 1.29, 4)

    assert first == second
    assert first.describe() == second.describe()


def test_price_and_rating_are_mutable() -> None:
    track = Track("Blank Space", 1.29, None)

    track.rating = 5
    track.price = 0.99

    assert track.describe() == "Blank Space $0.99 - ★★★★★"


def test_title_cannot_be_reassigned() -> None:
    track = Track("Out Of The Woods", 1.29, 2)

    with pytest.raises(FrozenInstanceError):
        track.title = "Into The Woods"
    assert track.title == "Out Of The Woods"


def test_copy_is_independent() -> None:
    original = Track("Bad Blood", 1.29, 2)
    clone = original.copy()

    clone.rating = 4

    assert clone is not original
    assert original.rating == 2
    assert clone.title == original.title


def test_track_satisfies_protocols() -> None:
    track = Track("Wildest Dreams", 1.29, None)

    assert isinstance(track, Rateable)
    assert isinstance(track, Describable)
