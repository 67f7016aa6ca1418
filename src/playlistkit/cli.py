"""Command-line entry point for playlistkit."""

from __future__ import annotations

import logging
from typing import Iterable

import click

from playlistkit.models import Track, describe
from playlistkit.rating import stars_from_rating
from playlistkit.sample import sample_playlist

logger = logging.getLogger(__name__)


class RatingParamType(click.ParamType):
    """An integer rating, or ``none`` for a track that has not been rated."""

    name = "rating"

    def convert(self, value, param, ctx) -> int | None:
        if value is None or isinstance(value, int):
            return value
        if value.strip().lower() == "none":
            return None
        try:
            return int(value)
        except ValueError:
            self.fail(f"{value!r} is not an integer or 'none'.", param, ctx)


RATING = RatingParamType()


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Enable debug logging on stderr.",
)
def main(verbose: bool) -> None:
    """Describe tracks and playlists with star ratings."""
    _configure_logging(verbose=verbose)


@main.command()
@click.option(
    "--tracks-only",
    is_flag=True,
    default=False,
    help="List the sample tracks one per line instead of the whole playlist.",
)
def show(tracks_only: bool) -> None:
    """Print the built-in sample playlist."""
    playlist = sample_playlist()
    if tracks_only:
        _print_tracks(playlist.tracks)
        return
    click.echo(describe(playlist))


@main.command()
@click.argument("rating", type=RATING)
def stars(rating: int | None) -> None:
    """Print the star rendering of RATING (an integer, or 'none').

    Pass negative values after '--', e.g. ``playlistkit stars -- -2``.
    """
    click.echo(stars_from_rating(rating))


@main.command()
@click.argument("title")
@click.option("--price", type=float, required=True, help="Track price.")
@click.option(
    "--rating",
    type=RATING,
    default=None,
    help="Integer rating, or 'none' when the track is unrated.",
)
def track(title: str, price: float, rating: int | None) -> None:
    """Describe a single track called TITLE."""
    logger.debug("Describing track %r (price=%r, rating=%r)", title, price, rating)
    click.echo(describe(Track(title=title, price=price, rating=rating)))


def _configure_logging(*, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _print_tracks(tracks: Iterable[Track]) -> None:
    for index, item in enumerate(tracks, start=1):
        click.echo(f"{index}. {item.describe()}")


if __name__ == "__main__":
    main()
