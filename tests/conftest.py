"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from playlistkit import sample
from playlistkit.models import Playlist, Track


@pytest.fixture
def sample_tracks() -> list[Track]:
    return sample.sample_tracks()


@pytest.fixture
def sample_playlist() -> Playlist:
    return sample.sample_playlist()
