"""Shared protocol for records that render a description."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Describable(Protocol):
    """Anything that can render a one-line or multi-line description of itself."""

    def describe(self) -> str:
        ...


def describe(item: Describable) -> str:
    """Return the human-readable description of a track or playlist."""
    return item.describe()
