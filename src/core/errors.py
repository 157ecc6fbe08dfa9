"""Errors raised between the game core and its rendering backend."""

from __future__ import annotations


class AssetStillLoading(Exception):
    """A sprite has not finished loading yet; ask again next frame."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} is still loading")
        self.name = name


class AssetLoadFailure(Exception):
    """A sprite could not be loaded. There is no recovery from this."""

    def __init__(self, name: str, reason: str = "unknown sprite") -> None:
        super().__init__(f"failed to load {name}: {reason}")
        self.name = name
        self.reason = reason


class InvalidDrawArgument(ValueError):
    """The renderer was asked to draw something it cannot draw."""
