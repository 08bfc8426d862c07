"""Error types shared by the placement engine."""

from __future__ import annotations

from enum import Enum


class PlaceError(str, Enum):
    """Reason a piece cannot be placed at a given origin."""

    OUT_OF_BOUNDS = "out_of_bounds"
    TAKEN = "taken"


class PlacementError(Exception):
    """Raised by :meth:`Board.place` when the placement is rejected.

    The rejection reason is kept on ``reason`` so callers can decide whether to
    re-snap the piece or send it back to its drag origin.
    """

    def __init__(self, reason: PlaceError) -> None:
        super().__init__(f"Cannot place piece: {reason.value}")
        self.reason = reason


class ConfigError(ValueError):
    """Invalid construction parameters for a board or a piece."""


class InvalidDimensions(ConfigError):
    """Board dimensions are zero or sections do not tile the board."""


class InvalidGeometry(ConfigError):
    """Piece geometry is empty or wider than its padded width."""


__all__ = [
    "PlaceError",
    "PlacementError",
    "ConfigError",
    "InvalidDimensions",
    "InvalidGeometry",
]
