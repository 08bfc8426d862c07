"""Utility helpers for the placement engine."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .board import Board
from .piece import PieceGeometry


# Values used by ``render_board``.
EMPTY = 0
OCCUPIED = 1
PREVIEW = 2

Preview = Tuple[int, int, PieceGeometry]


def valid_placements(board: Board, piece: PieceGeometry) -> List[Tuple[int, int]]:
    """Return every ``(x, y)`` origin where ``piece`` can be placed."""

    return [
        (x, y)
        for y in range(board.height)
        for x in range(board.width)
        if board.can_place(x, y, piece.fields) is None
    ]


def render_board(board: Board, preview: Optional[Preview] = None) -> List[List[int]]:
    """Return the board as rows of ints with an optional piece preview.

    ``preview`` is an ``(x, y, piece)`` triple drawn with ``PREVIEW`` without
    mutating the board.  A preview that does not fit is ignored, matching how
    a dragged piece only snaps to valid targets.
    """

    grid = [[OCCUPIED if cell else EMPTY for cell in row] for row in board.grid()]
    if preview is not None:
        x, y, piece = preview
        if board.can_place(x, y, piece.fields) is None:
            for field in piece.fields:
                index = field + x + y * board.width
                grid[index // board.width][index % board.width] = PREVIEW
    return grid


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Return ``grid`` as text, one line per row."""

    symbols = {EMPTY: ".", OCCUPIED: "#", PREVIEW: "+"}
    return "\n".join("".join(symbols.get(cell, "?") for cell in row) for row in grid)


__all__ = ["valid_placements", "render_board", "format_grid"]
