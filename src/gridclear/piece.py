"""Piece geometry and the static shape catalog.

A piece is stored as a tuple of row-major offsets expressed in a coordinate
space as wide as the board it will be tested against (the *padded width*).
Translating such a piece to a board origin ``(x, y)`` is then a single
addition of ``x + y * width`` per offset, which is what :class:`Board` does.

Shape tables are written as ``(row, col)`` cells, the same way they would be
drawn on paper, and converted once at startup by :func:`build_catalog`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple

from .errors import InvalidGeometry

Cell = Tuple[int, int]


@dataclass(frozen=True)
class PieceGeometry:
    """Occupied offsets of a piece in a ``padded_width`` wide grid."""

    fields: Tuple[int, ...]
    width: int
    padded_width: int
    height: int

    @classmethod
    def create(
        cls, local_fields: Sequence[int], width: int, padded_width: int
    ) -> "PieceGeometry":
        """Return a geometry for ``local_fields`` laid out ``width`` wide.

        Each local offset is pushed out to the matching row of the padded
        coordinate space: ``f + (f // width) * (padded_width - width)``.

        Raises:
            InvalidGeometry: If the piece has no fields, a non-positive width,
                a negative offset or is wider than ``padded_width``.
        """

        if width <= 0:
            raise InvalidGeometry(f"Piece width must be positive, got {width}")
        if width > padded_width:
            raise InvalidGeometry(
                f"Piece is too wide {width} for the padded width {padded_width}"
            )
        if len(local_fields) == 0:
            raise InvalidGeometry("Piece has no fields")
        if any(f < 0 for f in local_fields):
            raise InvalidGeometry("Piece fields must be non-negative")

        if width == padded_width:
            fields = tuple(int(f) for f in local_fields)
        else:
            pad = padded_width - width
            fields = tuple(int(f) + (int(f) // width) * pad for f in local_fields)

        height = max(fields) // padded_width + 1
        return cls(fields=fields, width=width, padded_width=padded_width, height=height)

    @classmethod
    def from_cells(cls, cells: Iterable[Cell], padded_width: int) -> "PieceGeometry":
        """Build a geometry from ``(row, col)`` cells.

        The cells are normalised so the minimum row and column are zero.  Their
        order is preserved because :meth:`Board.place` reports clears in the
        order the offsets complete them.
        """

        cells = list(cells)
        if not cells:
            raise InvalidGeometry("Piece has no fields")
        min_r = min(r for r, _ in cells)
        min_c = min(c for _, c in cells)
        normalised = [(r - min_r, c - min_c) for r, c in cells]
        width = max(c for _, c in normalised) + 1
        local = [r * width + c for r, c in normalised]
        return cls.create(local, width, padded_width)

    def cells(self) -> List[Cell]:
        """Return the local ``(row, col)`` coordinates of the piece."""

        return [(f // self.padded_width, f % self.padded_width) for f in self.fields]

    def __len__(self) -> int:
        return len(self.fields)


class PieceShape(str, Enum):
    """Names of the shapes in the static catalog."""

    SINGLE = "single"
    DOMINO = "domino"
    DOMINO_V = "domino_v"
    LINE3 = "line3"
    LINE3_V = "line3_v"
    LINE4 = "line4"
    LINE4_V = "line4_v"
    CORNER = "corner"
    SQUARE = "square"
    BIG_SQUARE = "big_square"
    L = "L"
    J = "J"
    T = "T"
    S = "S"
    Z = "Z"
    CROSS = "cross"


# Base cells for every catalog shape, as ``(row, col)`` pairs.
SHAPE_CELLS: Dict[PieceShape, List[Cell]] = {
    PieceShape.SINGLE: [(0, 0)],
    PieceShape.DOMINO: [(0, 0), (0, 1)],
    PieceShape.DOMINO_V: [(0, 0), (1, 0)],
    PieceShape.LINE3: [(0, 0), (0, 1), (0, 2)],
    PieceShape.LINE3_V: [(0, 0), (1, 0), (2, 0)],
    PieceShape.LINE4: [(0, 0), (0, 1), (0, 2), (0, 3)],
    PieceShape.LINE4_V: [(0, 0), (1, 0), (2, 0), (3, 0)],
    PieceShape.CORNER: [(0, 0), (0, 1), (1, 0)],
    PieceShape.SQUARE: [(0, 0), (0, 1), (1, 0), (1, 1)],
    PieceShape.BIG_SQUARE: [
        (0, 0), (0, 1), (0, 2),
        (1, 0), (1, 1), (1, 2),
        (2, 0), (2, 1), (2, 2),
    ],
    PieceShape.L: [(0, 0), (1, 0), (2, 0), (2, 1)],
    PieceShape.J: [(0, 1), (1, 1), (2, 0), (2, 1)],
    PieceShape.T: [(0, 0), (0, 1), (0, 2), (1, 1)],
    PieceShape.S: [(0, 1), (0, 2), (1, 0), (1, 1)],
    PieceShape.Z: [(0, 0), (0, 1), (1, 1), (1, 2)],
    PieceShape.CROSS: [(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)],
}


def build_catalog(padded_width: int) -> Dict[PieceShape, PieceGeometry]:
    """Return a geometry for every catalog shape, padded to ``padded_width``.

    Shapes wider than the board are left out.
    """

    catalog: Dict[PieceShape, PieceGeometry] = {}
    for shape, cells in SHAPE_CELLS.items():
        width = max(c for _, c in cells) + 1
        if width > padded_width:
            continue
        catalog[shape] = PieceGeometry.from_cells(cells, padded_width)
    return catalog


__all__ = ["PieceGeometry", "PieceShape", "SHAPE_CELLS", "build_catalog"]
