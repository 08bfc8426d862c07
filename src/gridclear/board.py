"""Board representation for the placement grid.

The board is a flat, row-major array of occupancy flags indexed
``y * width + x`` with the origin in the top-left corner.  It is tiled into
``section_size`` x ``section_size`` sections which, together with rows and
columns, are the units that get cleared once fully occupied.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .clears import ClearEvent, ColumnClear, RowClear, SectionClear
from .errors import InvalidDimensions, PlaceError, PlacementError


LOGGER = logging.getLogger(__name__)

# Dimensions of the standard board: a 9x9 grid of nine 3x3 sections.
BOARD_SIZE = 9
SECTION_SIZE = 3

Fields = NDArray[np.bool_]


class TileCoords(NamedTuple):
    """Cell coordinates on the board, ``x`` is the column and ``y`` the row."""

    x: int
    y: int


def _validate_dimensions(width: int, height: int, section_size: int) -> None:
    if width <= 0 or height <= 0 or section_size <= 0:
        raise InvalidDimensions("Invalid dimension - no dimension can be 0")
    if (width * height) % (section_size * section_size) != 0:
        raise InvalidDimensions(f"Invalid section size {section_size}")


class Board:
    """Occupancy grid that validates placements and detects completed lines."""

    def __init__(
        self,
        width: int = BOARD_SIZE,
        height: int = BOARD_SIZE,
        section_size: int = SECTION_SIZE,
    ) -> None:
        _validate_dimensions(width, height, section_size)
        self.width = int(width)
        self.height = int(height)
        self.section_size = int(section_size)
        self._fields: Fields = np.zeros(self.width * self.height, dtype=np.bool_)

    @classmethod
    def with_fields(
        cls, width: int, height: int, section_size: int, fields: Sequence[bool]
    ) -> "Board":
        """Return a board pre-populated with ``fields``.

        Raises:
            InvalidDimensions: If the dimensions are invalid or ``fields`` does
                not hold exactly ``width * height`` flags.
        """

        board = cls(width, height, section_size)
        if len(fields) != board.size:
            raise InvalidDimensions(
                f"Invalid fields len {len(fields)}, should be {board.size}"
            )
        board._fields[:] = np.asarray(fields, dtype=np.bool_)
        return board

    # ------------------------------------------------------------------
    # Basic accessors
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def fields(self) -> List[bool]:
        """Return a copy of the occupancy flags as plain bools."""

        return self._fields.tolist()

    @property
    def sections_per_row(self) -> int:
        return self.width // self.section_size

    @property
    def section_count(self) -> int:
        return self.size // (self.section_size * self.section_size)

    def is_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at ``(x, y)`` is occupied.

        Raises:
            IndexError: If the coordinates are outside the board.
        """

        return bool(self._fields[self.tile_index(TileCoords(x, y))])

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self._fields))

    def grid(self) -> NDArray[np.bool_]:
        """Return a ``(height, width)`` copy of the board for renderers."""

        return self._fields.reshape(self.height, self.width).copy()

    def copy(self) -> "Board":
        return Board.with_fields(self.width, self.height, self.section_size, self._fields)

    def tile_index(self, coord: Tuple[int, int]) -> int:
        """Return the flat index of ``coord`` given as ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """

        x, y = coord
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Tile coords [{x}, {y}] are out of bounds")
        return y * self.width + x

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def can_place(self, x: int, y: int, piece: Sequence[int]) -> Optional[PlaceError]:
        """Return why ``piece`` cannot be placed at ``(x, y)`` or ``None``.

        ``piece`` holds offsets expressed in a grid as wide as the board.  An
        out-of-bounds field anywhere in the piece wins over an occupied one,
        so scanning continues after an occupied cell is found.
        """

        result: Optional[PlaceError] = None
        for field in piece:
            i = field + x + y * self.width
            offset_x = field % self.width + x
            if (
                field < 0
                or x < 0
                or y < 0
                or i >= self.size
                or offset_x >= self.width
                or y >= self.height
            ):
                return PlaceError.OUT_OF_BOUNDS
            if self._fields[i]:
                result = PlaceError.TAKEN
        return result

    def place(self, x: int, y: int, piece: Iterable[int]) -> List[ClearEvent]:
        """Occupy ``piece`` at ``(x, y)`` and return the lines it completed.

        Offsets are applied in the given order.  For each one the column, row
        and section predicates are evaluated before and after the cell is
        occupied and an event is emitted for every predicate that flipped.
        The completed cells stay occupied; clearing them is up to the caller.

        Raises:
            PlacementError: If :meth:`can_place` rejects the placement.
        """

        piece = tuple(piece)
        error = self.can_place(x, y, piece)
        if error is not None:
            LOGGER.debug("Rejected placement at (%d, %d): %s", x, y, error.value)
            raise PlacementError(error)

        cleared: List[ClearEvent] = []
        for field in piece:
            col = (field + x) % self.width
            row = field // self.width + y

            col_done = self.column_done(col)
            row_done = self.row_done(row)
            section_index, section_done = self.section_done(col, row)

            self._fields[row * self.width + col] = True

            if not col_done and self.column_done(col):
                cleared.append(ColumnClear(col))
            if not row_done and self.row_done(row):
                cleared.append(RowClear(row))
            if not section_done and self.section_done(col, row)[1]:
                cleared.append(SectionClear(section_index, used_special=False))

        if cleared:
            LOGGER.debug("Placement at (%d, %d) completed %s", x, y, cleared)
        return cleared

    # ------------------------------------------------------------------
    # Indexing
    # ------------------------------------------------------------------
    def column_indices(self, col: int) -> List[int]:
        if not 0 <= col < self.width:
            raise IndexError(f"Column [{col}] is out of bounds")
        return list(range(col, self.size, self.width))

    def row_range(self, row: int) -> range:
        if not 0 <= row < self.height:
            raise IndexError(f"Row [{row}] is out of bounds")
        start = row * self.width
        return range(start, start + self.width)

    def section(self, x: int, y: int) -> Tuple[int, List[int]]:
        """Return ``(section_index, indices)`` of the section holding ``(x, y)``.

        Indices are listed row by row, left to right.
        """

        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Section coords [{x}, {y}] are out of bounds")

        size = self.section_size
        section_row = y // size
        section_col = x // size
        top = section_row * size
        left = section_col * size
        indices = [
            row * self.width + left + dx
            for row in range(top, top + size)
            for dx in range(size)
        ]
        return self.sections_per_row * section_row + section_col, indices

    def section_coords_from_index(self, index: int) -> Tuple[int, int]:
        """Return the top-left ``(x, y)`` cell of section ``index``."""

        if not 0 <= index < self.section_count:
            raise IndexError(f"Section [{index}] is out of bounds")
        per_row = self.sections_per_row
        return (index % per_row) * self.section_size, (index // per_row) * self.section_size

    def section_by_index(self, index: int) -> List[int]:
        x, y = self.section_coords_from_index(index)
        return self.section(x, y)[1]

    # ------------------------------------------------------------------
    # Completion queries
    # ------------------------------------------------------------------
    def row_done(self, row: int) -> bool:
        r = self.row_range(row)
        return bool(self._fields[r.start : r.stop].all())

    def column_done(self, col: int) -> bool:
        return bool(self._fields[self.column_indices(col)].all())

    def section_done(self, x: int, y: int) -> Tuple[int, bool]:
        index, indices = self.section(x, y)
        return index, bool(self._fields[indices].all())

    def is_section_empty(self, section_index: int) -> bool:
        indices = self.section_by_index(section_index)
        return not bool(self._fields[indices].any())

    # ------------------------------------------------------------------
    # Clearing
    # ------------------------------------------------------------------
    def clear_row(self, row: int) -> List[int]:
        """Empty ``row`` and return the cleared indices."""

        indices = list(self.row_range(row))
        self._fields[indices] = False
        return indices

    def clear_column(self, col: int) -> List[int]:
        """Empty ``col`` and return the cleared indices."""

        indices = self.column_indices(col)
        self._fields[indices] = False
        return indices

    def clear_section(self, section_index: int) -> List[int]:
        """Empty section ``section_index`` and return the cleared indices."""

        indices = self.section_by_index(section_index)
        self._fields[indices] = False
        return indices

    def clear_all(self) -> None:
        self._fields.fill(False)

    def __repr__(self) -> str:
        return (
            f"Board(width={self.width}, height={self.height}, "
            f"section_size={self.section_size}, occupied={self.occupied_count()})"
        )


__all__ = ["Board", "TileCoords", "BOARD_SIZE", "SECTION_SIZE"]
