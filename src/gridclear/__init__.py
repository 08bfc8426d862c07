"""Grid placement and clearing engine for a block puzzle."""

from .board import Board, TileCoords, BOARD_SIZE, SECTION_SIZE
from .clears import ClearEvent, ClearKind, ClearQueue, ColumnClear, RowClear, SectionClear
from .errors import ConfigError, InvalidDimensions, InvalidGeometry, PlaceError, PlacementError
from .piece import PieceGeometry, PieceShape, build_catalog
from .rewards import Ingredient, RewardCard, RewardHand, ingredient_for_clear
from .simulation import ClearOutcome, EngineConfig, SimulationContext
from .utils import format_grid, render_board, valid_placements

__all__ = [
    "Board",
    "TileCoords",
    "BOARD_SIZE",
    "SECTION_SIZE",
    "ClearEvent",
    "ClearKind",
    "ClearQueue",
    "RowClear",
    "ColumnClear",
    "SectionClear",
    "PlaceError",
    "PlacementError",
    "ConfigError",
    "InvalidDimensions",
    "InvalidGeometry",
    "PieceGeometry",
    "PieceShape",
    "build_catalog",
    "Ingredient",
    "RewardCard",
    "RewardHand",
    "ingredient_for_clear",
    "EngineConfig",
    "ClearOutcome",
    "SimulationContext",
    "render_board",
    "format_grid",
    "valid_placements",
]
