from __future__ import annotations

import dataclasses

import pytest

from gridclear.errors import ConfigError, InvalidGeometry
from gridclear.piece import SHAPE_CELLS, PieceGeometry, PieceShape, build_catalog


@pytest.mark.parametrize(
    "fields, width, padded_width, expected",
    [
        ([0, 1, 2, 5, 6], 3, 3, (0, 1, 2, 5, 6)),
        ([0, 1, 2, 5, 6], 3, 5, (0, 1, 2, 7, 10)),
        ([0, 1, 2, 3], 2, 3, (0, 1, 3, 4)),
    ],
)
def test_create_remaps_to_padded_width(fields, width, padded_width, expected) -> None:
    piece = PieceGeometry.create(fields, width, padded_width)
    assert piece.fields == expected
    assert piece.width == width
    assert piece.padded_width == padded_width


@pytest.mark.parametrize(
    "fields, width, padded_width",
    [
        ([0, 1, 2, 5, 6], 3, 2),
        ([], 2, 4),
        ([0], 0, 4),
        ([-1, 0], 2, 4),
    ],
)
def test_create_rejects_invalid_geometry(fields, width, padded_width) -> None:
    with pytest.raises(InvalidGeometry):
        PieceGeometry.create(fields, width, padded_width)


def test_invalid_geometry_is_config_error() -> None:
    with pytest.raises(ConfigError):
        PieceGeometry.create([], 1, 1)


def test_height_is_derived_from_largest_offset() -> None:
    assert PieceGeometry.create([0, 1, 2, 5, 6], 3, 5).height == 3
    assert PieceGeometry.create([0, 1], 2, 9).height == 1
    assert PieceGeometry.create([1], 2, 2).height == 1


def test_from_cells_builds_l_piece() -> None:
    piece = PieceGeometry.from_cells([(0, 0), (1, 0), (2, 0), (2, 1)], padded_width=6)
    assert piece.fields == (0, 6, 12, 13)
    assert piece.width == 2
    assert piece.height == 3
    assert piece.cells() == [(0, 0), (1, 0), (2, 0), (2, 1)]


def test_from_cells_normalises_and_keeps_order() -> None:
    piece = PieceGeometry.from_cells([(2, 3), (1, 2), (1, 3)], padded_width=4)
    assert piece.cells() == [(1, 1), (0, 0), (0, 1)]
    assert len(piece) == 3


def test_geometry_is_immutable() -> None:
    piece = PieceGeometry.create([0], 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        piece.width = 2  # type: ignore[misc]


def test_catalog_covers_every_shape_on_standard_board() -> None:
    catalog = build_catalog(9)
    assert set(catalog) == set(PieceShape)
    for shape, piece in catalog.items():
        assert piece.padded_width == 9
        assert len(piece) == len(SHAPE_CELLS[shape])


def test_catalog_matches_hand_written_offsets() -> None:
    assert build_catalog(3)[PieceShape.CROSS].fields == (1, 3, 4, 5, 7)
    assert build_catalog(4)[PieceShape.CORNER].fields == (0, 1, 4)
    assert build_catalog(6)[PieceShape.SQUARE].fields == (0, 1, 6, 7)


def test_catalog_skips_shapes_wider_than_board() -> None:
    catalog = build_catalog(3)
    assert PieceShape.LINE4 not in catalog
    assert PieceShape.LINE4_V in catalog
    assert PieceShape.BIG_SQUARE in catalog
