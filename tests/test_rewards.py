from __future__ import annotations

import logging

import pytest

from gridclear.clears import ColumnClear, RowClear, SectionClear
from gridclear.rewards import MAX_CARDS, Ingredient, RewardCard, RewardHand, ingredient_for_clear


@pytest.mark.parametrize(
    "event, expected",
    [
        (RowClear(0), Ingredient.TOMATO),
        (RowClear(4), Ingredient.POTATO),
        (RowClear(8), Ingredient.PUMPKIN),
        (ColumnClear(2), Ingredient.PUMPKIN),
        (ColumnClear(3), Ingredient.POTATO),
        (ColumnClear(7), Ingredient.TOMATO),
        (SectionClear(0), Ingredient.EGGPLANT),
        (SectionClear(5), Ingredient.PUMPKIN),
        (SectionClear(6), Ingredient.POTATO),
        (SectionClear(3), Ingredient.TOMATO),
        (SectionClear(4), Ingredient.MUSHROOM),
        (SectionClear(8), Ingredient.GARLIC),
    ],
)
def test_ingredient_for_clear(event, expected) -> None:
    assert ingredient_for_clear(event) is expected


@pytest.mark.parametrize("event", [RowClear(9), ColumnClear(12), SectionClear(9)])
def test_unknown_ingredient(event) -> None:
    with pytest.raises(ValueError):
        ingredient_for_clear(event)


def test_band_size_groups_lines() -> None:
    assert ingredient_for_clear(RowClear(1), band_size=1) is Ingredient.POTATO
    assert ingredient_for_clear(ColumnClear(5), band_size=2) is Ingredient.TOMATO


def test_hand_is_capped(caplog) -> None:
    hand = RewardHand()
    card = RewardCard(Ingredient.GARLIC, SectionClear(8))
    for _ in range(MAX_CARDS):
        assert hand.add(card) is True
    assert hand.full

    with caplog.at_level(logging.DEBUG, logger="gridclear.rewards"):
        assert hand.add(card) is False
    assert "GARLIC" in caplog.text
    assert len(hand) == MAX_CARDS

    assert hand.take(0) == card
    assert not hand.full
    hand.clear()
    assert len(hand) == 0
