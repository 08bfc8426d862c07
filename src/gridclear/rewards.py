"""Reward cards awarded for cleared lines and sections.

Each clear event turns into ``CARDS_PER_CLEAR`` ingredient cards.  The
ingredient depends on which third of the board a row or column falls into and,
for sections, on the section's position in the 3x3 section layout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, List, Tuple

from .clears import ClearEvent, ColumnClear, RowClear, SectionClear


LOGGER = logging.getLogger(__name__)

CARDS_PER_CLEAR = 1
MAX_CARDS = 4


class Ingredient(IntEnum):
    PUMPKIN = 1
    POTATO = 2
    TOMATO = 3
    EGGPLANT = 4
    MUSHROOM = 5
    GARLIC = 6


# Ingredient per band of rows/columns, top to bottom and left to right.
ROW_INGREDIENTS: Tuple[Ingredient, ...] = (
    Ingredient.TOMATO,
    Ingredient.POTATO,
    Ingredient.PUMPKIN,
)
COLUMN_INGREDIENTS: Tuple[Ingredient, ...] = (
    Ingredient.PUMPKIN,
    Ingredient.POTATO,
    Ingredient.TOMATO,
)
SECTION_INGREDIENTS: Dict[int, Ingredient] = {
    0: Ingredient.EGGPLANT,
    1: Ingredient.PUMPKIN,
    2: Ingredient.POTATO,
    3: Ingredient.TOMATO,
    4: Ingredient.MUSHROOM,
    5: Ingredient.PUMPKIN,
    6: Ingredient.POTATO,
    7: Ingredient.TOMATO,
    8: Ingredient.GARLIC,
}


def ingredient_for_clear(event: ClearEvent, band_size: int = 3) -> Ingredient:
    """Return the ingredient awarded for ``event``.

    Rows and columns are grouped into bands of ``band_size`` lines.

    Raises:
        ValueError: If no ingredient is defined for the event's index.
    """

    if isinstance(event, SectionClear):
        try:
            return SECTION_INGREDIENTS[event.index]
        except KeyError:
            raise ValueError(f"Unknown ingredient for section {event.index}") from None

    if isinstance(event, RowClear):
        table = ROW_INGREDIENTS
    elif isinstance(event, ColumnClear):
        table = COLUMN_INGREDIENTS
    else:
        raise TypeError(f"Not a clear event: {event!r}")

    band = event.index // band_size
    if not 0 <= band < len(table):
        raise ValueError(f"Unknown ingredient for {event.kind.value} {event.index}")
    return table[band]


@dataclass(frozen=True)
class RewardCard:
    """An ingredient card and the clear that produced it."""

    ingredient: Ingredient
    source: ClearEvent


@dataclass
class RewardHand:
    """Cards waiting to be played, capped at ``max_cards``."""

    max_cards: int = MAX_CARDS
    cards: List[RewardCard] = field(default_factory=list)

    @property
    def full(self) -> bool:
        return len(self.cards) >= self.max_cards

    def add(self, card: RewardCard) -> bool:
        """Add ``card`` unless the hand is full; return whether it was kept."""

        if self.full:
            LOGGER.debug("Hand full, dropping %s card", card.ingredient.name)
            return False
        self.cards.append(card)
        return True

    def take(self, index: int) -> RewardCard:
        """Remove and return the card at ``index``."""

        return self.cards.pop(index)

    def clear(self) -> None:
        self.cards.clear()

    def __len__(self) -> int:
        return len(self.cards)


__all__ = [
    "CARDS_PER_CLEAR",
    "MAX_CARDS",
    "Ingredient",
    "ingredient_for_clear",
    "RewardCard",
    "RewardHand",
]
