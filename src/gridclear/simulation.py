"""Simulation context owning the board, the clear queue and the reward hand.

The context is handed to whichever game-loop step needs it instead of keeping
the board and queue as global state.  A tick looks like::

    ctx = SimulationContext()
    ctx.try_place(x, y, piece)      # on drop, any number of times
    outcomes = ctx.drain_clears()   # once, at the end of the tick

Placement only detects completed lines; the drain step awards the cards and
performs the actual clearing so rewards can be computed from the completed
board before it is wiped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .board import BOARD_SIZE, SECTION_SIZE, Board
from .clears import ClearEvent, ClearQueue, ColumnClear, RowClear, SectionClear
from .errors import InvalidGeometry, PlaceError, PlacementError
from .piece import PieceGeometry
from .rewards import (
    CARDS_PER_CLEAR,
    MAX_CARDS,
    RewardCard,
    RewardHand,
    ingredient_for_clear,
)


LOGGER = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Board geometry and reward settings for a session."""

    width: int = BOARD_SIZE
    height: int = BOARD_SIZE
    section_size: int = SECTION_SIZE
    cards_per_clear: int = CARDS_PER_CLEAR
    max_cards: int = MAX_CARDS

    def build_board(self) -> Board:
        return Board(self.width, self.height, self.section_size)


@dataclass(frozen=True)
class ClearOutcome:
    """Result of processing one clear event during a drain."""

    event: ClearEvent
    cleared_indices: List[int]
    cards: List[RewardCard]


@dataclass
class SimulationContext:
    """Mutable state for one puzzle session."""

    config: EngineConfig = field(default_factory=EngineConfig)
    board: Board = field(init=False)
    clear_queue: ClearQueue = field(default_factory=ClearQueue, init=False)
    hand: RewardHand = field(init=False)
    pieces_placed: int = field(default=0, init=False)
    clears_processed: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.board = self.config.build_board()
        self.hand = RewardHand(max_cards=self.config.max_cards)

    def try_place(self, x: int, y: int, piece: PieceGeometry) -> Optional[PlaceError]:
        """Place ``piece`` at ``(x, y)`` and queue the clears it produces.

        Returns the rejection reason instead of raising so drag handlers can
        re-snap the piece directly.

        Raises:
            InvalidGeometry: If ``piece`` is padded for a board of another width.
        """

        if piece.padded_width != self.board.width:
            raise InvalidGeometry(
                f"Piece padded to width {piece.padded_width}, board is {self.board.width} wide"
            )
        try:
            events = self.board.place(x, y, piece.fields)
        except PlacementError as exc:
            return exc.reason
        self.clear_queue.extend(events)
        self.pieces_placed += 1
        return None

    def can_place_anywhere(self, piece: PieceGeometry) -> bool:
        """Return ``True`` if some origin on the board accepts ``piece``."""

        for y in range(self.board.height):
            for x in range(self.board.width):
                if self.board.can_place(x, y, piece.fields) is None:
                    return True
        return False

    def drain_clears(self) -> List[ClearOutcome]:
        """Award cards for every queued clear, then clear the board cells.

        Events are processed in arrival order.  Cards for every event are
        awarded before the first cell is cleared.
        """

        if not self.clear_queue:
            return []

        events = self.clear_queue.drain()
        awarded = [self._award_cards(event) for event in events]

        outcomes: List[ClearOutcome] = []
        for event, cards in zip(events, awarded):
            indices = self._apply_clear(event)
            outcomes.append(ClearOutcome(event=event, cleared_indices=indices, cards=cards))

        self.clears_processed += len(outcomes)
        LOGGER.debug("Processed %d clears", len(outcomes))
        return outcomes

    def reset(self) -> None:
        """Reset the session for a new level or a restart."""

        self.board.clear_all()
        self.clear_queue.clear()
        self.hand.clear()
        self.pieces_placed = 0
        self.clears_processed = 0
        LOGGER.info("Simulation reset")

    def _award_cards(self, event: ClearEvent) -> List[RewardCard]:
        try:
            ingredient = ingredient_for_clear(event, band_size=self.board.section_size)
        except ValueError:
            # Lines outside the ingredient layout still get cleared, just unrewarded.
            LOGGER.debug("No ingredient for %s, awarding no cards", event)
            return []
        cards = [
            RewardCard(ingredient=ingredient, source=event)
            for _ in range(self.config.cards_per_clear)
        ]
        return [card for card in cards if self.hand.add(card)]

    def _apply_clear(self, event: ClearEvent) -> List[int]:
        if isinstance(event, RowClear):
            return self.board.clear_row(event.index)
        if isinstance(event, ColumnClear):
            return self.board.clear_column(event.index)
        if isinstance(event, SectionClear):
            return self.board.clear_section(event.index)
        raise TypeError(f"Not a clear event: {event!r}")


__all__ = ["EngineConfig", "ClearOutcome", "SimulationContext"]
