"""Simple ASCII demo for the placement engine.

Run with: `python -m gridclear`

Places random catalog pieces on a fresh board, draining the clear queue after
every placement, and prints the board once the run ends.  Pass ``--help`` to
see the available options.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from . import SimulationContext, build_catalog, format_grid, render_board, valid_placements


LOGGER = logging.getLogger(__name__)


def run_demo(ctx: SimulationContext, steps: int, rng: random.Random) -> int:
    """Place up to ``steps`` random pieces and return how many were placed."""

    catalog = list(build_catalog(ctx.board.width).items())
    placed = 0
    for step in range(steps):
        shape, piece = rng.choice(catalog)
        origins = valid_placements(ctx.board, piece)
        if not origins:
            LOGGER.info("No room for %s after %d placements", shape.value, placed)
            break
        x, y = rng.choice(origins)
        ctx.try_place(x, y, piece)
        placed += 1
        for outcome in ctx.drain_clears():
            ingredients = ", ".join(card.ingredient.name for card in outcome.cards) or "none"
            LOGGER.info(
                "Step %d: %s %d cleared (%d cells), cards: %s",
                step,
                outcome.event.kind.value,
                outcome.event.index,
                len(outcome.cleared_indices),
                ingredients,
            )
    return placed


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Random seed for piece choice.")
    parser.add_argument("--steps", type=int, default=30, help="Maximum number of placements.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    ctx = SimulationContext()
    placed = run_demo(ctx, steps=args.steps, rng=random.Random(args.seed))
    print(format_grid(render_board(ctx.board)))
    print(f"Placed {placed} pieces, cleared {ctx.clears_processed}, cards in hand {len(ctx.hand)}")


if __name__ == "__main__":
    main()
