import logging
import random

from gridclear.__main__ import main, parse_args, run_demo
from gridclear.simulation import SimulationContext


def test_run_demo_places_pieces_and_logs_clears(caplog):
    ctx = SimulationContext()
    with caplog.at_level(logging.INFO, logger="gridclear.__main__"):
        placed = run_demo(ctx, steps=40, rng=random.Random(3))

    assert 1 <= placed <= 40
    assert ctx.pieces_placed == placed
    assert len(ctx.clear_queue) == 0
    if ctx.clears_processed:
        assert "cleared" in caplog.text


def test_run_demo_is_deterministic_for_a_seed():
    first = SimulationContext()
    second = SimulationContext()
    run_demo(first, steps=15, rng=random.Random(11))
    run_demo(second, steps=15, rng=random.Random(11))
    assert first.board.fields == second.board.fields


def test_parse_args_defaults():
    args = parse_args([])
    assert args.seed is None
    assert args.steps == 30
    assert args.log_level == "INFO"


def test_main_prints_board(capsys):
    main(["--seed", "5", "--steps", "3", "--log-level", "WARNING"])
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == 10
    assert all(len(line) == 9 for line in lines[:9])
    assert lines[-1].startswith("Placed 3 pieces")
