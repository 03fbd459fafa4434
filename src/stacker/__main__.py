"""Command line entry point.

Run with: ``python -m stacker`` to open the pygame window, or
``python -m stacker --ascii`` to hard-drop a few pieces headlessly and print
the resulting board, useful as a smoke test without a display.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from .game_state import GameSession
from .storage import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore
from .utils import format_grid, render_grid


LOGGER = logging.getLogger(__name__)


def run_ascii(pieces: int, store: HighScoreStore, seed: Optional[int] = None) -> GameSession:
    """Hard-drop ``pieces`` pieces, shifting each a little, and print the board."""

    session = GameSession(store=store, rng=random.Random(seed))
    session.start()
    # Moves draw from the same generator as the pieces, after the first two spawns.
    rng = session.rng
    for _ in range(pieces):
        if not session.running:
            break
        for _ in range(rng.randrange(4)):
            session.rotate()
        shift = rng.randint(-4, 4)
        for _ in range(abs(shift)):
            if shift < 0:
                session.move_left()
            else:
                session.move_right()
        session.hard_drop()
    print(format_grid(render_grid(session.board, session.current)))
    print(
        f"score={session.score} level={session.level} lines={session.lines_cleared} "
        f"status={session.status.value} high={session.high_score}"
    )
    return session


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="stacker", description=__doc__)
    parser.add_argument("--ascii", action="store_true", help="Run a headless demo and print the board.")
    parser.add_argument("--pieces", type=int, default=20, help="Pieces to drop in the ASCII demo.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece generator.")
    parser.add_argument(
        "--high-score-file",
        default=None,
        help="JSON file keeping the high score between runs (in-memory if omitted).",
    )
    parser.add_argument("--cell-size", type=int, default=30, help="Cell size in pixels for the window.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )
    store: HighScoreStore
    if args.high_score_file:
        store = JsonHighScoreStore(args.high_score_file)
    else:
        store = MemoryHighScoreStore()

    if args.ascii:
        run_ascii(args.pieces, store, seed=args.seed)
        return

    from .run_pygame import main as run_window

    run_window(store=store, seed=args.seed, cell_size=args.cell_size)


if __name__ == "__main__":
    main()
