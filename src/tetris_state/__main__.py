"""Headless smoke game for the state machine.

Run with: `python -m tetris_state`

Pieces are spawned, hard-dropped straight down and placed until either the
requested number of pieces has fallen or a new piece spawns on top of
existing blocks.  Full rows are collapsed after each placement.  The final
board is printed as ASCII so it is easy to eyeball that placement and row
clearing did what they should.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .game_state import DEFAULT_NUM_COLS, DEFAULT_NUM_ROWS, TetrisState
from .move import Move
from .shape_queue import ShapeQueue


LOGGER = logging.getLogger(__name__)


def format_grid(grid: List[List[int]]) -> str:
    return "\n".join("".join("#" if cell else "." for cell in row) for row in grid)


def play(state: TetrisState, pieces: int) -> TetrisState:
    """Drop up to ``pieces`` pieces, alternating rotations and columns."""

    state.has_started = True
    for index in range(pieces):
        if state.piece_overlaps_blocks():
            state.is_game_over = True
            LOGGER.info("Spawn blocked after %d pieces", state.num_pieces_dropped)
            break
        if index % 2:
            state.rotate_piece(Move.CLOCKWISE)
        shift = Move.LEFT if index % 3 == 0 else Move.RIGHT
        for _ in range(index % (state.cols // 2 or 1)):
            if not state.move_piece(shift):
                break
        state.hard_drop()
        state.place_piece()

        full = state.get_full_rows()
        if full:
            state.is_clearing_lines = True
            cleared = state.clear_rows(full)
            state.lines_cleared += cleared
            state.is_clearing_lines = False
            LOGGER.info("Cleared %d row(s)", cleared)

        state.reset_piece()
    return state


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--rows", type=int, default=DEFAULT_NUM_ROWS, help="Board height.")
    parser.add_argument("--cols", type=int, default=DEFAULT_NUM_COLS, help="Board width.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the shape queue.")
    parser.add_argument("--pieces", type=int, default=30, help="Maximum pieces to drop.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s"
    )

    state = TetrisState(args.rows, args.cols, next_shapes=ShapeQueue(seed=args.seed))
    play(state, args.pieces)
    LOGGER.info(
        "Dropped %d pieces, cleared %d lines", state.num_pieces_dropped, state.lines_cleared
    )
    print(format_grid(state.grid(include_piece=not state.is_game_over)))


if __name__ == "__main__":
    main()
