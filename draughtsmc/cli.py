"""Command line: two Monte Carlo players play a game against each other."""

from __future__ import annotations

import argparse
import random
from typing import List, Optional

from .game import Game, GameResult
from .montecarlo import MonteCarloPlayer

__all__ = ["main"]

_MESSAGES = {
    GameResult.WHITE_WINS: "White wins!",
    GameResult.BLACK_WINS: "Black wins!",
    GameResult.DRAW: "Draw!",
}


def main(argv: Optional[List[str]] = None) -> int:
    """Play one computer-versus-computer game and print the result and the moves."""
    parser = argparse.ArgumentParser(
        prog="draughtsmc", description="Let two Monte Carlo players play draughts."
    )
    parser.add_argument(
        "--time-per-move", type=int, default=300, help="search time per move in milliseconds"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random playouts")
    args = parser.parse_args(argv)
    if args.time_per_move < 0:
        parser.error("--time-per-move must not be negative")

    rng = random.Random(args.seed)
    white = MonteCarloPlayer(True, args.time_per_move, rng=rng)
    black = MonteCarloPlayer(False, args.time_per_move, rng=rng)
    result, moves = Game(white, black).simulate_async().result()

    print(_MESSAGES[result])
    for move in moves:
        print(move)
    return 0