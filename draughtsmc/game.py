"""Running a game between two players."""

from __future__ import annotations

import sys
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import replace
from enum import Enum
from typing import List, Optional, Sequence, TextIO, Tuple

from .board import MAX_NON_ADVANCING_MOVE_COUNT, Board, render_board
from .movegen import Move
from .players import Player

__all__ = ["GameResult", "Game"]


class GameResult(Enum):
    WHITE_WINS = "white_wins"
    BLACK_WINS = "black_wins"
    DRAW = "draw"


def _find(moves: Sequence[Move], mask: int) -> Optional[Move]:
    return next((move for move in moves if move.mask == mask), None)


class Game:
    """A game between a white and a black player, from the initial position by default."""

    def __init__(
        self, white_player: Player, black_player: Player, start: Optional[Board] = None
    ) -> None:
        self.white_player = white_player
        self.black_player = black_player
        self.start = start

    def _new_board(self) -> Board:
        return replace(self.start) if self.start is not None else Board()

    @staticmethod
    def _turn(board: Board, mover: Player, opponent: Player) -> Optional[Move]:
        available = board.generate_moves_with_notation()
        mask = mover.make_move()
        if mask == 0:
            return None
        made = _find(available, mask)
        if made is None:
            return None
        opponent.input_move(mask)
        board.apply_move(mask)
        return made

    def simulate(self) -> Tuple[GameResult, List[str]]:
        """Play the game silently and return the result and the move history."""
        board = self._new_board()
        history: List[str] = []
        while True:
            if board.non_advancing_move_count >= MAX_NON_ADVANCING_MOVE_COUNT:
                return GameResult.DRAW, history
            made = self._turn(board, self.white_player, self.black_player)
            if made is None:
                return GameResult.BLACK_WINS, history
            history.append(made.notation)

            if board.non_advancing_move_count >= MAX_NON_ADVANCING_MOVE_COUNT:
                return GameResult.DRAW, history
            made = self._turn(board, self.black_player, self.white_player)
            if made is None:
                return GameResult.WHITE_WINS, history
            history.append(made.notation)

    def simulate_async(self) -> "Future[Tuple[GameResult, List[str]]]":
        """Run :meth:`simulate` in a background thread and return its future."""
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(self.simulate)
        executor.shutdown(wait=False)
        return future

    def play(self, out: Optional[TextIO] = None) -> None:
        """Play the game, writing boards and moves to ``out`` (standard output by default)."""
        out = out if out is not None else sys.stdout

        def show(board: Board) -> None:
            out.write(
                render_board(board.white_pieces, board.black_pieces, board.promoted_pieces, True)
            )

        board = self._new_board()
        move_counter = 1
        while True:
            if board.non_advancing_move_count >= MAX_NON_ADVANCING_MOVE_COUNT:
                out.write("Draw!\n")
                return
            show(board)
            out.write(f"Move {move_counter}\n")
            move_counter += 1

            available = board.generate_moves_with_notation()
            mask = self.white_player.make_move()
            if mask == 0:
                out.write("White player has no moves left!\n")
                return
            made = _find(available, mask)
            if made is None:
                out.write("Invalid move by white player!\n")
                return
            board.apply_move(mask)
            self.black_player.input_move(mask)
            out.write(f"White player made move: {made.notation}\n")
            show(board)
            if board.non_advancing_move_count >= MAX_NON_ADVANCING_MOVE_COUNT:
                out.write("Draw!\n")
                return

            available = board.generate_moves_with_notation()
            mask = self.black_player.make_move()
            if mask == 0:
                out.write("Black player has no moves left\n")
                return
            made = _find(available, mask)
            if made is None:
                out.write("Invalid move made by black player!\n")
                return
            board.apply_move(mask)
            self.white_player.input_move(mask)
            out.write(f"Black player made move: {made.notation}\n")