"""Players: the common interface and a player driven by typed input."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Deque, Dict, Optional

from .board import Board
from .movegen import Move

__all__ = ["Player", "HumanPlayer", "MOVES_COMMAND"]

MOVES_COMMAND = "moves"


class Player(ABC):
    """A participant in a game that keeps its own copy of the board."""

    def __init__(self, is_white: bool) -> None:
        self.is_white = is_white
        self.board = Board()

    @abstractmethod
    def make_move(self) -> int:
        """Choose a move, play it on the own board and return its mask (0 if none)."""

    @abstractmethod
    def input_move(self, move_mask: int) -> None:
        """Record the opponent's move."""


class HumanPlayer(Player):
    """A player whose moves are typed in, e.g. ``c3-d4`` or ``e3:g5:e7``."""

    def __init__(
        self,
        is_white: bool,
        read: Optional[Callable[[], str]] = None,
        write: Optional[Callable[[str], object]] = None,
    ) -> None:
        super().__init__(is_white)
        self._read = read if read is not None else input
        self._write = write if write is not None else print
        self._pending: Deque[str] = deque()

    def _next_token(self) -> str:
        while not self._pending:
            self._pending.extend(self._read().split())
        return self._pending.popleft()

    def make_move(self) -> int:
        available = self.board.generate_moves_with_notation()
        if not available:
            return 0
        by_notation: Dict[str, Move] = {}
        for move in available:
            by_notation.setdefault(move.notation, move)

        while True:
            self._write(
                "Input your move (e.g. c3-d4 or e3:g5:e7 or input "
                f'"{MOVES_COMMAND}" to display available moves'
            )
            entry = self._next_token()
            if entry == MOVES_COMMAND:
                self._write("Available moves:")
                for move in available:
                    self._write(move.notation)
                self._write("")
                continue
            chosen = by_notation.get(entry)
            if chosen is not None:
                break

        self.board.apply_move(chosen.mask)
        return chosen.mask

    def input_move(self, move_mask: int) -> None:
        self.board.apply_move(move_mask)