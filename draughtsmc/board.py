"""Board state, move application and text rendering."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Tuple

from .movegen import Move, generate_moves, generate_moves_with_notation
from .squares import FULL_MASK

__all__ = [
    "Board",
    "render_board",
    "WHITE_PIECES_INIT",
    "BLACK_PIECES_INIT",
    "PROMOTED_PIECES_INIT",
    "WHITE_PROMOTION_MASK",
    "BLACK_PROMOTION_MASK",
    "MAX_NON_ADVANCING_MOVE_COUNT",
]

WHITE_PIECES_INIT = 0x00000FFF
BLACK_PIECES_INIT = 0xFFF00000
PROMOTED_PIECES_INIT = 0
WHITE_PROMOTION_MASK = 0xF0000000
BLACK_PROMOTION_MASK = 0x0000000F

MAX_NON_ADVANCING_MOVE_COUNT = 10
"""Half moves without a capture or pawn move after which the game is drawn."""

_COLUMNS = " | A| B| C| D| E| F| G| H| "
_SEPARATOR = "-+--+--+--+--+--+--+--+--+-"


@dataclass
class Board:
    """A position: piece masks, side to move and the non-advancing move counter."""

    white_pieces: int = WHITE_PIECES_INIT
    black_pieces: int = BLACK_PIECES_INIT
    promoted_pieces: int = PROMOTED_PIECES_INIT
    is_white_turn: bool = True
    non_advancing_move_count: int = 0

    def _sides(self) -> Tuple[int, int]:
        if self.is_white_turn:
            return self.white_pieces, self.black_pieces
        return self.black_pieces, self.white_pieces

    def generate_moves(self) -> List[int]:
        """Return the masks of the legal moves of the side to play."""
        return generate_moves(
            self.white_pieces, self.black_pieces, self.promoted_pieces, self.is_white_turn
        )

    def generate_moves_with_notation(self) -> List[Move]:
        """Return the legal moves of the side to play with their notation."""
        return generate_moves_with_notation(
            self.white_pieces, self.black_pieces, self.promoted_pieces, self.is_white_turn
        )

    def make_move(self, move_mask: int) -> Board:
        """Return a copy of the board with the move applied."""
        new_board = replace(self)
        new_board.apply_move(move_mask)
        return new_board

    def apply_move(self, move_mask: int) -> None:
        """Apply a move mask in place and pass the turn."""
        ours, theirs = self._sides()
        start = ours & move_mask
        captured = theirs & move_mask
        target = move_mask & ~(ours | theirs) & FULL_MASK
        if not target:
            target = move_mask & ours
        queen_used = bool(start & self.promoted_pieces)

        theirs &= ~captured
        promoted = self.promoted_pieces & ~captured
        ours ^= start
        ours |= target

        promotion_mask = WHITE_PROMOTION_MASK if self.is_white_turn else BLACK_PROMOTION_MASK
        promoted |= target & promotion_mask
        if promoted & start:
            promoted = (promoted ^ start) | target

        if self.is_white_turn:
            self.white_pieces, self.black_pieces = ours, theirs
        else:
            self.black_pieces, self.white_pieces = ours, theirs
        self.promoted_pieces = promoted

        self.is_white_turn = not self.is_white_turn
        if captured or not queen_used:
            self.non_advancing_move_count = 0
        else:
            self.non_advancing_move_count += 1

    def is_move_advancing(self, move_mask: int) -> bool:
        """Tell whether a move captures or is made by a promoted piece."""
        ours, theirs = self._sides()
        return bool(move_mask & theirs) or bool(ours & move_mask & self.promoted_pieces)

    def has_no_moves(self) -> bool:
        """Tell whether the side to play has no legal move left."""
        return not self.generate_moves()

    def render(self, white_side_down: bool = True) -> str:
        """Return a text drawing of the board."""
        return render_board(
            self.white_pieces, self.black_pieces, self.promoted_pieces, white_side_down
        )


def render_board(
    player_pieces: int,
    opponent_pieces: int,
    promoted_pieces: int,
    white_side_down: bool = True,
) -> str:
    """Return a text drawing of the given piece masks."""
    columns = _COLUMNS if white_side_down else _COLUMNS[::-1]
    own, other = ("W", "B") if white_side_down else ("B", "W")

    parts = [f"\n\t{columns}\n", f"\t{_SEPARATOR}\n"]
    for row in range(8):
        label = str(8 - row) if white_side_down else str(1 + row)
        even = row % 2 == 0
        parts.append(f"\t{label}|")
        for column in range(4):
            if even:
                parts.append("  |")
            bit = 1 << ((7 - row) * 4 + column)
            if player_pieces & bit:
                parts.append(own + (own if promoted_pieces & bit else " "))
            elif opponent_pieces & bit:
                parts.append(other + (other if promoted_pieces & bit else " "))
            else:
                parts.append("  ")
            parts.append("|" if even else "|  |")
        parts.append(f"{label}\n")
        parts.append(f"\t{_SEPARATOR}\n")
    parts.append(f"\t{columns}\n\n")
    return "".join(parts)