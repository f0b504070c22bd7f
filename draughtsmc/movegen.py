"""Legal move generation for the 32-square draughts board.

A move is a bit mask holding the starting square, every captured piece and
the final landing square.  Captures are compulsory: whenever any capture
exists only complete capture sequences are returned.  A capturing piece may
jump in all four diagonal directions; promoted pieces (queens) fly along
diagonals.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, List, Tuple

from .squares import (
    FULL_MASK,
    LEFT_DOWN_CAPTURE_AVAILABLE,
    LEFT_UP_CAPTURE_AVAILABLE,
    MINUS_3_MOVE_AVAILABLE,
    MINUS_4_MOVE_AVAILABLE,
    MINUS_5_MOVE_AVAILABLE,
    PLUS_3_MOVE_AVAILABLE,
    PLUS_4_MOVE_AVAILABLE,
    PLUS_5_MOVE_AVAILABLE,
    QUEEN_DIRECTIONS,
    RIGHT_DOWN_CAPTURE_AVAILABLE,
    RIGHT_UP_CAPTURE_AVAILABLE,
    Direction,
    shift,
    square_name,
)

__all__ = ["Move", "MAX_MOVES", "generate_moves", "generate_moves_with_notation"]

MAX_MOVES = 48
"""Most moves kept in a move list, and most partial captures queued at once."""


@dataclass(frozen=True)
class Move:
    """A move mask together with its notation, e.g. ``c3-d4`` or ``e3:g5:e7``."""

    mask: int
    notation: str


_PAWN_CAPTURE_DIRECTIONS: Tuple[Direction, ...] = (
    Direction(RIGHT_UP_CAPTURE_AVAILABLE, PLUS_5_MOVE_AVAILABLE, 5, 4),
    Direction(LEFT_UP_CAPTURE_AVAILABLE, PLUS_3_MOVE_AVAILABLE, 3, 4),
    Direction(RIGHT_DOWN_CAPTURE_AVAILABLE, MINUS_3_MOVE_AVAILABLE, -3, -4),
    Direction(LEFT_DOWN_CAPTURE_AVAILABLE, MINUS_5_MOVE_AVAILABLE, -5, -4),
)


def _white_pawn_moves(position: int) -> int:
    mask = 0
    if position & PLUS_3_MOVE_AVAILABLE:
        mask |= position << 3
    if position & PLUS_5_MOVE_AVAILABLE:
        mask |= position << 5
    if position & PLUS_4_MOVE_AVAILABLE:
        mask |= position << 4
    return mask & FULL_MASK


def _black_pawn_moves(position: int) -> int:
    mask = 0
    if position & MINUS_3_MOVE_AVAILABLE:
        mask |= position >> 3
    if position & MINUS_5_MOVE_AVAILABLE:
        mask |= position >> 5
    if position & MINUS_4_MOVE_AVAILABLE:
        mask |= position >> 4
    return mask


_WHITE_PAWN_MOVES = tuple(_white_pawn_moves(1 << i) for i in range(32))
_BLACK_PAWN_MOVES = tuple(_black_pawn_moves(1 << i) for i in range(32))


def _bits(mask: int) -> Iterator[int]:
    """Yield the set bits of ``mask`` one at a time, lowest first."""
    while mask:
        low = mask & -mask
        yield low
        mask ^= low


def _step(position: int, direction: Direction) -> int:
    amount = direction.shift_a if position & direction.move_type_mask else direction.shift_b
    return shift(position, amount)


def _append(moves: List[Move], move: Move) -> None:
    if len(moves) < MAX_MOVES:
        moves.append(move)


def _enqueue(queue: Deque[Move], move: Move) -> None:
    if len(queue) < MAX_MOVES:
        queue.append(move)


def generate_moves_with_notation(
    white_pieces: int, black_pieces: int, promoted_pieces: int, is_white_turn: bool
) -> List[Move]:
    """Return every legal move of the side to play, with its notation."""
    white_pieces &= FULL_MASK
    black_pieces &= FULL_MASK
    promoted_pieces &= FULL_MASK
    ours, enemy = (white_pieces, black_pieces) if is_white_turn else (black_pieces, white_pieces)
    empty = ~(ours | enemy) & FULL_MASK

    quiet: List[Move] = []
    captures: Deque[Move] = deque()

    for square in _bits(ours & promoted_pieces):
        origin = square_name(square)
        for direction in QUEEN_DIRECTIONS:
            index = square
            passed = 0
            while index & direction.move_available_mask:
                index = _step(index, direction)
                if index & ours:
                    break
                if index & enemy:
                    if passed:
                        break
                    passed = index
                elif passed:
                    _enqueue(captures, Move(square | passed | index, f"{origin}:{square_name(index)}"))
                else:
                    _append(quiet, Move(square | index, f"{origin}-{square_name(index)}"))

    pawn_table = _WHITE_PAWN_MOVES if is_white_turn else _BLACK_PAWN_MOVES
    for square in _bits(ours & ~promoted_pieces):
        origin = square_name(square)
        for target in _bits(empty & pawn_table[square.bit_length() - 1]):
            _append(quiet, Move(square | target, f"{origin}-{square_name(target)}"))
        for direction in _PAWN_CAPTURE_DIRECTIONS:
            if not square & direction.move_available_mask:
                continue
            captured = _step(square, direction)
            landing = _step(captured, direction)
            if captured & enemy and landing & empty:
                _enqueue(captures, Move(square | captured | landing, f"{origin}:{square_name(landing)}"))

    if not captures:
        return quiet
    return _complete_captures(ours, enemy, promoted_pieces, captures)


def _complete_captures(ours: int, enemy: int, promoted: int, queue: Deque[Move]) -> List[Move]:
    """Extend partial captures breadth-first until no further jump is possible."""
    finished: List[Move] = []
    occupied = ours | enemy
    while queue:
        current = queue.popleft()
        taken = current.mask
        capturable = enemy & ~taken
        position = taken & ~occupied & FULL_MASK
        if not position:
            position = taken & ours
        blockers = (enemy & taken) | (ours & ~taken)
        free = ((~occupied & FULL_MASK) | (ours & taken)) & ~position
        kept = (taken & ours) | (taken & enemy)
        extended = False

        if promoted & ours & taken:
            for direction in QUEEN_DIRECTIONS:
                index = position if position & direction.move_available_mask else 0
                captured = 0
                while index & direction.move_available_mask:
                    index = _step(index, direction)
                    if index & blockers:
                        break
                    if index & capturable:
                        if captured:
                            break
                        captured = index
                    elif captured:
                        _enqueue(queue, Move(kept | captured | index,
                                             f"{current.notation}:{square_name(index)}"))
                        extended = True
        else:
            for direction in _PAWN_CAPTURE_DIRECTIONS:
                if not position & direction.move_available_mask:
                    continue
                captured = _step(position, direction)
                landing = _step(captured, direction)
                if captured & capturable and landing & free:
                    _enqueue(queue, Move(kept | captured | landing,
                                         f"{current.notation}:{square_name(landing)}"))
                    extended = True

        if not extended:
            _append(finished, current)
    return finished


def generate_moves(
    white_pieces: int, black_pieces: int, promoted_pieces: int, is_white_turn: bool
) -> List[int]:
    """Return the masks of every legal move of the side to play."""
    return [
        move.mask
        for move in generate_moves_with_notation(white_pieces, black_pieces, promoted_pieces, is_white_turn)
    ]