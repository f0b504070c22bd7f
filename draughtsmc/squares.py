"""Square layout of the 32-square draughts board and the bit masks that describe it.

Every playable square is one bit of a 32-bit integer.  Bit 0 is ``a1``, bit 3 is
``g1``, bit 4 is ``b2`` and so on up to bit 31, which is ``h8``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

FULL_MASK = 0xFFFFFFFF

RIGHT_UP_CAPTURE_AVAILABLE = 0x00777777
LEFT_UP_CAPTURE_AVAILABLE = 0x00EEEEEE
RIGHT_DOWN_CAPTURE_AVAILABLE = 0x77777700
LEFT_DOWN_CAPTURE_AVAILABLE = 0xEEEEEE00

RIGHT_UP_MOVE_AVAILABLE = 0x0F7F7F7F
LEFT_UP_MOVE_AVAILABLE = 0x0EFEFEFE
RIGHT_DOWN_MOVE_AVAILABLE = 0x7F7F7F70
LEFT_DOWN_MOVE_AVAILABLE = 0xFEFEFEF0

PLUS_5_MOVE_AVAILABLE = 0x00707070
PLUS_3_MOVE_AVAILABLE = 0x0E0E0E0E
PLUS_4_MOVE_AVAILABLE = 0x0FFFFFFF
MINUS_5_MOVE_AVAILABLE = 0x0E0E0E00
MINUS_3_MOVE_AVAILABLE = 0x70707070
MINUS_4_MOVE_AVAILABLE = 0xFFFFFFF0


@dataclass(frozen=True)
class Direction:
    """A diagonal direction for sliding pieces.

    A piece on a square inside ``move_available_mask`` can step this way.  The
    step is a shift by ``shift_a`` when the square is in ``move_type_mask`` and
    by ``shift_b`` otherwise; positive shifts go left, negative go right.
    """

    move_available_mask: int
    move_type_mask: int
    shift_a: int
    shift_b: int


QUEEN_DIRECTIONS: Tuple[Direction, ...] = (
    Direction(0x0F7F7F7F, 0x00707070, 5, 4),
    Direction(0x0EFEFEFE, 0x0E0E0E0E, 3, 4),
    Direction(0x7F7F7F70, 0x70707070, -3, -4),
    Direction(0xFEFEFEF0, 0x0E0E0E00, -5, -4),
)

SQUARE_NAMES: Dict[int, str] = {
    0x10000000: "b8", 0x20000000: "d8", 0x40000000: "f8", 0x80000000: "h8",
    0x01000000: "a7", 0x02000000: "c7", 0x04000000: "e7", 0x08000000: "g7",
    0x00100000: "b6", 0x00200000: "d6", 0x00400000: "f6", 0x00800000: "h6",
    0x00010000: "a5", 0x00020000: "c5", 0x00040000: "e5", 0x00080000: "g5",
    0x00001000: "b4", 0x00002000: "d4", 0x00004000: "f4", 0x00008000: "h4",
    0x00000100: "a3", 0x00000200: "c3", 0x00000400: "e3", 0x00000800: "g3",
    0x00000010: "b2", 0x00000020: "d2", 0x00000040: "f2", 0x00000080: "h2",
    0x00000001: "a1", 0x00000002: "c1", 0x00000004: "e1", 0x00000008: "g1",
}

_SQUARE_MASKS: Dict[str, int] = {name: mask for mask, name in SQUARE_NAMES.items()}


def shift(value: int, amount: int) -> int:
    """Shift a 32-bit mask left for a positive amount and right for a negative one."""
    if amount > 0:
        return (value << amount) & FULL_MASK
    return (value & FULL_MASK) >> -amount


def square_name(mask: int) -> str:
    """Return the algebraic name (e.g. ``"c3"``) of a single-square mask.

    Raises ``KeyError`` if ``mask`` is not exactly one playable square.
    """
    try:
        return SQUARE_NAMES[mask]
    except KeyError:
        raise KeyError(f"not a single board square: {mask:#010x}") from None


def square_mask(name: str) -> int:
    """Return the single-bit mask of a square given by name (e.g. ``"c3"``).

    Raises ``KeyError`` if the name is not a playable square.
    """
    try:
        return _SQUARE_MASKS[name.strip().lower()]
    except KeyError:
        raise KeyError(f"not a playable square: {name!r}") from None