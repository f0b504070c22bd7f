import dataclasses

import pytest

from draughtsmc.squares import (
    FULL_MASK,
    LEFT_DOWN_MOVE_AVAILABLE,
    LEFT_UP_MOVE_AVAILABLE,
    QUEEN_DIRECTIONS,
    RIGHT_DOWN_MOVE_AVAILABLE,
    RIGHT_UP_MOVE_AVAILABLE,
    SQUARE_NAMES,
    Direction,
    shift,
    square_mask,
    square_name,
)

ALL_MASKS = [1 << i for i in range(32)]


def _step(direction, square):
    amount = direction.shift_a if square & direction.move_type_mask else direction.shift_b
    return shift(square, amount)


def test_known_square_names():
    assert square_name(0x00000001) == "a1"
    assert square_name(0x80000000) == "h8"
    assert square_name(0x00000200) == "c3"


def test_square_mask_known_value():
    assert square_mask("a1") == 0x00000001
    assert square_mask("h8") == 0x80000000


@pytest.mark.parametrize("mask", ALL_MASKS)
def test_name_mask_round_trip(mask):
    assert square_mask(square_name(mask)) == mask


def test_square_mask_accepts_upper_case_and_whitespace():
    assert square_mask(" C3 ") == square_mask("c3")


def test_names_are_unique_and_cover_all_bits():
    names = {square_name(m) for m in ALL_MASKS}
    assert len(names) == len(ALL_MASKS)
    assert set(SQUARE_NAMES) == set(ALL_MASKS)


@pytest.mark.parametrize("index", range(32))
def test_rank_follows_bit_index(index):
    name = square_name(1 << index)
    assert int(name[1]) == index // 4 + 1


@pytest.mark.parametrize("mask", ALL_MASKS)
def test_only_dark_squares(mask):
    name = square_name(mask)
    file_index = ord(name[0]) - ord("a")
    rank_index = int(name[1]) - 1
    assert file_index % 2 == rank_index % 2


@pytest.mark.parametrize("bad", [0, 3, 0x100000000, 0xFFFFFFFF])
def test_square_name_rejects_non_squares(bad):
    with pytest.raises(KeyError):
        square_name(bad)


@pytest.mark.parametrize("bad", ["a2", "b1", "i9", "", "h9"])
def test_square_mask_rejects_light_or_unknown_squares(bad):
    with pytest.raises(KeyError):
        square_mask(bad)


def test_shift_left_and_right_invert():
    for mask in ALL_MASKS[:28]:
        assert shift(shift(mask, 4), -4) == mask


def test_shift_left_truncates_to_32_bits():
    assert shift(0x80000000, 1) == 0
    assert shift(FULL_MASK, 4) & ~FULL_MASK == 0


def test_shift_by_zero_keeps_value():
    for mask in ALL_MASKS:
        assert shift(mask, 0) == mask


def test_queen_direction_constants_match_move_masks():
    availability = [d.move_available_mask for d in QUEEN_DIRECTIONS]
    assert availability == [
        RIGHT_UP_MOVE_AVAILABLE,
        LEFT_UP_MOVE_AVAILABLE,
        RIGHT_DOWN_MOVE_AVAILABLE,
        LEFT_DOWN_MOVE_AVAILABLE,
    ]
    assert (QUEEN_DIRECTIONS[0].shift_a, QUEEN_DIRECTIONS[0].shift_b) == (5, 4)
    right_up = QUEEN_DIRECTIONS[0]
    assert square_name(_step(right_up, square_mask("a1"))) == "b2"
    assert square_name(_step(right_up, square_mask("b2"))) == "c3"


@pytest.mark.parametrize("direction", QUEEN_DIRECTIONS)
def test_every_step_lands_on_a_square(direction):
    for mask in ALL_MASKS:
        if mask & direction.move_available_mask:
            assert _step(direction, mask) in SQUARE_NAMES


@pytest.mark.parametrize("forward,backward", [(0, 3), (1, 2)])
def test_opposite_directions_undo_each_other(forward, backward):
    fwd = QUEEN_DIRECTIONS[forward]
    back = QUEEN_DIRECTIONS[backward]
    for mask in ALL_MASKS:
        if mask & fwd.move_available_mask:
            target = _step(fwd, mask)
            assert target & back.move_available_mask
            assert _step(back, target) == mask


def test_up_steps_raise_the_rank_by_one():
    for direction in QUEEN_DIRECTIONS[:2]:
        for mask in ALL_MASKS:
            if mask & direction.move_available_mask:
                before = square_name(mask)
                after = square_name(_step(direction, mask))
                assert int(after[1]) == int(before[1]) + 1
                assert abs(ord(after[0]) - ord(before[0])) == 1


def test_direction_is_immutable():
    direction = Direction(1, 2, 3, 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        direction.shift_a = 7
    assert (
        direction.move_available_mask,
        direction.move_type_mask,
        direction.shift_a,
        direction.shift_b,
    ) == (1, 2, 3, 4)