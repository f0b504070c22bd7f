import re

import pytest

from draughtsmc.board import Board
from draughtsmc.cli import main


def test_main_plays_a_full_game(capsys):
    assert main(["--time-per-move", "10", "--seed", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] in {"White wins!", "Black wins!", "Draw!"}
    assert len(lines) > 1
    assert all(re.fullmatch(r"[a-h][1-8]([-:][a-h][1-8])+", line) for line in lines[1:])
    assert lines[1] in {m.notation for m in Board().generate_moves_with_notation()}


def test_negative_time_is_rejected():
    with pytest.raises(SystemExit):
        main(["--time-per-move", "-1"])


def test_non_numeric_time_is_rejected():
    with pytest.raises(SystemExit):
        main(["--time-per-move", "fast"])