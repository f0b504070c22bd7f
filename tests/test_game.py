import io
from dataclasses import replace

from draughtsmc.board import MAX_NON_ADVANCING_MOVE_COUNT, Board
from draughtsmc.game import Game, GameResult
from draughtsmc.players import Player
from draughtsmc.squares import square_mask as sq

C3_D4 = sq("c3") | sq("d4")


class Scripted(Player):
    def __init__(self, is_white, masks):
        super().__init__(is_white)
        self.masks = list(masks)
        self.received = []

    def make_move(self):
        return self.masks.pop(0) if self.masks else 0

    def input_move(self, move_mask):
        self.received.append(move_mask)


class FirstMove(Player):
    def __init__(self, is_white, start):
        super().__init__(is_white)
        self.board = replace(start)

    def make_move(self):
        moves = self.board.generate_moves()
        if not moves:
            return 0
        self.board.apply_move(moves[0])
        return moves[0]

    def input_move(self, move_mask):
        self.board.apply_move(move_mask)


def test_white_without_move_loses():
    game = Game(Scripted(True, []), Scripted(False, []))
    assert game.simulate() == (GameResult.BLACK_WINS, [])


def test_illegal_white_move_loses():
    game = Game(Scripted(True, [sq("c3") | sq("e5")]), Scripted(False, []))
    assert game.simulate() == (GameResult.BLACK_WINS, [])


def test_black_without_move_loses():
    black = Scripted(False, [])
    game = Game(Scripted(True, [C3_D4]), black)
    assert game.simulate() == (GameResult.WHITE_WINS, ["c3-d4"])
    assert black.received == [C3_D4]


def test_illegal_black_move_loses():
    game = Game(Scripted(True, [C3_D4]), Scripted(False, [C3_D4]))
    assert game.simulate() == (GameResult.WHITE_WINS, ["c3-d4"])


def test_draw_when_counter_already_at_limit():
    start = Board(non_advancing_move_count=MAX_NON_ADVANCING_MOVE_COUNT)
    game = Game(Scripted(True, [C3_D4]), Scripted(False, []), start=start)
    assert game.simulate() == (GameResult.DRAW, [])


def test_draw_after_queen_move_reaches_limit():
    start = Board(sq("a1"), sq("b8"), sq("a1"), True, MAX_NON_ADVANCING_MOVE_COUNT - 1)
    game = Game(FirstMove(True, start), FirstMove(False, start), start=start)
    result, history = game.simulate()
    assert result is GameResult.DRAW
    assert len(history) == 1
    assert history[0].startswith("a1-")


def test_simulate_async_gives_same_result():
    game = Game(Scripted(True, [C3_D4]), Scripted(False, []))
    assert game.simulate_async().result(timeout=10) == (GameResult.WHITE_WINS, ["c3-d4"])


def test_play_reports_white_without_moves():
    out = io.StringIO()
    Game(Scripted(True, []), Scripted(False, [])).play(out)
    text = out.getvalue()
    assert "Move 1\n" in text
    assert text.endswith("White player has no moves left!\n")


def test_play_reports_invalid_white_move():
    out = io.StringIO()
    Game(Scripted(True, [sq("c3") | sq("e5")]), Scripted(False, [])).play(out)
    assert out.getvalue().endswith("Invalid move by white player!\n")


def test_play_reports_moves_and_black_without_moves():
    out = io.StringIO()
    Game(Scripted(True, [C3_D4]), Scripted(False, [])).play(out)
    text = out.getvalue()
    assert "White player made move: c3-d4\n" in text
    assert text.endswith("Black player has no moves left\n")


def test_play_reports_invalid_black_move():
    out = io.StringIO()
    Game(Scripted(True, [C3_D4]), Scripted(False, [C3_D4])).play(out)
    assert out.getvalue().endswith("Invalid move made by black player!\n")


def test_play_reports_draw():
    out = io.StringIO()
    start = Board(non_advancing_move_count=MAX_NON_ADVANCING_MOVE_COUNT)
    Game(Scripted(True, []), Scripted(False, []), start=start).play(out)
    assert out.getvalue() == "Draw!\n"