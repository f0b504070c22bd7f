# draughtsmc

A draughts (checkers) engine on a 32-square bitboard, with a Monte Carlo tree
search player, a console player for humans, and a game driver that pits two
players against each other. It has no dependencies outside the standard library.

## Rules

- White starts on the first three ranks, black on the last three; white moves first.
- Captures are compulsory and continue as far as they can go; every complete
  capture sequence is a separate move.
- Men move forward diagonally and capture diagonally in all four directions;
  they are promoted on reaching the far rank.
- Kings move and capture along whole diagonals.
- The game is drawn after 10 consecutive half moves made by a king without a capture.
- A side with no legal move loses.

Moves are written in square notation: `c3-d4` for a quiet move, `e3:g5:e7`
for a capture sequence. Internally a move is a 32-bit mask holding the starting
square, every captured piece and the landing square.

## Installing

```
pip install .
```

## Command line

```
draughtsmc
```

This runs a game between two Monte Carlo players, then prints the result
(`White wins!`, `Black wins!` or `Draw!`) followed by every move played, one
per line. Options:

- `--time-per-move MS` — search time per move in milliseconds (default 300).
- `--seed N` — seed for the random playouts, for repeatable searches.

## Library use

```python
from draughtsmc.board import Board
from draughtsmc.montecarlo import MonteCarloPlayer
from draughtsmc.game import Game, GameResult

board = Board()
for move in board.generate_moves_with_notation():
    print(move.notation, hex(move.mask))

after = board.make_move(board.generate_moves()[0])
print(after.render(True))

game = Game(MonteCarloPlayer(True, 300), MonteCarloPlayer(False, 300))
result, history = game.simulate()
print(result, history)
```

The modules:

- `draughtsmc.squares` — square masks and names (`square_name`, `square_mask`),
  the `Direction` type and the `shift` helper.
- `draughtsmc.movegen` — `generate_moves` and `generate_moves_with_notation`,
  returning masks or `Move` objects (`mask`, `notation`).
- `draughtsmc.board` — `Board` (`generate_moves`, `generate_moves_with_notation`,
  `make_move`, `apply_move`, `is_move_advancing`, `has_no_moves`, `render`) and
  `render_board`.
- `draughtsmc.players` — the abstract `Player` (`make_move`, `input_move`) and
  `HumanPlayer`, which reads moves through a `read` callable (default `input`)
  and writes prompts through a `write` callable (default `print`). Typing
  `moves` lists the legal moves.
- `draughtsmc.montecarlo` — `MonteCarloPlayer(is_white, time_per_move, rng=None)`
  and its search tree `TreeNode`. `input_move` raises `ValueError` for a move
  that is not legal in the searched position.
- `draughtsmc.game` — `Game(white_player, black_player, start=None)` with
  `simulate()` returning a `GameResult` and the list of move notations,
  `simulate_async()` returning a `concurrent.futures.Future` of the same, and
  `play(out=None)`, which writes the board and each move to `out` (standard
  output by default).

## What it does not do

The `draughtsmc` command only runs computer-versus-computer games. To play
against the engine, pair a `HumanPlayer` with a `MonteCarloPlayer` in a `Game`
and call `Game.play` from your own code. There is no graphical board and no
saving or loading of games.

## Tests

```
pip install .[test]
pytest
```