"""A player that chooses moves by Monte Carlo tree search."""

from __future__ import annotations

import math
import random
import time
from dataclasses import dataclass, field, replace
from typing import List, Optional

from .board import MAX_NON_ADVANCING_MOVE_COUNT, Board
from .players import Player

__all__ = ["TreeNode", "MonteCarloPlayer"]

_LOSS, _DRAW, _WIN = 0, 1, 2


@dataclass(eq=False)
class TreeNode:
    """A searched position; points are 2 per win and 1 per draw for the side to move."""

    board: Board
    parent: Optional[TreeNode] = None
    children: List[TreeNode] = field(default_factory=list)
    games_played: int = 0
    total_points: int = 0


def _same_position(a: Board, b: Board) -> bool:
    return a.white_pieces == b.white_pieces and a.black_pieces == b.black_pieces


class MonteCarloPlayer(Player):
    """Searches for ``time_per_move`` milliseconds before each move."""

    def __init__(
        self, is_white: bool, time_per_move: int, rng: Optional[random.Random] = None
    ) -> None:
        super().__init__(is_white)
        self.time_per_move = time_per_move
        self._rng = rng if rng is not None else random.Random()
        self.root = TreeNode(replace(self.board))

    def _simulate(self, board: Board) -> int:
        board = replace(board)
        node_is_white = board.is_white_turn
        while True:
            if board.non_advancing_move_count >= MAX_NON_ADVANCING_MOVE_COUNT:
                return _DRAW
            moves = board.generate_moves()
            if not moves:
                return _LOSS if board.is_white_turn == node_is_white else _WIN
            board.apply_move(moves[self._rng.randrange(len(moves))])

    def _select(self) -> TreeNode:
        node = self.root
        while node.children:
            best: Optional[TreeNode] = None
            best_score = 0.0
            for child in node.children:
                if child.games_played == 0:
                    best = child
                    break
                played = child.games_played
                score = (2 * played - child.total_points) / 2 / played
                score += math.sqrt(2 * math.log(node.games_played) / played)
                if score >= best_score:
                    best_score = score
                    best = child
            node = best
        return node

    def _expand(self, node: TreeNode) -> TreeNode:
        for move in node.board.generate_moves():
            node.children.append(TreeNode(node.board.make_move(move), node))
        if not node.children:
            return node
        return self._rng.choice(node.children)

    @staticmethod
    def _backpropagate(node: Optional[TreeNode], result: int) -> None:
        while node is not None:
            node.games_played += 1
            node.total_points += result
            result = _WIN - result
            node = node.parent

    def _search(self) -> None:
        deadline = time.perf_counter() + self.time_per_move / 1000
        while time.perf_counter() < deadline:
            selected = self._select()
            if selected.games_played == 0:
                self._expand(selected)
            self._backpropagate(selected, self._simulate(selected.board))

    def make_move(self) -> int:
        self._search()
        if not self.root.children:
            return 0

        best_child = max(self.root.children, key=lambda child: child.games_played)
        best_move = 0
        for move in self.root.board.generate_moves():
            if _same_position(self.root.board.make_move(move), best_child.board):
                best_move = move
                break

        best_child.parent = None
        self.root = best_child
        return best_move

    def input_move(self, move_mask: int) -> None:
        new_board = self.root.board.make_move(move_mask)
        if not self.root.children:
            self.root = TreeNode(new_board)
            return
        for child in self.root.children:
            if _same_position(child.board, new_board):
                child.parent = None
                self.root = child
                return
        raise ValueError(f"move {move_mask:#010x} is not legal in the searched position")