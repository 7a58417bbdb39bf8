"""
Minimax search with alpha-beta pruning for the TicTacToe chat bot.

Scores are from X's point of view: X wins = +1, O wins = -1, draw = 0.
X is always the maximizing side, O the minimizing side.
"""

import logging
import random
from typing import Callable, List, Optional

from .board import Board, Cell
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


SCORES = {
    Cell.X: 1,
    Cell.O: -1,
}
DRAW_SCORE = 0

# Takes the legal moves (ascending) and returns them in traversal order
MoveOrder = Callable[[List[int]], List[int]]


class AscendingOrder:
    """Visit moves in ascending index order."""

    def __call__(self, moves: List[int]) -> List[int]:
        return sorted(moves)


class RandomOrder:
    """
    Visit moves in a shuffled order.

    Only changes which of several equally scored moves is found first,
    never the value the search returns. Pass a seed for reproducible runs.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def __repr__(self) -> str:
        return f"RandomOrder(seed={self.seed!r})"

    def __call__(self, moves: List[int]) -> List[int]:
        shuffled = list(moves)
        self._rng.shuffle(shuffled)
        return shuffled


class SearchEngine:
    """
    Exact game-value search over a Board.

    On a 3x3 board the full tree is at most 9 plies deep, so with no
    depth limit every value returned is the game-theoretic value.

    With a depth limit, a non-terminal node at that depth has no value
    (None). A node depending on such a node is also None unless alpha-beta
    cut it off or it already reached its best possible score; callers fall
    back to the heuristic for None.
    """

    def __init__(
        self,
        win_checker: Optional[WinChecker] = None,
        maximizer_order: Optional[MoveOrder] = None,
        minimizer_order: Optional[MoveOrder] = None,
        depth_limit: Optional[int] = None
    ):
        """
        Initialize the search engine.

        Args:
            win_checker: Used for terminal detection.
            maximizer_order: Move order for X plies (default: shuffled).
            minimizer_order: Move order for O plies (default: ascending).
            depth_limit: Plies to search before giving up, None for full depth.
        """
        if depth_limit is not None and depth_limit < 0:
            raise ValueError(f"depth_limit must be >= 0, got {depth_limit}")

        self.win_checker = win_checker or WinChecker()
        self.validator = MoveValidator()
        self.maximizer_order = maximizer_order or RandomOrder()
        self.minimizer_order = minimizer_order or AscendingOrder()
        self.depth_limit = depth_limit

        # Statistics of the last search (for debugging and tests)
        self.nodes_visited = 0
        self.max_depth_reached = 0

    def search(self, board: Board, is_maximizing: bool) -> Optional[int]:
        """
        Get the value of a position.

        Args:
            board: Position to evaluate. Not modified.
            is_maximizing: True if X is to move.

        Returns:
            -1, 0 or +1, or None if the depth limit left it undecided.
        """
        self.nodes_visited = 0
        self.max_depth_reached = 0

        value = self._minimax(board, 0, is_maximizing, float('-inf'), float('inf'))

        logger.debug(
            "Searched %d nodes (max depth %d), value=%s",
            self.nodes_visited, self.max_depth_reached, value
        )
        return value

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float,
        beta: float
    ) -> Optional[int]:
        self.nodes_visited += 1
        self.max_depth_reached = max(self.max_depth_reached, depth)

        # Check terminal states
        for symbol, score in SCORES.items():
            if self.win_checker.wins(board, symbol):
                return score

        if board.is_full():
            return DRAW_SCORE

        if self.depth_limit is not None and depth >= self.depth_limit:
            return None

        valid_moves = self.validator.get_valid_moves(board)
        unresolved = False
        pruned = False

        if is_maximizing:
            max_score = float('-inf')
            for index in self.maximizer_order(valid_moves):
                child = board.clone()
                child.set(index, Cell.X)
                score = self._minimax(child, depth + 1, False, alpha, beta)
                if score is None:
                    unresolved = True
                    continue
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    pruned = True
                    break  # Prune
            if unresolved and not pruned and max_score != SCORES[Cell.X]:
                return None
            return int(max_score)
        else:
            min_score = float('inf')
            for index in self.minimizer_order(valid_moves):
                child = board.clone()
                child.set(index, Cell.O)
                score = self._minimax(child, depth + 1, True, alpha, beta)
                if score is None:
                    unresolved = True
                    continue
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    pruned = True
                    break  # Prune
            if unresolved and not pruned and min_score != SCORES[Cell.O]:
                return None
            return int(min_score)
