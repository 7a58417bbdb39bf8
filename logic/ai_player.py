"""
AI player for the TicTacToe chat bot.
Takes immediate wins, blocks immediate losses, and otherwise plays the
move the minimax search rates best.
"""

import logging
from typing import Optional, Tuple

from .board import Board, Cell
from .heuristic import HeuristicEvaluator
from .move_validator import MoveValidator
from .search import SearchEngine
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


WIN_SCORE = 100
MISSED_BLOCK_SCORE = -100

# Candidates are ranked by tier first, then by score
TIER_MISSED_BLOCK = 0
TIER_SEARCH = 1
TIER_WIN = 2


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(
        self,
        symbol: Cell = Cell.O,
        engine: Optional[SearchEngine] = None,
        evaluator: Optional[HeuristicEvaluator] = None
    ):
        """
        Initialize the AI player.

        Args:
            symbol: Which mark the AI plays (default: O).
            engine: Search engine to use (default: full-depth search).
            evaluator: Fallback scorer when the search has no value.
        """
        self.symbol = symbol
        self.human_symbol = symbol.opposite()
        self.win_checker = WinChecker()
        self.validator = MoveValidator()
        self.engine = engine or SearchEngine(self.win_checker)
        self.evaluator = evaluator or HeuristicEvaluator(self.human_symbol, symbol)

    def score_move(self, board: Board, index: int) -> Tuple[int, int]:
        """
        Score one candidate move from the AI's point of view.

        Args:
            board: Current board (not modified).
            index: Empty cell to try (0-8).

        Returns:
            (tier, score): tier 2 for an immediate win, 0 when the move
            leaves the human an immediate win, 1 otherwise.
        """
        trial = board.clone()
        trial.set(index, self.symbol)

        if self.win_checker.wins(trial, self.symbol):
            return TIER_WIN, WIN_SCORE

        if self._human_can_win(trial):
            return TIER_MISSED_BLOCK, MISSED_BLOCK_SCORE

        # Human moves next; X maximizes in the search
        value = self.engine.search(trial, is_maximizing=self.human_symbol == Cell.X)
        if value is None:
            return TIER_SEARCH, self.evaluator.evaluate(trial)

        return TIER_SEARCH, value if self.symbol == Cell.X else -value

    def _human_can_win(self, board: Board) -> bool:
        for index in self.validator.get_valid_moves(board):
            reply = board.clone()
            reply.set(index, self.human_symbol)
            if self.win_checker.wins(reply, self.human_symbol):
                return True
        return False

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Get the best move for the current position.

        Args:
            board: Current board.

        Returns:
            Index (0-8) of the best move, or None if no moves available.
        """
        valid_moves = self.validator.get_valid_moves(board)

        if not valid_moves:
            return None

        best_rank = None
        best_move = None

        for index in valid_moves:
            rank = self.score_move(board, index)
            logger.debug("Candidate %d for %s: tier=%d score=%d", index, self.symbol.value, *rank)

            # Strictly better only; ties keep the first move
            if best_rank is None or rank > best_rank:
                best_rank = rank
                best_move = index

        logger.debug("AI (%s) picks %s with %s", self.symbol.value, best_move, best_rank)
        return best_move

    def make_move(self, board: Board) -> Optional[int]:
        """
        Play the best move on the board.

        Returns:
            The index played, or None if the board had no empty cell.
        """
        move = self.get_best_move(board)
        if move is not None:
            board.set(move, self.symbol)
        return move
