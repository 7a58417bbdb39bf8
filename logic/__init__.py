"""
Logic module for the TicTacToe chat bot.
Handles the board, rules, and AI opponent.
"""

from .board import Board, Cell, LINES
from .errors import GameError, InvalidMove, MalformedInput
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .heuristic import HeuristicEvaluator
from .search import SearchEngine, AscendingOrder, RandomOrder
from .ai_player import AIPlayer
