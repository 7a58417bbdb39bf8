"""
Bot configuration for the TicTacToe chat bot.
All the settings for the AI opponent, board rendering, and bot texts.
"""

import logging
from typing import Optional

from logic.board import Cell


class BotConfig:
    """
    Configuration class for bot settings.
    Change these values based on your setup, or override any of them
    per instance: BotConfig(SEARCH_DEPTH_LIMIT=3).
    """

    # ==================== AI SETTINGS ====================
    # Plies searched below each candidate move. None = full depth
    # (perfect play); smaller values fall back to the heuristic.
    SEARCH_DEPTH_LIMIT: Optional[int] = None

    # Seed for the shuffled move order (None = different every run)
    RANDOM_SEED: Optional[int] = None

    # ==================== SESSIONS ====================
    # How long a /reset from another thread waits for the running match to stop
    RESET_WAIT_SECONDS = 5.0

    # ==================== BOARD DISPLAY ====================
    GLYPHS = {
        Cell.X: "❌",
        Cell.O: "⭕",
        Cell.EMPTY: "⬜",
    }

    # ==================== SYMBOL CHOICE ====================
    SYMBOL_OPTIONS = ("X", "O")
    SYMBOL_PROMPT = "Choose your game"

    # ==================== TEXTS ====================
    INSTRUCTIONS = (
        "Welcome to Tic Tac Toe Bot! Here are the instructions:\n"
        "1. Type /play to start a new game.\n"
        "2. Choose \"X\" or \"O\" when prompted.\n"
        "3. Use numbers 1-9 to make a move on the board.\n"
        "4. Type /reset to reset the game."
    )
    SYMBOL_CONFIRMATION = "You chose {human}. I'll be {ai}"
    GAME_START = "Let's start the game!"
    MOVE_PROMPT = "Your turn! Choose a number (1-9):"
    AI_TURN = "My turn!"
    INVALID_MOVE = "Invalid move. Please choose an empty cell (1-9) or type /reset:"
    WIN_MESSAGE = "Congratulations! You win!"
    LOSS_MESSAGE = "I win! Better luck next time."
    DRAW_MESSAGE = "It's a draw! The board is full."
    GAME_OVER = "Game over! Type /play to start a new game."
    RESET_MESSAGE = "Game has been reset. Type /play to start a new game."
    GAME_IN_PROGRESS = "A game is already in progress. Make your move or type /reset."

    # ==================== LOGGING ====================
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not hasattr(type(self), name):
                raise AttributeError(f"Unknown setting: {name}")
            setattr(self, name, value)
