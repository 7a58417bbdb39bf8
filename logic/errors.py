"""
Errors raised by the game logic.
All of them are recoverable: the controller reprompts or keeps waiting.
"""

from typing import Optional


class GameError(Exception):
    """Base class for TicTacToe game errors."""


class InvalidMove(GameError):
    """A move outside 1-9 or onto an occupied cell."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class MalformedInput(GameError):
    """A move token that is neither a command nor a number."""

    def __init__(self, token: str):
        super().__init__(f"Cannot parse move token {token!r}")
        self.token = token
