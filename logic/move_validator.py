"""
Move validator for the TicTacToe chat bot.
Lists legal moves and validates/parses the human's input.
"""

from typing import Optional, List, Union
from dataclasses import dataclass
from .board import Board, Cell, CELL_COUNT
from .errors import MalformedInput


# Commands a player can send instead of a move
COMMANDS = ("start", "play", "reset")


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Positions are numbered 1-9 for the player (0-8 internally)
    2. Can only place on empty cells
    """

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all empty cell indices, in ascending order.

        Args:
            board: Current board.

        Returns:
            List of 0-8 indices.
        """
        return [i for i, cell in enumerate(board.cells) if cell == Cell.EMPTY]

    def validate_move(self, board: Board, position: int) -> ValidationResult:
        """
        Validate a human move.

        Args:
            board: Current board.
            position: Player-facing position (1-9).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not 1 <= position <= CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position}. Must be 1-{CELL_COUNT}."
            )

        occupant = board.get(position - 1)
        if occupant != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {position} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def parse_token(self, token: str) -> Union[int, str]:
        """
        Parse a token received while waiting for a move.

        Args:
            token: Raw text or callback data, e.g. "5" or "/reset".

        Returns:
            The position as an int (range not checked here), or the
            command name without its slash.

        Raises:
            MalformedInput: if the token is neither.
        """
        text = (token or "").strip()
        command = text.lstrip("/").lower()
        if command in COMMANDS:
            return command

        try:
            return int(text)
        except ValueError:
            raise MalformedInput(token) from None
