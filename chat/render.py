"""
Text rendering of the board for chat messages.
"""

from typing import Dict, Optional

from logic.board import Board, Cell, BOARD_SIZE
from .config import BotConfig

SEPARATOR = "+-----+-----+-----+"


def render(board: Board, glyphs: Optional[Dict[Cell, str]] = None) -> str:
    """
    Draw the board as a fixed-width 3x3 grid.

    Args:
        board: Board to draw.
        glyphs: Mark for X, O and EMPTY (default: BotConfig.GLYPHS).

    Returns:
        Multi-line text, one bordered row per board row.
    """
    glyphs = glyphs or BotConfig.GLYPHS

    lines = [SEPARATOR]
    for row in range(BOARD_SIZE):
        cells = [glyphs[board.get(row * BOARD_SIZE + col)] for col in range(BOARD_SIZE)]
        lines.append("|" + "|".join(f"  {glyph}  " for glyph in cells) + "|")
        lines.append(SEPARATOR)
    return "\n".join(lines)
