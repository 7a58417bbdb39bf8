"""
Win checker for the TicTacToe chat bot.
Checks if a mark has completed a line or if the game is a draw.
"""

from typing import Optional
from .board import Board, Cell, LINES


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = LINES

    def wins(self, board: Board, symbol: Cell) -> bool:
        """
        Check if a mark holds any complete line.

        Args:
            board: The board to inspect.
            symbol: Cell.X or Cell.O.

        Returns:
            True if all three cells of some line equal symbol.
        """
        if symbol == Cell.EMPTY:
            return False

        cells = board.cells
        for a, b, c in self.WINNING_LINES:
            if cells[a] == symbol and cells[b] == symbol and cells[c] == symbol:
                return True
        return False

    def check_winner(self, board: Board) -> Optional[Cell]:
        """
        Check if there's a winner.

        Returns:
            The winning mark, or None if no winner yet.
        """
        for symbol in (Cell.X, Cell.O):
            if self.wins(board, symbol):
                return symbol
        return None

    def check_draw(self, board: Board) -> bool:
        """A draw is a full board with no winner."""
        if self.check_winner(board) is not None:
            return False
        return board.is_full()


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    board1 = Board.from_string("XXXOO____")
    winner = checker.check_winner(board1)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == Cell.X

    # Test 2: Diagonal win
    board2 = Board.from_string("OX_XO___O")
    winner = checker.check_winner(board2)
    print(f"Test 2 (diagonal): winner = {winner}")
    assert winner == Cell.O

    # Test 3: Draw (full board, no winner)
    board3 = Board.from_string("XOXXOOOXX")
    is_draw = checker.check_draw(board3)
    print(f"Test 3 (draw): is_draw = {is_draw}")
    assert is_draw

    print("\nWinChecker test done!")
