"""
Board representation for the TicTacToe chat bot.
A flat 3x3 grid of cells, indexed 0-8 (row = index // 3, col = index % 3).
"""

from enum import Enum
from typing import List, Tuple
from dataclasses import dataclass, field


class Cell(Enum):
    """Content of a single board cell."""
    EMPTY = " "
    X = "X"
    O = "O"

    def opposite(self) -> "Cell":
        """Get the opposite mark (EMPTY has no opposite)."""
        if self == Cell.X:
            return Cell.O
        if self == Cell.O:
            return Cell.X
        raise ValueError("EMPTY has no opposite mark")


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# All 8 lines that win when fully held by one mark
LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass
class Board:
    """
    The 3x3 TicTacToe board.

    No rule checking happens here beyond the index range; callers
    (MoveValidator, GameController) decide whether a move is legal.
    """

    cells: List[Cell] = field(default_factory=lambda: [Cell.EMPTY] * CELL_COUNT)

    @classmethod
    def from_string(cls, layout: str) -> "Board":
        """
        Build a board from a 9-character layout.

        Args:
            layout: Characters 'X', 'O', and '_' or ' ' for empty,
                read left to right, top to bottom.

        Returns:
            A new Board.
        """
        if len(layout) != CELL_COUNT:
            raise ValueError(f"Board layout must have {CELL_COUNT} cells, got {len(layout)}")

        cells = []
        for char in layout.upper():
            if char in ("_", " ", "."):
                cells.append(Cell.EMPTY)
            else:
                cells.append(Cell(char))
        return cls(cells=cells)

    def _check_index(self, index: int):
        if not 0 <= index < CELL_COUNT:
            raise IndexError(f"Cell index {index} out of range 0-{CELL_COUNT - 1}")

    def get(self, index: int) -> Cell:
        """Get the cell at the given index (0-8)."""
        self._check_index(index)
        return self.cells[index]

    def set(self, index: int, cell: Cell):
        """Put a cell value at the given index (0-8)."""
        self._check_index(index)
        self.cells[index] = cell

    def is_full(self) -> bool:
        """True when no EMPTY cells remain."""
        return Cell.EMPTY not in self.cells

    def count(self, cell: Cell) -> int:
        """Number of cells holding the given value."""
        return self.cells.count(cell)

    def clone(self) -> "Board":
        """Value copy of the board, safe to mutate during search."""
        return Board(cells=list(self.cells))

    def clear(self):
        """Empty every cell."""
        self.cells = [Cell.EMPTY] * CELL_COUNT

    def to_string(self) -> str:
        """Inverse of from_string, with '_' for empty cells."""
        return "".join("_" if c == Cell.EMPTY else c.value for c in self.cells)


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board.from_string("XO_______")
    print(f"Layout: {board.to_string()}")
    assert board.get(0) == Cell.X
    assert not board.is_full()

    copy = board.clone()
    copy.set(2, Cell.X)
    assert board.get(2) == Cell.EMPTY

    print("Board test done!")
