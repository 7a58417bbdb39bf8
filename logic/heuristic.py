"""
Static positional scoring for the TicTacToe chat bot.
Only used when the search cannot produce an exact value.
"""

from .board import Board, Cell, LINES


# Line middles that are edge cells vs corner cells
EDGE_INDICES = (1, 3, 5, 7)
CORNER_INDICES = (0, 2, 6, 8)

BLOCK_BONUS = 100
THREAT_BONUS = 50
EDGE_BONUS = 10
CORNER_BONUS = 5


class HeuristicEvaluator:
    """
    Scores a board line by line. Higher is better for the AI.

    The score is an unbounded preference, not a game value: it is never
    comparable to the -1/0/+1 results of the search.
    """

    def __init__(self, human_symbol: Cell, ai_symbol: Cell):
        self.human_symbol = human_symbol
        self.ai_symbol = ai_symbol

    def evaluate(self, board: Board) -> int:
        """
        Score a board from the AI's side.

        Args:
            board: Position to score (usually right after an AI move).

        Returns:
            Sum over the 8 lines: +100 when the human has two with the
            third empty, +50 when the AI does, +10 or +5 when the line's
            middle cell is an edge or a corner.
        """
        total_score = 0

        for line in LINES:
            values = [board.cells[i] for i in line]
            has_empty = Cell.EMPTY in values

            # Human is one move from completing this line
            if values.count(self.human_symbol) == 2 and has_empty:
                total_score += BLOCK_BONUS

            # So is the AI
            if values.count(self.ai_symbol) == 2 and has_empty:
                total_score += THREAT_BONUS

            middle = line[1]
            if middle in EDGE_INDICES:
                total_score += EDGE_BONUS
            if middle in CORNER_INDICES:
                total_score += CORNER_BONUS

        return total_score
