"""
Tests for the minimax search and the AI player's move selection.
"""

import pytest

from logic.ai_player import AIPlayer, WIN_SCORE, MISSED_BLOCK_SCORE
from logic.board import Board, Cell
from logic.heuristic import HeuristicEvaluator
from logic.search import SearchEngine, AscendingOrder, RandomOrder


# ==================== MOVE ORDER ====================

def test_ascending_order_sorts():
    assert AscendingOrder()([5, 1, 3]) == [1, 3, 5]


def test_random_order_is_a_seeded_permutation():
    moves = list(range(9))
    first = RandomOrder(seed=11)(moves)
    second = RandomOrder(seed=11)(moves)

    assert first == second
    assert sorted(first) == moves
    assert moves == list(range(9))


def test_random_order_repr_shows_seed():
    assert repr(RandomOrder(seed=11)) == "RandomOrder(seed=11)"
    assert repr(RandomOrder()) == "RandomOrder(seed=None)"


# ==================== SEARCH ENGINE ====================

@pytest.mark.parametrize("is_maximizing", [True, False])
def test_empty_board_is_a_draw(is_maximizing):
    engine = SearchEngine(maximizer_order=RandomOrder(seed=3))
    assert engine.search(Board(), is_maximizing) == 0


def test_terminal_scores_do_not_depend_on_depth():
    engine = SearchEngine()
    assert engine.search(Board.from_string("XXXOO____"), False) == 1
    assert engine.search(Board.from_string("OOOXX_X__"), True) == -1
    assert engine.search(Board.from_string("XOXXOOOXX"), True) == 0


def test_forced_win_is_found():
    # X to move completes the top row
    engine = SearchEngine()
    assert engine.search(Board.from_string("XX_OO____"), True) == 1
    # O to move completes the middle row
    assert engine.search(Board.from_string("XX_OO_X__"), False) == -1


def test_search_does_not_modify_board():
    board = Board.from_string("X___O____")
    SearchEngine().search(board, True)
    assert board.to_string() == "X___O____"


def test_full_depth_search_reaches_terminal_depth():
    engine = SearchEngine(maximizer_order=RandomOrder(seed=1), depth_limit=9)
    assert engine.search(Board(), True) == 0
    assert engine.max_depth_reached == 9

    unlimited = SearchEngine(maximizer_order=RandomOrder(seed=1))
    assert unlimited.search(Board(), True) == 0
    assert unlimited.max_depth_reached == 9


def test_same_seed_visits_same_nodes():
    first = SearchEngine(maximizer_order=RandomOrder(seed=5))
    second = SearchEngine(maximizer_order=RandomOrder(seed=5))
    first.search(Board(), True)
    second.search(Board(), True)
    assert first.nodes_visited == second.nodes_visited


def test_depth_limit_zero_leaves_position_undecided():
    engine = SearchEngine(depth_limit=0)
    assert engine.search(Board(), True) is None
    # Terminal positions are still scored
    assert engine.search(Board.from_string("XXXOO____"), False) == 1


def test_depth_limit_one_is_undecided_without_a_quick_win():
    engine = SearchEngine(depth_limit=1)
    assert engine.search(Board(), True) is None


def test_depth_limit_keeps_a_certain_win():
    engine = SearchEngine(depth_limit=1, maximizer_order=RandomOrder(seed=2))
    assert engine.search(Board.from_string("XX_OO____"), True) == 1


def test_negative_depth_limit_is_rejected():
    with pytest.raises(ValueError):
        SearchEngine(depth_limit=-1)


# ==================== AI PLAYER ====================

def test_blocks_the_top_row():
    # X holds cells 1 and 2, the AI (O) must take 3
    ai = AIPlayer(Cell.O)
    assert ai.get_best_move(Board.from_string("XX_______")) == 2


def test_takes_the_win():
    ai = AIPlayer(Cell.O)
    assert ai.get_best_move(Board.from_string("OO_X_____")) == 2


def test_prefers_winning_over_blocking():
    # O threatens the top row, but X can finish the middle row
    ai = AIPlayer(Cell.X)
    assert ai.get_best_move(Board.from_string("OO_XX____")) == 5


def test_answers_corner_opening_with_center():
    ai = AIPlayer(Cell.O, SearchEngine(maximizer_order=RandomOrder(seed=4)))
    assert ai.get_best_move(Board.from_string("X________")) == 4


def test_ties_keep_the_first_move():
    # Every opening move draws, so the first empty cell wins the tie
    ai = AIPlayer(Cell.X, SearchEngine(maximizer_order=RandomOrder(seed=9)))
    assert ai.get_best_move(Board()) == 0


def test_score_move_tiers():
    ai = AIPlayer(Cell.O)
    board = Board.from_string("XX_OO____")

    assert ai.score_move(board, 5) == (2, WIN_SCORE)
    assert ai.score_move(board, 8) == (0, MISSED_BLOCK_SCORE)


def test_score_move_uses_heuristic_when_search_is_undecided():
    ai = AIPlayer(Cell.O, SearchEngine(depth_limit=0))
    board = Board()

    trial = board.clone()
    trial.set(4, Cell.O)
    expected = HeuristicEvaluator(Cell.X, Cell.O).evaluate(trial)

    assert ai.score_move(board, 4) == (1, expected)


def test_heuristic_fallback_still_blocks():
    # Heuristic scores can exceed the win score; tiers keep the block first
    ai = AIPlayer(Cell.O, SearchEngine(depth_limit=0))
    assert ai.get_best_move(Board.from_string("XX__O____")) == 2


def test_make_move_plays_on_the_board():
    board = Board.from_string("XX_______")
    move = AIPlayer(Cell.O).make_move(board)
    assert move == 2
    assert board.get(2) == Cell.O


def test_no_move_on_full_board():
    board = Board.from_string("XOXXOOOXX")
    ai = AIPlayer(Cell.O)
    assert ai.get_best_move(board) is None
    assert ai.make_move(board) is None
    assert board.to_string() == "XOXXOOOXX"
