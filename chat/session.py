"""
Per-conversation game sessions for the TicTacToe chat bot.
Tracks the board, the players' marks, whose turn it is, and the result.
"""

import threading
from enum import Enum
from typing import Dict, Optional
from dataclasses import dataclass, field

from logic.board import Board, Cell


class GameStatus(Enum):
    """Where a session is in the match."""
    AWAITING_SYMBOL_CHOICE = "awaiting_symbol_choice"
    AWAITING_HUMAN_MOVE = "awaiting_human_move"
    OPPONENT_TURN = "opponent_turn"
    GAME_OVER = "game_over"


class Outcome(Enum):
    """Result of a finished match, from the human's side."""
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


@dataclass
class GameSession:
    """
    The complete state of one conversation's match.

    Every change to the board happens while holding `lock`.
    """

    conversation_id: str
    board: Board = field(default_factory=Board)
    human_symbol: Optional[Cell] = None
    ai_symbol: Optional[Cell] = None
    current_turn: Optional[Cell] = None
    status: GameStatus = GameStatus.AWAITING_SYMBOL_CHOICE
    outcome: Optional[Outcome] = None

    # Bumped on every reset so a running match loop can tell it was cancelled
    generation: int = 0

    # True while a match loop owns this session; owner is that loop's thread id
    active: bool = False
    owner: Optional[int] = None

    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)
    idle: threading.Event = field(default_factory=threading.Event, repr=False, compare=False)

    def __post_init__(self):
        self.idle.set()

    def claim(self) -> bool:
        """Make the calling thread the match loop owner, unless one is running."""
        with self.lock:
            if self.active:
                return False
            self.active = True
            self.owner = threading.get_ident()
            self.idle.clear()
            return True

    def release(self):
        with self.lock:
            self.active = False
            self.owner = None
            self.idle.set()

    def owned_by_caller(self) -> bool:
        return self.owner == threading.get_ident()

    @property
    def is_game_over(self) -> bool:
        return self.status == GameStatus.GAME_OVER

    def assign_symbols(self, human_symbol: Cell):
        """Give the human their mark and the AI the other one; human moves first."""
        with self.lock:
            self.human_symbol = human_symbol
            self.ai_symbol = human_symbol.opposite()
            self.current_turn = human_symbol
            self.outcome = None
            self.status = GameStatus.AWAITING_HUMAN_MOVE

    def finish(self, outcome: Outcome):
        """Record the result and clear the board for the next match."""
        with self.lock:
            self.outcome = outcome
            self.status = GameStatus.GAME_OVER
            self.current_turn = None
            self.board.clear()

    def reset(self):
        """Back to an empty board, waiting for a symbol choice."""
        with self.lock:
            self.board = Board()
            self.human_symbol = None
            self.ai_symbol = None
            self.current_turn = None
            self.status = GameStatus.AWAITING_SYMBOL_CHOICE
            self.outcome = None
            self.generation += 1


class SessionRegistry:
    """Game sessions keyed by conversation id."""

    def __init__(self):
        self._lock = threading.Lock()
        self._sessions: Dict[str, GameSession] = {}

    def get(self, conversation_id) -> GameSession:
        """Get the session for a conversation, creating it on first use."""
        key = str(conversation_id)
        with self._lock:
            session = self._sessions.get(key)
            if session is None:
                session = GameSession(conversation_id=key)
                self._sessions[key] = session
            return session

    def __contains__(self, conversation_id) -> bool:
        with self._lock:
            return str(conversation_id) in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
