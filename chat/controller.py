"""
Match orchestration for the TicTacToe chat bot.

This ties together:
- Sessions (one board per conversation)
- Logic (move validation, win checking, AI)
- The messaging gateway (texts, symbol choice, move input)

Game flow:
1. Human picks X or O, the AI takes the other mark
2. Human sends a position 1-9
3. AI answers with its best move
4. Repeat until someone wins or the board is full
"""

import logging
from typing import Optional

from logic.board import Cell
from logic.errors import InvalidMove, MalformedInput
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.search import SearchEngine, RandomOrder
from logic.ai_player import AIPlayer

from .config import BotConfig
from .gateway import GatewayTimeout, MessagingGateway
from .render import render
from .session import GameSession, GameStatus, Outcome, SessionRegistry

logger = logging.getLogger(__name__)


# What ended a wait for player input, other than a choice or a played move
RESET_REQUESTED = "reset"
RESTART_REQUESTED = "play"
CANCELLED = "cancelled"


class GameController:
    """
    Runs matches for any number of conversations.

    Each conversation has its own GameSession; plies and resets on a
    session are serialized by that session's lock, different sessions
    never block each other.
    """

    def __init__(
        self,
        gateway: MessagingGateway,
        registry: Optional[SessionRegistry] = None,
        config: Optional[BotConfig] = None
    ):
        """
        Initialize the controller.

        Args:
            gateway: Transport used to talk to the players.
            registry: Session store (default: a fresh one).
            config: Bot settings (default: BotConfig()).
        """
        self.gateway = gateway
        self.registry = registry or SessionRegistry()
        self.config = config or BotConfig()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    # ==================== COMMANDS ====================

    def handle_command(self, conversation_id: str, command: str) -> Optional[Outcome]:
        """
        Dispatch a /start, /play or /reset command.

        Returns:
            The match outcome for /play, None otherwise.
        """
        name = command.strip().lstrip("/").lower()

        if name == "start":
            self.send_instructions(conversation_id)
        elif name == "play":
            return self.play(conversation_id)
        elif name == "reset":
            self.reset(conversation_id)
        else:
            logger.debug("Conversation %s: ignoring unknown command %r", conversation_id, command)
        return None

    def send_instructions(self, conversation_id: str):
        self.gateway.send_text(conversation_id, self.config.INSTRUCTIONS)

    def reset(self, conversation_id: str):
        """
        Clear the conversation's board and wait for a new /play.

        Called from outside a running match, this also stops that match:
        its loop is woken and the call waits (up to RESET_WAIT_SECONDS)
        until the session is free for the next /play.
        """
        session = self.registry.get(conversation_id)
        session.reset()
        logger.info("Conversation %s: game reset", conversation_id)

        if session.active and not session.owned_by_caller():
            self.gateway.wake(conversation_id)
            if not session.idle.wait(self.config.RESET_WAIT_SECONDS):
                logger.warning("Conversation %s: match loop still running after reset", conversation_id)

        self.gateway.send_text(conversation_id, self.config.RESET_MESSAGE)

    def play(self, conversation_id: str) -> Optional[Outcome]:
        """
        Run a full match, blocking on the gateway for player input.

        Returns:
            The outcome, or None if the match was reset before it ended
            or the gateway timed out waiting for the player.
        """
        session = self.registry.get(conversation_id)

        if not session.claim():
            self.gateway.send_text(conversation_id, self.config.GAME_IN_PROGRESS)
            return None

        try:
            while self._run_match(session):
                logger.info("Conversation %s: match restarted", conversation_id)
            return session.outcome if session.is_game_over else None
        except GatewayTimeout as e:
            logger.info("Conversation %s: %s, abandoning match", conversation_id, e)
            session.reset()
            return None
        finally:
            session.release()

    # ==================== MATCH LOOP ====================

    def new_ai_player(self, symbol: Cell) -> AIPlayer:
        """Build the AI for one match using the configured search settings."""
        move_order = RandomOrder(self.config.RANDOM_SEED)
        engine = SearchEngine(
            self.win_checker,
            maximizer_order=move_order,
            depth_limit=self.config.SEARCH_DEPTH_LIMIT
        )
        logger.debug("AI plays %s with %r, depth limit %s", symbol.value, move_order, engine.depth_limit)
        return AIPlayer(symbol, engine)

    def _run_match(self, session: GameSession) -> bool:
        """
        Play one match from symbol choice to game over.

        Returns:
            True if the human asked for a new match midway.
        """
        conversation_id = session.conversation_id
        session.reset()
        generation = session.generation

        choice = self._await_symbol_choice(session, generation)
        if choice == RESET_REQUESTED:
            self.reset(conversation_id)
            return False
        if choice == RESTART_REQUESTED:
            return True
        if choice == CANCELLED:
            return False

        session.assign_symbols(Cell(choice.upper()))
        ai = self.new_ai_player(session.ai_symbol)

        logger.info(
            "Conversation %s: match started, human=%s ai=%s",
            conversation_id, session.human_symbol.value, session.ai_symbol.value
        )
        self.gateway.send_text(
            conversation_id,
            self.config.SYMBOL_CONFIRMATION.format(
                human=session.human_symbol.value, ai=session.ai_symbol.value
            )
        )
        self.gateway.send_text(conversation_id, self.config.GAME_START)

        while not session.is_game_over:
            if session.status == GameStatus.AWAITING_HUMAN_MOVE:
                self.gateway.send_text(conversation_id, render(session.board, self.config.GLYPHS))
                interruption = self._await_human_move(session, generation)

                if interruption == RESET_REQUESTED:
                    self.reset(conversation_id)
                    return False
                if interruption == RESTART_REQUESTED:
                    return True
                if interruption == CANCELLED:
                    return False
            elif session.status == GameStatus.OPPONENT_TURN:
                self.gateway.send_text(conversation_id, self.config.AI_TURN)
                self.opponent_turn(session, ai)
            else:
                # Reset from another thread
                return False

        self.gateway.send_text(conversation_id, self.config.GAME_OVER)
        return False

    def _await_symbol_choice(self, session: GameSession, generation: int) -> str:
        """
        Ask for X or O until the human picks one or sends a command.

        Returns:
            The chosen option, or why the wait ended.
        """
        conversation_id = session.conversation_id
        options = self.config.SYMBOL_OPTIONS
        answer = self.gateway.send_choice(conversation_id, self.config.SYMBOL_PROMPT, options)

        while True:
            if session.generation != generation:
                return CANCELLED

            for option in options:
                if answer.strip().upper() == option.upper():
                    return option

            try:
                parsed = self.validator.parse_token(answer)
            except MalformedInput as e:
                logger.debug("Conversation %s: %s", conversation_id, e)
                parsed = None

            if parsed == "reset":
                return RESET_REQUESTED
            if parsed == "play":
                return RESTART_REQUESTED
            if parsed == "start":
                self.send_instructions(conversation_id)

            # The prompt is still on screen; just read the next answer
            answer = self.gateway.await_move(conversation_id)

    def _await_human_move(self, session: GameSession, generation: int) -> Optional[str]:
        """
        Wait until the human plays a legal move or sends a command.

        Returns:
            None once a move was played, otherwise why the wait ended.
        """
        conversation_id = session.conversation_id
        self.gateway.send_text(conversation_id, self.config.MOVE_PROMPT)

        while True:
            token = self.gateway.await_move(conversation_id)
            if session.generation != generation:
                return CANCELLED

            try:
                parsed = self.validator.parse_token(token)
            except MalformedInput as e:
                logger.debug("Conversation %s: %s", conversation_id, e)
                continue

            if parsed == "start":
                self.send_instructions(conversation_id)
                continue
            if parsed == "reset":
                return RESET_REQUESTED
            if parsed == "play":
                return RESTART_REQUESTED

            try:
                self.apply_human_move(session, parsed)
                return None
            except InvalidMove as e:
                if session.generation != generation:
                    return CANCELLED
                logger.debug("Conversation %s: rejected move: %s", conversation_id, e)
                self.gateway.send_text(conversation_id, self.config.INVALID_MOVE)
                self.gateway.send_text(conversation_id, self.config.MOVE_PROMPT)

    # ==================== PLIES ====================

    def apply_human_move(self, session: GameSession, position: int) -> Optional[Outcome]:
        """
        Play the human's move (1-9) and check for the end of the game.

        Raises:
            InvalidMove: if it is not the human's turn, the position is out
                of range, or the cell is taken. Nothing is changed.
        """
        with session.lock:
            if session.status != GameStatus.AWAITING_HUMAN_MOVE:
                raise InvalidMove("It's not your turn", position)

            result = self.validator.validate_move(session.board, position)
            if not result.is_valid:
                raise InvalidMove(result.error_message, position)

            session.board.set(position - 1, session.human_symbol)
            logger.info(
                "Conversation %s: human (%s) played %d",
                session.conversation_id, session.human_symbol.value, position
            )
            session.current_turn = session.ai_symbol
            session.status = GameStatus.OPPONENT_TURN
            return self._end_of_ply(session)

    def opponent_turn(self, session: GameSession, ai: Optional[AIPlayer] = None) -> Optional[Outcome]:
        """Let the AI play its best move and check for the end of the game."""
        with session.lock:
            ai = ai or self.new_ai_player(session.ai_symbol)
            move = ai.make_move(session.board)
            if move is not None:
                logger.info(
                    "Conversation %s: AI (%s) played %d",
                    session.conversation_id, ai.symbol.value, move + 1
                )
            session.current_turn = session.human_symbol
            session.status = GameStatus.AWAITING_HUMAN_MOVE
            return self._end_of_ply(session)

    def check_game_status(self, session: GameSession) -> Optional[Outcome]:
        """
        Check the board for the end of the game.

        Returns:
            The outcome from the human's side, or None to keep playing.
        """
        winner = self.win_checker.check_winner(session.board)
        if winner is not None and winner == session.human_symbol:
            return Outcome.WIN
        if winner is not None and winner == session.ai_symbol:
            return Outcome.LOSS
        if self.win_checker.check_draw(session.board):
            return Outcome.DRAW
        return None

    def _end_of_ply(self, session: GameSession) -> Optional[Outcome]:
        outcome = self.check_game_status(session)
        if outcome is None:
            return None

        conversation_id = session.conversation_id
        messages = {
            Outcome.WIN: self.config.WIN_MESSAGE,
            Outcome.LOSS: self.config.LOSS_MESSAGE,
            Outcome.DRAW: self.config.DRAW_MESSAGE,
        }
        logger.info("Conversation %s: game over (%s)", conversation_id, outcome.value)

        self.gateway.send_text(conversation_id, render(session.board, self.config.GLYPHS))
        self.gateway.send_text(conversation_id, messages[outcome])
        session.finish(outcome)
        return outcome
