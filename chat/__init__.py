"""
Chat module for the TicTacToe chat bot.
Handles per-conversation sessions, the match flow, and messaging.
"""

from .config import BotConfig
from .session import GameSession, GameStatus, Outcome, SessionRegistry
from .gateway import MessagingGateway, ConsoleGateway, QueueGateway
from .render import render
from .controller import GameController
