"""
Messaging gateways for the TicTacToe chat bot.

The controller only talks to a MessagingGateway. A chat transport (or the
console) implements it; every blocking call is one suspension point of
the match loop.
"""

import queue
import threading
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence


# Put on a conversation's inbox to wake a match loop after a reset
WAKE_TOKEN = "\x00wake"


class GatewayTimeout(Exception):
    """No input arrived for a conversation within the gateway's timeout."""

    def __init__(self, conversation_id: str, timeout: float):
        super().__init__(f"No input from conversation {conversation_id} within {timeout}s")
        self.conversation_id = conversation_id
        self.timeout = timeout


def is_command(token: str) -> bool:
    """True for slash commands such as /reset."""
    return token.strip().startswith("/")


class MessagingGateway(ABC):
    """What the game needs from the chat transport."""

    @abstractmethod
    def send_text(self, conversation_id: str, text: str):
        """Send a plain message to the conversation."""

    @abstractmethod
    def send_choice(self, conversation_id: str, prompt: str, options: Sequence[str]) -> str:
        """
        Offer options (e.g. inline buttons) and block for the answer.

        Returns:
            One of the options, or a slash command the user sent instead
            (e.g. "/reset"), or WAKE_TOKEN after wake().
        """

    @abstractmethod
    def await_move(self, conversation_id: str) -> str:
        """Block until the next move token ("1".."9" or a command) arrives."""

    def wake(self, conversation_id: str):
        """
        Release a match loop blocked on this conversation.
        Gateways that cannot be interrupted leave this as a no-op.
        """


class ConsoleGateway(MessagingGateway):
    """
    Plays a single conversation in the terminal.
    The conversation id is ignored.
    """

    def __init__(self, input_func=input, output_func=print):
        self._input = input_func
        self._output = output_func

    def send_text(self, conversation_id: str, text: str):
        self._output(text)

    def send_choice(self, conversation_id: str, prompt: str, options: Sequence[str]) -> str:
        self._output(prompt)
        for number, option in enumerate(options, start=1):
            self._output(f"  {number}. {option}")

        while True:
            answer = self._input("> ").strip()
            if is_command(answer):
                return answer
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return options[int(answer) - 1]
            for option in options:
                if answer.upper() == option.upper():
                    return option
            self._output(f"Please pick one of: {', '.join(options)}")

    def await_move(self, conversation_id: str) -> str:
        return self._input("> ")


@dataclass
class OutgoingMessage:
    """A message the bot sent; options is set for choice prompts."""
    text: str
    options: Optional[Sequence[str]] = None


class QueueGateway(MessagingGateway):
    """
    Thread-safe in-memory gateway.

    A transport thread calls feed() with whatever the user sent; the
    controller's blocking calls take from that conversation's queue.
    Everything sent to a conversation is kept in order.
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Args:
            timeout: Seconds to wait for input before raising
                GatewayTimeout (None waits forever).
        """
        self.timeout = timeout
        self._lock = threading.Lock()
        self._inboxes: Dict[str, "queue.Queue[str]"] = {}
        self._outboxes: Dict[str, List[OutgoingMessage]] = defaultdict(list)

    def _inbox(self, conversation_id: str) -> "queue.Queue[str]":
        key = str(conversation_id)
        with self._lock:
            if key not in self._inboxes:
                self._inboxes[key] = queue.Queue()
            return self._inboxes[key]

    def _next(self, conversation_id: str) -> str:
        try:
            return self._inbox(conversation_id).get(timeout=self.timeout)
        except queue.Empty:
            raise GatewayTimeout(str(conversation_id), self.timeout) from None

    def feed(self, conversation_id: str, *tokens: str):
        """Deliver user input (move numbers, commands, symbol choices)."""
        inbox = self._inbox(conversation_id)
        for token in tokens:
            inbox.put(str(token))

    def wake(self, conversation_id: str):
        self._inbox(conversation_id).put(WAKE_TOKEN)

    def send_text(self, conversation_id: str, text: str):
        with self._lock:
            self._outboxes[str(conversation_id)].append(OutgoingMessage(text))

    def send_choice(self, conversation_id: str, prompt: str, options: Sequence[str]) -> str:
        with self._lock:
            self._outboxes[str(conversation_id)].append(OutgoingMessage(prompt, tuple(options)))

        while True:
            answer = self._next(conversation_id)
            # Anything but an option, a command or a wake-up is ignored
            if answer in options or answer == WAKE_TOKEN or is_command(answer):
                return answer

    def await_move(self, conversation_id: str) -> str:
        return self._next(conversation_id)

    def messages(self, conversation_id: str) -> List[str]:
        """Texts sent to a conversation so far, oldest first."""
        with self._lock:
            return [m.text for m in self._outboxes[str(conversation_id)]]

    def outgoing(self, conversation_id: str) -> List[OutgoingMessage]:
        with self._lock:
            return list(self._outboxes[str(conversation_id)])
