"""
Console entry point for the TicTacToe chat bot.

Plays one conversation in the terminal through the same controller a
chat transport would use. Type /play to start, 1-9 to move, /reset to
reset, /quit to leave.
"""

import argparse
import logging

from chat.config import BotConfig
from chat.controller import GameController
from chat.gateway import ConsoleGateway

CONSOLE_CONVERSATION = "console"
QUIT_COMMANDS = ("/quit", "quit", "/exit", "exit")


def run_console(controller: GameController, gateway: ConsoleGateway):
    """Read commands until the user quits."""
    controller.send_instructions(CONSOLE_CONVERSATION)

    while True:
        command = gateway.await_move(CONSOLE_CONVERSATION).strip()
        if command.lower() in QUIT_COMMANDS:
            break
        if not command:
            continue
        controller.handle_command(CONSOLE_CONVERSATION, command)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe chat bot (console mode)")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the AI's move order (reproducible games)"
    )
    parser.add_argument(
        "--depth-limit",
        type=int,
        default=None,
        help="Plies the AI searches before using its heuristic (default: full depth)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    config = BotConfig(
        RANDOM_SEED=args.seed,
        SEARCH_DEPTH_LIMIT=args.depth_limit,
    )
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT
    )

    print("\n" + "="*60)
    print("   TicTacToe Bot")
    print("="*60 + "\n")

    gateway = ConsoleGateway()
    controller = GameController(gateway, config=config)

    try:
        run_console(controller, gateway)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
