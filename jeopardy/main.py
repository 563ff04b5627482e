"""
Command-line entry point.

Runs an interactive game in the terminal, or with ``--html-output`` builds a
single board and writes it as an HTML page.
"""

import asyncio
import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .board import BoardBuilder
from .client.cluebase import ClueBaseClient
from .constants import DEFAULT_PATHS
from .errors import ConfigError, SourceUnavailable
from .models import RevealState
from .render import render_board_text, render_page_html
from .session import GameSession
from .utils.settings import load_settings, setup_logging, validate_settings

HELP_TEXT = """Commands:
  s / r        start or restart with a fresh board
  i-j | i j    select the cell in category i, row j (0-based)
  b            show the board again
  h            show this help
  q            quit"""

COORDINATE_PATTERN = re.compile(r'^\s*(-?\d+)\s*[-,\s]\s*(-?\d+)\s*$')


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Jeopardy board backed by the cluebase trivia API')
    parser.add_argument('--config', type=str, default=DEFAULT_PATHS['config_file'],
                        help='Path to configuration file')
    parser.add_argument('--categories', type=int, help='Number of categories on the board (default: 6)')
    parser.add_argument('--questions', type=int, help='Number of clues per category (default: 5)')
    parser.add_argument('--base-url', type=str, help='Base URL of the trivia service')
    parser.add_argument('--log-level', type=str, help='Logging level (DEBUG, INFO, WARNING, ERROR)')
    parser.add_argument('--html-output', type=str,
                        help='Build one board, write it as an HTML page to this path and exit')
    return parser.parse_args(argv)


def apply_overrides(settings: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Apply command-line overrides on top of loaded settings."""
    if args.categories is not None:
        settings['board']['category_count'] = args.categories
    if args.questions is not None:
        settings['board']['question_count'] = args.questions
    if args.base_url:
        settings['api']['base_url'] = args.base_url
    if args.log_level:
        settings['logging']['level'] = args.log_level.upper()

    validate_settings(settings)
    return settings


def parse_command(text: str) -> Tuple[str, Optional[Tuple[int, int]]]:
    """
    Turn a line of user input into a command.

    Returns:
        ``(command, coordinate)`` where command is one of ``restart``,
        ``select``, ``board``, ``help``, ``quit`` or ``unknown``
    """
    text = text.strip().lower()

    if text in ('s', 'r', 'start', 'restart'):
        return 'restart', None
    if text in ('b', 'board'):
        return 'board', None
    if text in ('h', 'help', '?'):
        return 'help', None
    if text in ('q', 'quit', 'exit'):
        return 'quit', None

    match = COORDINATE_PATTERN.match(text)
    if match:
        return 'select', (int(match.group(1)), int(match.group(2)))

    return 'unknown', None


async def write_html_board(session: GameSession, output_path: str) -> None:
    board = await session.restart()
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        render_page_html(board, session.button_label, session.button_enabled),
        encoding='utf-8'
    )
    print(f"Board with {len(board)} categories written to {path}")


async def play(session: GameSession) -> None:
    loop = asyncio.get_running_loop()
    print(HELP_TEXT)

    while True:
        prompt = f"\n[{session.button_label}] > "
        try:
            line = await loop.run_in_executor(None, input, prompt)
        except EOFError:
            break

        command, coordinate = parse_command(line)

        if command == 'quit':
            break
        elif command == 'help':
            print(HELP_TEXT)
        elif command == 'restart':
            print("Loading...")
            try:
                board = await session.restart()
            except SourceUnavailable as e:
                print(f"Could not load a board: {e}. Try again.")
                continue
            if board is not None:
                print(render_board_text(board))
        elif command == 'board':
            if session.board is None:
                print("No board yet. Type 's' to start.")
            else:
                print(render_board_text(session.board))
        elif command == 'select':
            result = session.select(*coordinate)
            if result is None:
                print("No clue there.")
            elif result.changed:
                label = "Answer" if result.showing is RevealState.ANSWER else "Question"
                print(f"{label}: {result.text}")
            else:
                print("Already answered.")
        else:
            print("Unknown command. Type 'h' for help.")


async def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        settings = apply_overrides(load_settings(args.config), args)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging(settings)
    logger = logging.getLogger(__name__)
    logger.info(f"Using trivia service at {settings['api']['base_url']}")

    async with ClueBaseClient(settings) as client:
        session = GameSession(BoardBuilder(client, settings), settings)

        try:
            if args.html_output:
                await write_html_board(session, args.html_output)
            else:
                await play(session)
        except SourceUnavailable as e:
            logger.error(f"Trivia service unavailable: {e}")
            print(f"\nTrivia service unavailable: {e}")
            return 1

    logger.info("Game session ended")
    return 0


def run() -> None:
    # asyncio.run re-raises Ctrl-C here after cancelling main()
    try:
        code = asyncio.run(main())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Game interrupted by user")
        print("\nGame interrupted by user.")
        code = 130
    sys.exit(code)


if __name__ == '__main__':
    run()
