#!/usr/bin/env python3
"""
LOCM Bot - Runner

Plays a game against the referee: reads one turn at a time, decides, and
writes the reply line. Runs until the input ends.

Usage:
    locm-bot [--input transcript.txt] [--verbose] [--ai simple|random]

Example:
    python -m locm_bot.run_bot --input recorded_game.txt --verbose
"""

import sys
import argparse
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .ai.agent import AIAgent, RandomAI, SimpleAI
from .cards.parser import TurnReader
from .engine.game import Bot, BotConfig
from .engine.types import BOARD_LIMIT


def create_agent(name: str = "simple", seed: Optional[int] = None,
                 board_limit: int = BOARD_LIMIT) -> AIAgent:
    """Create an agent by name ("simple" or "random")."""
    if name == "random":
        return RandomAI(seed=seed, board_limit=board_limit)
    return SimpleAI(board_limit=board_limit)


def positive_int(value: str) -> int:
    """argparse type for limits that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def run_bot(lines: Iterable[str], out: TextIO, bot: Bot) -> int:
    """
    Play every turn found in ``lines``.

    Args:
        lines: Raw input lines (stdin or a transcript)
        out: Where reply lines are written
        bot: The dispatcher to consult

    Returns:
        Number of turns played
    """
    on_line = None
    if bot.config.echo_input:
        def on_line(line: str) -> None:
            print(line, file=sys.stderr)

    reader = TurnReader(lines, on_line=on_line)
    for snapshot in reader:
        out.write(bot.respond(snapshot) + "\n")
        out.flush()
    return reader.turns_read


def main(argv=None):
    parser = argparse.ArgumentParser(description='Card game bot for the draft and battle protocol')
    parser.add_argument('--input', help='Read turns from a transcript file instead of stdin')
    parser.add_argument('--verbose', action='store_true', help='Log decisions to stderr')
    parser.add_argument('--echo-input', action='store_true', help='Echo raw input lines to stderr')
    parser.add_argument('--board-limit', type=positive_int, default=BOARD_LIMIT,
                        help=f'Maximum creatures on my board (default: {BOARD_LIMIT})')
    parser.add_argument('--ai', choices=['simple', 'random'], default='simple',
                        help='Agent to play with (default: simple)')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the random agent')

    args = parser.parse_args(argv)

    config = BotConfig(
        board_limit=args.board_limit,
        verbose=args.verbose,
        echo_input=args.echo_input
    )
    bot = Bot(agent=create_agent(args.ai, args.seed, args.board_limit), config=config)

    if args.input and not Path(args.input).exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.input:
            with open(args.input, 'r', encoding='utf-8') as f:
                run_bot(f, sys.stdout, bot)
        else:
            run_bot(sys.stdin, sys.stdout, bot)
    except ValueError as e:
        print(f"[ERROR] Turn {bot.turn_number + 1}: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
