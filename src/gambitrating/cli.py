"""Command-line interface for the Gambit Rating engine.

Run ``gambit-rating`` with no arguments for interactive mode.
"""

# Gambit Rating
# Copyright (C) 2025  Gambit Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


import argparse
import logging
import math
import sys
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from gambitrating.constants import MAX_RATING, MIN_RATING, OUTCOME_ALIASES
from gambitrating.exceptions import GambitRatingException
from gambitrating.rating import (
    classify_rating,
    compute_rating_change,
    expected_score,
    is_valid_rating,
)
from gambitrating.utils import set_package_log_level, setup_logger
from gambitrating.utils.validation import validate_rating, validate_score

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions for interactive help and completion
COMMANDS = {
    "change": {
        "description": "Rating change after one game",
        "options": {
            "PLAYER": "Player's rating before the game",
            "OPPONENT": "Opponent's rating before the game",
            "OUTCOME": "1 / 0.5 / 0 or win / draw / loss",
        },
    },
    "classify": {
        "description": "Category of a rating",
        "options": {"RATING": "Rating to classify"},
    },
    "validate": {
        "description": f"Check that a rating is a whole number in [{MIN_RATING}, {MAX_RATING}]",
        "options": {"RATING": "Rating to check"},
    },
    "expected": {
        "description": "Expected score of a player against an opponent",
        "options": {
            "PLAYER": "Player's rating",
            "OPPONENT": "Opponent's rating",
        },
    },
    "help": {"description": "Show help for commands", "options": {}},
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def parse_outcome(value: str) -> float:
    """Parse a game outcome given as a number or a word.

    Examples:
        >>> parse_outcome("win")
        1.0
        >>> parse_outcome("0.5")
        0.5

    Raises:
        argparse.ArgumentTypeError: If the value is not a recognised outcome
    """
    alias = OUTCOME_ALIASES.get(value.strip().lower())
    if alias is not None:
        return alias

    result = validate_score(value)
    if not result:
        raise argparse.ArgumentTypeError(
            f"Invalid outcome '{value}'. Use 1, 0.5, 0, win, draw or loss"
        )
    return float(result.sanitized_value)


def parse_rating_value(value: str) -> float:
    """Parse a rating argument; fractional values are kept as floats."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid rating '{value}'. Must be a number")
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(
            f"Invalid rating '{value}'. Must be a finite number"
        )
    return int(number) if number.is_integer() else number


def run_change_command(args: argparse.Namespace) -> int:
    """Run the change command."""
    for label, rating in (("player", args.player), ("opponent", args.opponent)):
        if not is_valid_rating(rating):
            print(
                f"{Colors.WARNING}Warning: {label} rating {rating} is outside "
                f"[{MIN_RATING}, {MAX_RATING}] or not a whole number{Colors.ENDC}"
            )

    change = compute_rating_change(args.player, args.opponent, args.outcome)
    new_rating = args.player + change
    print(f"Expected score: {expected_score(args.player, args.opponent):.4f}")
    print(f"Rating change:  {Colors.BOLD}{change:+d}{Colors.ENDC}")
    print(f"New rating:     {new_rating} ({classify_rating(new_rating)})")
    return 0


def run_classify_command(args: argparse.Namespace) -> int:
    """Run the classify command."""
    print(classify_rating(args.rating))
    return 0


def run_validate_command(args: argparse.Namespace) -> int:
    """Run the validate command."""
    result = validate_rating(args.rating)
    if result:
        print(f"{Colors.OKGREEN}Valid rating: {result.sanitized_value}{Colors.ENDC}")
        return 0
    print(f"{Colors.FAIL}Invalid rating: {result.error_message}{Colors.ENDC}")
    return 1


def run_expected_command(args: argparse.Namespace) -> int:
    """Run the expected command."""
    print(f"{expected_score(args.player, args.opponent):.4f}")
    return 0


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="gambit-rating",
        description="Elo rating calculator for chess tournaments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  gambit-rating

  # Rating change for a win between equal players
  gambit-rating change 1500 1500 win

  # Category of a rating
  gambit-rating classify 1516

  # Check a rating entered by hand
  gambit-rating validate 1500.5
        """,
    )

    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    change_parser = subparsers.add_parser(
        "change", help=COMMANDS["change"]["description"]
    )
    change_parser.add_argument("player", type=parse_rating_value)
    change_parser.add_argument("opponent", type=parse_rating_value)
    change_parser.add_argument("outcome", type=parse_outcome)
    change_parser.set_defaults(func=run_change_command)

    classify_parser = subparsers.add_parser(
        "classify", help=COMMANDS["classify"]["description"]
    )
    classify_parser.add_argument("rating", type=parse_rating_value)
    classify_parser.set_defaults(func=run_classify_command)

    # Raw string: the validator reports why a value is rejected
    validate_parser = subparsers.add_parser(
        "validate", help=COMMANDS["validate"]["description"]
    )
    validate_parser.add_argument("rating")
    validate_parser.set_defaults(func=run_validate_command)

    expected_parser = subparsers.add_parser(
        "expected", help=COMMANDS["expected"]["description"]
    )
    expected_parser.add_argument("player", type=parse_rating_value)
    expected_parser.add_argument("opponent", type=parse_rating_value)
    expected_parser.set_defaults(func=run_expected_command)

    return parser


def execute(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    """Dispatch parsed arguments to their command."""
    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except GambitRatingException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        logger.debug("Command failed", exc_info=True)
        return 1


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Arguments:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    completions = {}
    for cmd in COMMANDS:
        # Outcome words are the only arguments worth completing
        if cmd == "change":
            completions[cmd] = WordCompleter(["win", "draw", "loss"])
        else:
            completions[cmd] = None
    completions["help"] = WordCompleter(list(COMMANDS))
    return NestedCompleter.from_nested_dict(completions)


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print(f"{Colors.OKBLUE}{Colors.BOLD}Gambit Rating{Colors.ENDC}")
    print(f"Type {Colors.BOLD}help{Colors.ENDC} to see all available commands")
    print(
        f"Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave\n"
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )
    parser = create_main_parser()

    while True:
        try:
            user_input = session.prompt("gambit-rating> ").strip()
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
            continue
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

        if not user_input:
            continue

        if user_input in ["exit", "quit", "q"]:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

        parts = user_input.split()
        if parts[0] in ["help", "?"]:
            if len(parts) > 1:
                print_command_help(parts[1])
            else:
                print_commands_list()
            continue

        if parts[0] not in COMMANDS:
            print(f"{Colors.FAIL}Unknown command: {parts[0]}{Colors.ENDC}")
            print(f"Type {Colors.BOLD}help{Colors.ENDC} to see available commands")
            continue

        try:
            args = parser.parse_args(parts)
        except SystemExit:
            # argparse calls sys.exit on error, catch it
            continue
        execute(args, parser)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for gambit-rating CLI."""
    if argv is None:
        argv = sys.argv[1:]

    # If no arguments, start interactive mode
    if not argv:
        return run_interactive_mode()

    parser = create_main_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        set_package_log_level(logging.DEBUG)
    if args.interactive:
        return run_interactive_mode()
    return execute(args, parser)


if __name__ == "__main__":
    sys.exit(main())
