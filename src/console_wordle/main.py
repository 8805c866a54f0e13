"""
Main entry point for Console Wordle.
"""

import argparse
import random

from rich.console import Console

from .dictionary import WordBank
from .settings import MIN_ATTEMPTS, MAX_ATTEMPTS, load_settings
from .ui import WORDLE_THEME, WordleConsoleApp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Wordle in the terminal.")
    parser.add_argument(
        "--attempts", type=int,
        help=f"Default attempts per round ({MIN_ATTEMPTS}-{MAX_ATTEMPTS})"
    )
    parser.add_argument("--config", help="Path to settings JSON file")
    parser.add_argument("--stats-file", help="Where to load/save stats")
    parser.add_argument(
        "--no-save", action="store_true",
        help="Skip the save/load prompt and never write stats"
    )
    parser.add_argument("--seed", type=int, help="Seed for target word selection")
    return parser


def main(argv=None) -> int:
    """Launch Console Wordle. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    console = Console(theme=WORDLE_THEME, highlight=False)

    settings = load_settings(args.config)
    if args.attempts is not None:
        if not MIN_ATTEMPTS <= args.attempts <= MAX_ATTEMPTS:
            console.print(
                f"--attempts must be between {MIN_ATTEMPTS}-{MAX_ATTEMPTS}", style="error"
            )
            return 2
        settings.max_guesses = args.attempts
    if args.stats_file:
        settings.stats_file = args.stats_file

    try:
        word_bank = WordBank.from_files(
            settings.word_bank_file, settings.word_list_file, settings.word_length
        )
    except (FileNotFoundError, ValueError) as e:
        console.print(f"Failed to load word lists: {e}", style="error", markup=False)
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    app = WordleConsoleApp(
        word_bank,
        settings,
        console=console,
        rng=rng,
        ask_about_stats=not args.no_save
    )
    try:
        app.run()
    except (KeyboardInterrupt, EOFError):
        console.print("\nThanks for playing!", style="success")
    return 0

