"""
UI module for Console Wordle.

Interactive terminal flow on top of a rich Console:
- Setup: attempts per round, save/load stats, player name
- Guess loop with board after every guess
- Replay prompt, stats saved after each round when enabled
"""

import random
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console
from rich.theme import Theme

from .dictionary import WordBank
from .game import Round, RoundState
from .settings import GameSettings, MIN_ATTEMPTS, MAX_ATTEMPTS, parse_attempts
from .stats import AggregateStats, load_stats, save_stats


# Style names double as the markup tags Round.render_board emits
WORDLE_THEME = Theme({
    "exact": "bold green",
    "present": "bold yellow",
    "absent": "default",
    "info": "green",
    "error": "red",
    "success": "bold color(40)",
})


class WordleConsoleApp:
    """
    Console Wordle game loop.

    All input goes through _read_line so tests can script a whole session
    with input_stream.
    """

    def __init__(
        self,
        word_bank: WordBank,
        settings: Optional[GameSettings] = None,
        console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
        rng: Optional[random.Random] = None,
        ask_about_stats: bool = True
    ):
        """
        Args:
            word_bank: Targets and accepted guesses
            settings: Game settings (defaults if not provided)
            console: Output console (themed stdout console if not provided)
            input_stream: Read answers from this stream instead of stdin
            rng: Random source for target selection
            ask_about_stats: If False, skip the save/load prompt and never save
        """
        self.word_bank = word_bank
        self.settings = settings or GameSettings()
        self.console = console or Console(theme=WORDLE_THEME, highlight=False)
        self.input_stream = input_stream
        self.rng = rng
        self.ask_about_stats = ask_about_stats

        self.max_guesses = self.settings.max_guesses
        self.stats = AggregateStats()
        self.is_saveable = False
        self.player_name = ""
        self.current_round: Optional[Round] = None

    # === Output helpers ===

    def _say(self, message: str, style: str = "info"):
        self.console.print(message, style=style, markup=False, highlight=False)

    def _show_board(self):
        self.console.print(self.current_round.render_board(), highlight=False)

    def _read_line(self, prompt: str) -> str:
        """
        Show a prompt and read one line of input.

        Raises:
            EOFError: If the input stream is exhausted
        """
        self._say(prompt)
        line = self.console.input("", stream=self.input_stream)
        if self.input_stream is not None and not line:
            raise EOFError("Input stream exhausted")
        return line.strip()

    # === Setup ===

    def setup(self):
        """Welcome the player and collect session settings."""
        self._say("Welcome to Wordle!", "success")
        self._say("First, let's setup some basic settings!")

        self.max_guesses = self._ask_attempts()
        if self.ask_about_stats:
            self._ask_stats()
        else:
            self.is_saveable = False

        self.player_name = self._read_line("What should we refer to you as?")
        self._say(f"Ok {self.player_name}! Your wordle will now begin!")

    def _ask_attempts(self) -> int:
        while True:
            answer = self._read_line(
                f"How many attempts would you like per round? "
                f"(number {MIN_ATTEMPTS}-{MAX_ATTEMPTS})"
            )
            try:
                return parse_attempts(answer, default=self.settings.max_guesses)
            except ValueError as e:
                self._say(str(e), "error")

    def _ask_stats(self):
        while True:
            answer = self._read_line("Do you want to save/load your stats? (y/n)").lower()
            if answer == "y":
                self.stats = load_stats(self.settings.stats_file)
                self.is_saveable = True
                self._say("Loaded data!", "success")
                self._say(self.stats.summary(), "success")
                return
            if answer == "n":
                self._say("Your stats were not loaded, and will not save")
                self.is_saveable = False
                return

    # === Rounds ===

    def new_round(self) -> Round:
        self.current_round = Round(
            target=self.word_bank.random_target(self.rng),
            max_guesses=self.max_guesses,
            scoring_rule=self.settings.scoring_rule
        )
        return self.current_round

    def play_round(self) -> Round:
        """
        Run guesses until the current round is over, then record stats.

        Returns:
            The finished round
        """
        game_round = self.current_round
        if game_round is None or game_round.is_over():
            game_round = self.new_round()

        while not game_round.is_over():
            guess = self._read_line("Type in a guess! ").lower()
            self.handle_guess(guess)

        self.stats = self.stats.record(game_round)
        if self.is_saveable:
            self._save_stats()
        return game_round

    def _save_stats(self):
        """Save stats; on failure warn and stop saving for this session."""
        stats_path = Path(self.settings.stats_file)
        try:
            save_stats(self.stats, stats_path)
        except OSError as e:
            self._say(f"Warning: Failed to save stats to {stats_path}: {e}", "error")
            self._say("Your stats will not save for the rest of this session", "error")
            self.is_saveable = False

    def handle_guess(self, guess: str):
        """Check one guess, submit it when acceptable and show the board."""
        game_round = self.current_round

        if guess == game_round.target:
            self._say("You got the word correct!", "success")
            game_round.submit_guess(guess)
            self._show_board()
            return

        if guess in game_round.guesses:
            self._say("You have already guessed that word!", "error")
            self._show_board()
            return

        if not self.word_bank.is_valid(guess):
            self._say("Invalid word!", "error")
            self._show_board()
            return

        self._say("You didn't get the word correct :(", "error")
        is_over = game_round.submit_guess(guess)
        self._show_board()
        if is_over and game_round.state == RoundState.LOST:
            self._say("You ran out of guesses! Game over D:", "error")
            self._say(f"The word was: {game_round.target}", "error")

    def ask_replay(self) -> bool:
        """Ask whether to play again; starts a new round on yes."""
        while True:
            answer = self._read_line("Do you want to try again? (y/n)").lower()
            if answer == "y":
                self.new_round()
                self._say("Starting new game!", "success")
                self._say(self.stats.summary(), "success")
                return True
            if answer == "n":
                self._say("Thanks for playing!", "success")
                return False

    def run(self) -> AggregateStats:
        """
        Play a whole session.

        Returns:
            Stats at the end of the session
        """
        self.setup()
        self.new_round()
        while True:
            self.play_round()
            if not self.ask_replay():
                return self.stats
