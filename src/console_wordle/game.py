"""
Game module for Console Wordle.

Round state machine: guess acceptance, termination and board rendering.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from .feedback import LetterFeedback, ScoringRule, score


# Board glyphs
TOP_BORDER = "▁"
BOTTOM_BORDER = "▔"
FILLER = "@"


class RoundState(Enum):
    """Round lifecycle states (WON and LOST are terminal)"""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass
class Round:
    """
    One play-through with a single target word and a fixed guess budget.

    Validity checks (dictionary membership, "already guessed") belong to the
    caller and happen before submit_guess. Submitting after the round is
    over is a caller error and is not checked here.
    """
    target: str
    max_guesses: int = 6
    scoring_rule: ScoringRule = ScoringRule.LEFT_TO_RIGHT
    _guesses: List[str] = field(default_factory=list, init=False, repr=False)
    state: RoundState = field(default=RoundState.IN_PROGRESS, init=False)

    def __post_init__(self):
        """Validate input"""
        if not self.target:
            raise ValueError("Target word must not be empty")
        if self.max_guesses < 1:
            raise ValueError(f"max_guesses must be at least 1, got {self.max_guesses}")
        self.target = self.target.lower()

    @property
    def guesses(self) -> Tuple[str, ...]:
        """Submitted guesses, in submission order."""
        return tuple(self._guesses)

    @property
    def guess_count(self) -> int:
        return len(self._guesses)

    @property
    def word_length(self) -> int:
        return len(self.target)

    def submit_guess(self, word: str) -> bool:
        """
        Record a guess and advance the state.

        Args:
            word: Guess of the same length as the target

        Returns:
            True if the round just ended (WON or LOST), False otherwise
        """
        word = word.lower()
        self._guesses.append(word)
        self.state = self._next_state(word)
        return self.is_over()

    def _next_state(self, word: str) -> RoundState:
        if word == self.target:
            return RoundState.WON
        if self.guess_count >= self.max_guesses:
            return RoundState.LOST
        return RoundState.IN_PROGRESS

    def is_over(self) -> bool:
        return self.state != RoundState.IN_PROGRESS

    def score_guess(self, word: str) -> List[LetterFeedback]:
        """Score a word against this round's target."""
        return score(self.target, word.lower(), self.scoring_rule)

    def render_board(self) -> str:
        """
        Render the guess history as a fixed-height board.

        One row per guess slot. Played rows tag each letter with its
        feedback as console markup, e.g. "[exact]c[/exact]"; unplayed rows
        are filler glyphs. Top and bottom border lines frame the rows.

        Returns:
            Board text, rows separated by newlines
        """
        rows = [TOP_BORDER * self.word_length]
        for slot in range(self.max_guesses):
            if slot < self.guess_count:
                rows.append(self._render_row(self._guesses[slot]))
            else:
                rows.append(FILLER * self.word_length)
        rows.append(BOTTOM_BORDER * self.word_length)
        return "\n".join(rows)

    def _render_row(self, word: str) -> str:
        cells = []
        for letter, fb in zip(word, self.score_guess(word)):
            cells.append(f"[{fb.value}]{letter}[/{fb.value}]")
        return "".join(cells)
