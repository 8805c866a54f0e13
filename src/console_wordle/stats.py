"""
Stats module for Console Wordle.

Aggregate attempts/wins/losses/winstreak across rounds, persisted as JSON.
Stats are an immutable value: record() returns a new AggregateStats.
"""

import json
from dataclasses import dataclass, asdict, replace
from pathlib import Path
from typing import Dict

from .game import Round, RoundState

DEFAULT_STATS_FILE = "data.json"

# JSON keys used in the stats file
STATS_KEYS = {
    "attempts": "current_attempts",
    "wins": "current_wins",
    "losses": "current_losses",
    "winstreak": "current_winstreak",
}


@dataclass(frozen=True)
class AggregateStats:
    """Counters carried across rounds."""
    attempts: int = 0
    wins: int = 0
    losses: int = 0
    winstreak: int = 0

    def record(self, game_round: Round) -> "AggregateStats":
        """
        Fold a finished round into the counters.

        - WON: attempts +1, wins +1, winstreak +1
        - LOST: attempts +1, losses +1, winstreak reset to 0
        - Round still in progress: unchanged

        Args:
            game_round: Round whose outcome should be counted

        Returns:
            Updated stats (self is not modified)
        """
        if game_round.state == RoundState.WON:
            return replace(
                self,
                attempts=self.attempts + 1,
                wins=self.wins + 1,
                winstreak=self.winstreak + 1
            )
        if game_round.state == RoundState.LOST:
            return replace(
                self,
                attempts=self.attempts + 1,
                losses=self.losses + 1,
                winstreak=0
            )
        return self

    def to_dict(self) -> Dict[str, int]:
        return {STATS_KEYS[name]: value for name, value in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> "AggregateStats":
        """
        Build stats from the JSON record.

        Raises:
            ValueError: If a counter is missing or not an integer
        """
        values = {}
        for name, key in STATS_KEYS.items():
            value = data.get(key)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Invalid value for '{key}': {value!r}")
            values[name] = value
        return cls(**values)

    def summary(self) -> str:
        return (
            "Current game stats:\n"
            f"Attempts: {self.attempts}\n"
            f"Wins: {self.wins}\n"
            f"Losses: {self.losses}\n"
            f"Winstreak: {self.winstreak}"
        )


def save_stats(stats: AggregateStats, path: str | Path = DEFAULT_STATS_FILE) -> None:
    """Write stats to a JSON file."""
    with open(Path(path), 'w', encoding='utf-8') as f:
        json.dump(stats.to_dict(), f)


def load_stats(path: str | Path = DEFAULT_STATS_FILE) -> AggregateStats:
    """
    Load stats from a JSON file.

    A missing file is created with zeroed counters. A malformed or
    unreadable file is reported and treated as zeroed counters (left
    untouched until the next save).

    Args:
        path: Stats file location

    Returns:
        Loaded stats
    """
    stats_path = Path(path)
    if not stats_path.exists():
        stats = AggregateStats()
        try:
            save_stats(stats, stats_path)
        except OSError as e:
            print(f"Warning: Failed to create stats file {stats_path}: {e}")
        return stats

    try:
        with open(stats_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        return AggregateStats.from_dict(data)
    except (OSError, ValueError) as e:  # JSONDecodeError included
        print(f"Warning: Failed to load stats from {stats_path}: {e}")
        print("Starting from empty stats")
        return AggregateStats()
