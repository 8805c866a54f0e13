"""
Settings module for Console Wordle.

Game configuration with defaults, optionally overridden by config/settings.json.
"""

import json
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Optional

from .feedback import ScoringRule

MIN_ATTEMPTS = 3
MAX_ATTEMPTS = 20

DEFAULT_CONFIG_FILE = Path(str(files("console_wordle") / "config" / "settings.json"))

# Default settings (used if settings.json not found)
DEFAULT_SETTINGS: Dict[str, Any] = {
    "max_guesses": 6,
    "word_length": 5,
    "stats_file": "data.json",
    "word_bank_file": None,   # None = data/word_bank.txt
    "word_list_file": None,   # None = data/word_list.txt
    "scoring_rule": ScoringRule.LEFT_TO_RIGHT.value,
}

# Accepted types per key
_SETTING_TYPES = {
    "max_guesses": (int,),
    "word_length": (int,),
    "stats_file": (str,),
    "word_bank_file": (str, type(None)),
    "word_list_file": (str, type(None)),
    "scoring_rule": (str,),
}


@dataclass
class GameSettings:
    """Resolved game configuration."""
    max_guesses: int = DEFAULT_SETTINGS["max_guesses"]
    word_length: int = DEFAULT_SETTINGS["word_length"]
    stats_file: str = DEFAULT_SETTINGS["stats_file"]
    word_bank_file: Optional[str] = None
    word_list_file: Optional[str] = None
    scoring_rule: ScoringRule = ScoringRule.LEFT_TO_RIGHT


def _validate(key: str, value: Any) -> Optional[str]:
    """Return a problem description, or None if the value is usable."""
    if isinstance(value, bool) or not isinstance(value, _SETTING_TYPES[key]):
        return f"Invalid type for setting '{key}': {type(value)}"
    if key == "max_guesses" and not MIN_ATTEMPTS <= value <= MAX_ATTEMPTS:
        return f"Setting 'max_guesses' must be {MIN_ATTEMPTS}-{MAX_ATTEMPTS}, got {value}"
    if key == "word_length" and value < 1:
        return f"Setting 'word_length' must be positive, got {value}"
    if key == "scoring_rule" and value not in {r.value for r in ScoringRule}:
        return f"Unknown scoring rule: '{value}'"
    return None


def load_settings(settings_file: Optional[str | Path] = None) -> GameSettings:
    """
    Load settings from JSON file or use defaults.

    Unknown keys are ignored; invalid values fall back to the default for
    that key with a warning.

    Args:
        settings_file: Path to settings JSON file (default: config/settings.json)

    Returns:
        Resolved GameSettings
    """
    settings_path = Path(settings_file) if settings_file else DEFAULT_CONFIG_FILE
    values = DEFAULT_SETTINGS.copy()

    if not settings_path.exists():
        if settings_file is not None:
            print(f"Warning: Settings file not found: {settings_path}")
            print("Using default settings")
        return _to_settings(values)

    try:
        with open(settings_path, 'r', encoding='utf-8') as f:
            loaded = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Warning: Failed to load settings from {settings_path}: {e}")
        print("Using default settings")
        return _to_settings(values)

    if not isinstance(loaded, dict):
        print(f"Warning: Settings file must hold a JSON object: {settings_path}")
        return _to_settings(values)

    for key in DEFAULT_SETTINGS.keys():
        if key in loaded:
            problem = _validate(key, loaded[key])
            if problem:
                print(f"Warning: {problem}. Using default.")
                continue
            values[key] = loaded[key]

    return _to_settings(values)


def _to_settings(values: Dict[str, Any]) -> GameSettings:
    return GameSettings(
        max_guesses=values["max_guesses"],
        word_length=values["word_length"],
        stats_file=values["stats_file"],
        word_bank_file=values["word_bank_file"],
        word_list_file=values["word_list_file"],
        scoring_rule=ScoringRule(values["scoring_rule"]),
    )


def parse_attempts(text: str, default: int = DEFAULT_SETTINGS["max_guesses"]) -> int:
    """
    Parse the attempts-per-round answer typed by the player.

    Blank input keeps the default.

    Raises:
        ValueError: With a message suitable for showing to the player
    """
    text = text.strip()
    if not text:
        return default
    try:
        attempts = int(text)
    except ValueError:
        raise ValueError("Make sure to enter a valid number!") from None
    if not MIN_ATTEMPTS <= attempts <= MAX_ATTEMPTS:
        raise ValueError(f"Make sure to enter a number between {MIN_ATTEMPTS}-{MAX_ATTEMPTS}")
    return attempts
