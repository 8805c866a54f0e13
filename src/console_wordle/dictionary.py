"""
Dictionary module for Console Wordle.

Loads the target word bank and the accepted-guess list from data/.
"""

import random
from importlib.resources import files
from pathlib import Path
from typing import Iterable, List, Optional, Set

DATA_DIR = Path(str(files("console_wordle") / "data"))
DEFAULT_WORD_BANK = DATA_DIR / "word_bank.txt"
DEFAULT_WORD_LIST = DATA_DIR / "word_list.txt"


def load_dictionary(filepath: str | Path, word_length: int = 5) -> List[str]:
    """
    Load and clean a word list file.

    Cleaning steps:
    1. Strip whitespace
    2. Convert to lowercase
    3. Filter: length == word_length and all alphabetic
    4. Remove duplicates
    5. Sort alphabetically

    Args:
        filepath: Path to the word list file (one word per line)
        word_length: Required word length

    Returns:
        List of cleaned, deduplicated, sorted words

    Raises:
        FileNotFoundError: If the word list file doesn't exist
        ValueError: If no valid words found after cleaning
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Word list file not found: {filepath}")

    words: Set[str] = set()

    with open(filepath, 'r', encoding='utf-8') as f:
        for line in f:
            word = line.strip().lower()

            if len(word) == word_length and word.isalpha():
                words.add(word)

    if not words:
        raise ValueError(f"No valid {word_length}-letter words found in {filepath}")

    return sorted(words)


def get_word_list(custom_path: str | Path | None = None, word_length: int = 5) -> List[str]:
    """
    Get the accepted-guess list, using custom path or default location.

    Args:
        custom_path: Optional custom path to word list file.
                     If None, uses data/word_list.txt.
        word_length: Required word length

    Returns:
        List of cleaned, sorted words
    """
    if custom_path:
        return load_dictionary(custom_path, word_length)
    return load_dictionary(DEFAULT_WORD_LIST, word_length)


class WordBank:
    """
    Target words plus the words accepted as guesses.

    Every target is also an accepted guess.
    """

    def __init__(self, targets: Iterable[str], accepted: Iterable[str] = ()):
        self.targets = sorted({w.lower() for w in targets})
        if not self.targets:
            raise ValueError("Word bank needs at least one target word")
        self.accepted = {w.lower() for w in accepted} | set(self.targets)
        self.word_length = len(self.targets[0])

    @classmethod
    def from_files(
        cls,
        bank_path: str | Path | None = None,
        list_path: str | Path | None = None,
        word_length: int = 5
    ) -> "WordBank":
        """
        Load a word bank from the target and accepted-guess files.

        Args:
            bank_path: Target words file (default: data/word_bank.txt)
            list_path: Accepted guesses file (default: data/word_list.txt)
            word_length: Required word length
        """
        targets = load_dictionary(bank_path or DEFAULT_WORD_BANK, word_length)
        accepted = get_word_list(list_path, word_length)
        return cls(targets, accepted)

    def random_target(self, rng: Optional[random.Random] = None) -> str:
        """Pick a target word at random."""
        return (rng or random).choice(self.targets)

    def is_valid(self, word: str) -> bool:
        """Check if a word is an acceptable guess."""
        word = word.strip().lower()
        return len(word) == self.word_length and word in self.accepted

    def __len__(self) -> int:
        return len(self.targets)

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)


if __name__ == "__main__":
    bank = WordBank.from_files()
    print(f"Loaded {len(bank)} targets, {len(bank.accepted)} accepted guesses")
    print(f"Random target: {bank.random_target()}")
