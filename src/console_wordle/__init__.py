"""Console Wordle: a Wordle game for the terminal."""

__version__ = "0.1.0"
