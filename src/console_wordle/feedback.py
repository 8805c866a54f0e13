"""
Feedback module for Console Wordle.

Scores a guess against the target word, one classification per letter.
Critical: Duplicate letters are counted left to right.
"""

from collections import Counter
from enum import Enum
from typing import Dict, List


class LetterFeedback(Enum):
    """Per-letter classification of a scored guess"""
    EXACT = "exact"
    PRESENT = "present"
    ABSENT = "absent"


class ScoringRule(Enum):
    """Duplicate-letter rule used when scoring"""
    LEFT_TO_RIGHT = "left_to_right"
    STANDARD = "standard"


def score(
    target: str,
    guess: str,
    rule: ScoringRule = ScoringRule.LEFT_TO_RIGHT
) -> List[LetterFeedback]:
    """
    Score a guess against the target word.

    Both words must have the same length. No dictionary check is done here.

    Args:
        target: Secret word of the round
        guess: Guessed word, same length as target
        rule: Duplicate-letter rule (default: LEFT_TO_RIGHT)

    Returns:
        One LetterFeedback per letter of the guess, in order
    """
    if rule == ScoringRule.STANDARD:
        return _score_standard(target, guess)
    return _score_left_to_right(target, guess)


def _score_left_to_right(target: str, guess: str) -> List[LetterFeedback]:
    """
    Single left-to-right pass.

    For a letter that is in the target but not at this position:
    - guess uses it no more often than the target -> PRESENT
    - otherwise excess = guess count - target count, and only occurrences
      with fewer than `excess` earlier copies in the guess are PRESENT

    Example: target "crane", guess "eerie"
    - 'e' at 4 is EXACT
    - excess of 'e' is 2, so the 'e' at 0 and 1 are both PRESENT
    """
    target_counts = Counter(target)
    guess_counts = Counter(guess)
    seen: Dict[str, int] = {}
    result = []

    for pos, letter in enumerate(guess):
        prior_count = seen.get(letter, 0)
        seen[letter] = prior_count + 1

        if letter == target[pos]:
            result.append(LetterFeedback.EXACT)
        elif target_counts[letter] == 0:
            result.append(LetterFeedback.ABSENT)
        elif guess_counts[letter] <= target_counts[letter]:
            result.append(LetterFeedback.PRESENT)
        else:
            excess = guess_counts[letter] - target_counts[letter]
            if prior_count < excess:
                result.append(LetterFeedback.PRESENT)
            else:
                result.append(LetterFeedback.ABSENT)

    return result


def _score_standard(target: str, guess: str) -> List[LetterFeedback]:
    """
    Two-pass rule.

    1. Mark all exact matches and count the target letters left unmatched
    2. Left to right, a non-exact letter is PRESENT while unmatched copies
       of it remain in the target, ABSENT afterwards
    """
    result = [LetterFeedback.ABSENT] * len(guess)
    remaining: Counter = Counter()

    for pos, (letter, expected) in enumerate(zip(guess, target)):
        if letter == expected:
            result[pos] = LetterFeedback.EXACT
        else:
            remaining[expected] += 1

    for pos, letter in enumerate(guess):
        if result[pos] == LetterFeedback.EXACT:
            continue
        if remaining[letter] > 0:
            result[pos] = LetterFeedback.PRESENT
            remaining[letter] -= 1

    return result


if __name__ == "__main__":
    print("=== Test 1: CRANE vs CRANE ===")
    print([fb.value for fb in score("crane", "crane")])

    print("\n=== Test 2: SPEED vs ERASE ===")
    print([fb.value for fb in score("speed", "erase")])
    print("Expected: present, absent, absent, present, present")

    print("\n=== Test 3: Rules disagree on CRANE vs EERIE ===")
    for rule in ScoringRule:
        print(f"{rule.value}: {[fb.value for fb in score('crane', 'eerie', rule)]}")
