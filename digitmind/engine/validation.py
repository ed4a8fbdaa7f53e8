"""
Validation of values that come from outside the engine.

This module answers "is this value acceptable?" for the three things a
player or judge hands in:
  - a difficulty level        (see combinations.validate_level)
  - a score for the last guess
  - a typed guess, e.g. "0213"

Each check raises a typed DigitMindError subclass so callers can re-prompt
or abort the session without catching unrelated errors.
"""

from __future__ import annotations

from typing import Sequence

from .combinations import CODE_LENGTH, Combination, validate_level
from .errors import InvalidGuessError, InvalidScoreError
from .scoring import Score


def validate_score(feedback: Sequence[int]) -> Score:
    """
    Return `feedback` as a Score, or raise InvalidScoreError.

    A score is valid iff both parts are non-negative ints, exact <= 4 and
    exact + partial <= 4.
    """
    if len(feedback) != 2:
        raise InvalidScoreError(f"score must be an (exact, partial) pair; got {feedback!r}")
    exact, partial = feedback
    for name, v in (("exact", exact), ("partial", partial)):
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidScoreError(f"{name} must be an int; got {v!r}")
        if v < 0:
            raise InvalidScoreError(f"{name} must be non-negative; got {v}")
    if exact > CODE_LENGTH:
        raise InvalidScoreError(f"exact must be at most {CODE_LENGTH}; got {exact}")
    if exact + partial > CODE_LENGTH:
        raise InvalidScoreError(
            f"exact + partial must be at most {CODE_LENGTH}; got {exact} + {partial}")
    return Score(exact, partial)


def parse_guess(text: str, level: int) -> Combination:
    """
    Turn a typed guess like "0213" into a combination for `level`.

    Whitespace and separators between digits ("0 2 1 3", "0,2,1,3") are
    accepted. Raises InvalidGuessError on anything that is not exactly
    CODE_LENGTH distinct digits in [0, level-1].
    """
    validate_level(level)
    digits = [ch for ch in text if not ch.isspace() and ch not in ",-"]
    if len(digits) != CODE_LENGTH or not all(ch in "0123456789" for ch in digits):
        raise InvalidGuessError(
            f"enter {CODE_LENGTH} digits between 0 and {level - 1}; got {text.strip()!r}")
    combo = tuple(int(ch) for ch in digits)
    if len(set(combo)) != CODE_LENGTH:
        raise InvalidGuessError(f"digits must be distinct; got {text.strip()!r}")
    if any(d >= level for d in combo):
        raise InvalidGuessError(f"digits must be between 0 and {level - 1}; got {text.strip()!r}")
    return combo
