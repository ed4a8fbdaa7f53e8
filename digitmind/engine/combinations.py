"""
Combination space for DigitMind.

A combination is an ordered tuple of CODE_LENGTH pairwise-distinct digits
drawn from {0, ..., level-1}. The difficulty `level` is the alphabet size.

generate_all(level) enumerates the whole space, which is the initial
candidate set for every solver session:

    level  4 ->   24 combinations
    level  6 ->  360
    level 10 -> 5040
"""

from __future__ import annotations

from itertools import permutations
from math import perm
from typing import List, Sequence, Tuple

from .errors import InvalidLevelError

# Single source of truth for the game's shape.
CODE_LENGTH = 4
MIN_LEVEL = 4
MAX_LEVEL = 10
DEFAULT_LEVEL = 6

Combination = Tuple[int, ...]


def validate_level(level: int) -> int:
    """Return `level` unchanged, or raise InvalidLevelError if out of range."""
    # bool is an int subclass; True/False are never a difficulty
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidLevelError(f"level must be an int, got {level!r}")
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise InvalidLevelError(
            f"level must be between {MIN_LEVEL} and {MAX_LEVEL}; got {level}")
    return level


def space_size(level: int) -> int:
    """Number of combinations for `level`: level*(level-1)*(level-2)*(level-3)."""
    return perm(validate_level(level), CODE_LENGTH)


def generate_all(level: int) -> List[Combination]:
    """
    Enumerate every combination of CODE_LENGTH distinct digits below `level`.

    Returns a new list in lexicographic order; callers own it and may filter it
    freely.
    """
    validate_level(level)
    return list(permutations(range(level), CODE_LENGTH))


def is_valid_combination(combo: Sequence[int], level: int) -> bool:
    """True if `combo` has CODE_LENGTH distinct digits, each in [0, level-1]."""
    if len(combo) != CODE_LENGTH:
        return False
    if len(set(combo)) != CODE_LENGTH:
        return False
    return all(isinstance(d, int) and 0 <= d < level for d in combo)


def format_combination(combo: Sequence[int]) -> str:
    """(0, 1, 2, 3) -> '0123'"""
    return "".join(str(d) for d in combo)
