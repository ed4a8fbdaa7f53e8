"""
Feedback scoring for a single (guess, reference) pair.

Conventions:
  - exact   : digit of the guess sits in the same position in the reference
  - partial : digit of the guess appears in the reference, but elsewhere

Both combinations must already hold pairwise-distinct digits. Under that
precondition each reference digit can back at most one partial match, so no
multiplicity bookkeeping is needed. The precondition is not re-checked here;
duplicate-digit inputs give undefined scores.
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

from .combinations import CODE_LENGTH


class Score(NamedTuple):
    exact: int
    partial: int

    def __str__(self) -> str:
        return f"{self.exact}+{self.partial}"


def score(guess: Sequence[int], reference: Sequence[int]) -> Score:
    """
    Compute the (exact, partial) feedback for `guess` against `reference`.

    Examples:
      score((0, 1, 2, 3), (0, 1, 2, 3)) -> Score(exact=4, partial=0)
      score((3, 2, 1, 0), (0, 1, 2, 3)) -> Score(exact=0, partial=4)
      score((0, 1, 4, 5), (0, 2, 1, 3)) -> Score(exact=1, partial=1)
    """
    exact = 0
    partial = 0
    for g, r in zip(guess, reference):
        if g == r:
            exact += 1
        elif g in reference:
            partial += 1
    return Score(exact, partial)


def is_solved(s: Sequence[int]) -> bool:
    """True when every position matched."""
    return s[0] == CODE_LENGTH
