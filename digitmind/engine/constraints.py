"""
Candidate filtering given feedback.

Given:
  - a pool of combinations (the current candidate set)
  - a guess and the score the judge gave it

Return:
  - the combinations that would have produced exactly that score.

This is the step that turns feedback into a shrinking candidate set. The
input is never modified; a new list is returned, so the same call can be
repeated (it is idempotent) and the secret is never lost as long as the
score was honest.
"""

from typing import Iterable, List, Sequence, Tuple

from .combinations import Combination
from .scoring import Score, score

# History is a sequence of (guess, score) tuples in the order they were played.
History = Iterable[Tuple[Combination, Score]]


def filter_candidates(candidates: Iterable[Combination], guess: Sequence[int],
                      feedback: Sequence[int]) -> List[Combination]:
    """
    Keep only candidates c for which score(guess, c) == feedback.

    Returns:
      List of consistent candidates (order preserved). An empty list means no
      secret fits the feedback: the caller has hit a contradiction.
    """
    target = tuple(feedback)
    return [c for c in candidates if score(guess, c) == target]


def filter_history(candidates: Iterable[Combination], history: History) -> List[Combination]:
    """
    Keep only candidates consistent with ALL (guess, score) pairs in `history`.
    """
    pairs = [(g, tuple(s)) for g, s in history]
    out: List[Combination] = []

    for c in candidates:
        consistent = True
        for g, s in pairs:
            if score(g, c) != s:
                consistent = False
                break

        if consistent:
            out.append(c)

    return out
