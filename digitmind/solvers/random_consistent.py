"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (combinations
    still consistent with all feedback so far).

Notes:
  - Every guess it makes could be the secret, so a guess that does not win is
    removed by its own filter step and each round strictly shrinks the set.
  - Reproducible across runs with the same seed (via BaseSolver.rng).
"""

from __future__ import annotations

from typing import List

from digitmind.engine import Combination, select_random
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> Combination:
        """
        Args:
            state: dict with keys:
                - "candidates": current consistent combinations (non-empty)
                - "level":      alphabet size
                - "turn":       1-based round number

        Returns:
            One combination from the candidate set.
        """
        candidates: List[Combination] = state["candidates"]
        return select_random(candidates, self.rng)
