"""
Mechanized judge: holds a secret and scores guesses against it.

Both play directions use it. When the computer breaks the code, a Judge stands
in for the person holding the secret (harness runs, tests). When a person
breaks the code, Judge.random() draws the computer's secret.
"""

from __future__ import annotations

import random
from typing import Sequence

from digitmind.engine import (Combination, InvalidGuessError, Score, generate_all,
                              is_valid_combination, score, select_random, validate_level)


class Judge:
    def __init__(self, secret: Sequence[int], level: int):
        self.level = validate_level(level)
        if not is_valid_combination(secret, self.level):
            raise InvalidGuessError(f"secret {tuple(secret)!r} is not valid for level {level}")
        self._secret: Combination = tuple(secret)

    @classmethod
    def random(cls, level: int, rng: random.Random | None = None) -> "Judge":
        """Pick a secret uniformly from the whole combination space."""
        return cls(select_random(generate_all(level), rng), level)

    @property
    def secret(self) -> Combination:
        return self._secret

    def score(self, guess: Sequence[int]) -> Score:
        """Score a guess; it must be a valid combination for this level."""
        if not is_valid_combination(guess, self.level):
            raise InvalidGuessError(f"guess {tuple(guess)!r} is not valid for level {self.level}")
        return score(guess, self._secret)
