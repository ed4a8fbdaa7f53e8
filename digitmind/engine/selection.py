"""
Uniform random selection from a candidate set.

Selection is not security-sensitive, so the general-purpose Mersenne Twister
from `random` is enough. The module-level generator is seeded from OS entropy
when the module is imported; pass your own `random.Random(seed)` for
reproducible runs.
"""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")

_default_rng = random.Random()


def select_random(candidates: Sequence[T], rng: random.Random | None = None) -> T:
    """
    Return one element of `candidates`, each with probability 1/len(candidates).

    Raises:
      ValueError if `candidates` is empty; callers must check for a
      contradiction before asking for a guess.
    """
    if not candidates:
        raise ValueError("cannot select from an empty candidate set")
    r = rng if rng is not None else _default_rng
    return candidates[r.randrange(len(candidates))]
