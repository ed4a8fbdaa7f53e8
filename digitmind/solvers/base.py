from __future__ import annotations
import random
from typing import Dict, Type

from digitmind.engine import DEFAULT_LEVEL, Combination

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.level: int = DEFAULT_LEVEL
        # Unseeded: the interpreter seeds it from OS entropy.
        self.rng = random.Random()

    def reset(self, *, level: int, seed: int | None = None) -> None:
        self.level = int(level)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> Combination:
        """
        Pick the next guess. `state["candidates"]` is never empty here; the
        session stops on a contradiction before asking.
        """
        raise NotImplementedError("Override in subclass")
