"""
Solver session: the guess-out / score-in loop for one secret.

States:

    INIT --start()--> AWAITING_FEEDBACK --submit(score)--+--> SOLVED
                            ^                            |
                            +------- (filter, guess) ----+--> CONTRADICTION

The session never talks to a terminal. Whoever holds the secret (a person at
the console, a mechanized Judge, a test) reads `guess` after start()/submit()
and answers with submit(score). The candidate set only ever shrinks; if it
empties, the feedback history was inconsistent and the session ends in
CONTRADICTION so the caller can start over with a fresh session.
"""

from __future__ import annotations

import enum
import logging
from typing import List, Optional, Sequence, Tuple

from digitmind.engine import (Combination, Score, SessionStateError, filter_candidates,
                              format_combination, generate_all, is_solved, validate_level,
                              validate_score)
from digitmind.solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)


class SessionStatus(str, enum.Enum):
    INIT = "init"
    AWAITING_FEEDBACK = "awaiting_feedback"
    SOLVED = "solved"
    CONTRADICTION = "contradiction"

    @property
    def finished(self) -> bool:
        return self in (SessionStatus.SOLVED, SessionStatus.CONTRADICTION)


class SolverSession:
    """
    Drive one solver against one (hidden) secret.

    Args:
        level:  alphabet size, 4..10
        solver: guess-selection strategy; defaults to random_consistent
        seed:   RNG seed for the solver, None for OS entropy
    """

    def __init__(self, level: int, solver: Optional[BaseSolver] = None, *,
                 seed: int | None = None):
        self.level = validate_level(level)
        self.solver = solver if solver is not None else create_solver()
        self.solver.reset(level=self.level, seed=seed)

        self.candidates: List[Combination] = generate_all(self.level)
        self.initial_count = len(self.candidates)
        self.history: List[Tuple[Combination, Score]] = []
        self.guess: Optional[Combination] = None
        self.status = SessionStatus.INIT

    @property
    def turn(self) -> int:
        """1-based round of the current guess (0 before start())."""
        return len(self.history) + (1 if self.status == SessionStatus.AWAITING_FEEDBACK else 0)

    @property
    def finished(self) -> bool:
        return self.status.finished

    def start(self) -> Combination:
        """Pick the first guess from the full combination space."""
        if self.status != SessionStatus.INIT:
            raise SessionStateError(f"start() called in state {self.status.value}")
        log.debug("session start: level=%d, %d candidates", self.level, self.initial_count)
        return self._next_guess()

    def submit(self, feedback: Sequence[int]) -> SessionStatus:
        """
        Feed back the judge's (exact, partial) score for the current guess.

        Returns the new status. When it is AWAITING_FEEDBACK, `guess` holds the
        next guess to show the judge.

        Raises:
            InvalidScoreError: `feedback` breaks the score invariants; the
                session is left unchanged so the caller can re-ask.
            SessionStateError: no guess is outstanding.
        """
        if self.status != SessionStatus.AWAITING_FEEDBACK:
            raise SessionStateError(f"submit() called in state {self.status.value}")
        s = validate_score(feedback)
        assert self.guess is not None
        self.history.append((self.guess, s))

        if is_solved(s):
            self.status = SessionStatus.SOLVED
            log.debug("solved %s in %d guesses", format_combination(self.guess), len(self.history))
            return self.status

        remaining = filter_candidates(self.candidates, self.guess, s)
        log.debug("turn %d: %s scored %s, %d -> %d candidates", len(self.history),
                  format_combination(self.guess), s, len(self.candidates), len(remaining))

        if not remaining:
            self.status = SessionStatus.CONTRADICTION
            log.debug("no candidate fits the feedback history; session aborted")
            return self.status

        self.candidates = remaining
        self._next_guess()
        return self.status

    def _next_guess(self) -> Combination:
        state = {
            "turn": len(self.history) + 1,
            "level": self.level,
            "candidates": self.candidates,
            "history": list(self.history),
        }
        self.guess = tuple(self.solver.next_guess(state))
        self.status = SessionStatus.AWAITING_FEEDBACK
        return self.guess
