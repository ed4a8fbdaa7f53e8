"""
Experiment harness core primitives.

- run_case:  let a solver break one known secret held by a mechanized Judge.
- run_batch: run many secrets in sequence (optionally a sample prefix).

These functions are UI-agnostic so they can be reused by the CLI apps,
tests, or a notebook without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Sequence

from digitmind.engine import Combination
from .judge import Judge
from .session import SessionStatus, SolverSession


def run_case(
        solver,
        secret: Sequence[int],
        *,
        level: int,
        seed: int | None = None,
        max_turns: int | None = None,
) -> Dict:
    """
    Play one game until the solver wins, hits a contradiction, or runs out of turns.

    Args:
        solver:    a BaseSolver with next_guess(state)
        secret:    the hidden combination for this case
        level:     alphabet size, 4..10
        seed:      RNG seed to make the solver's choices reproducible
        max_turns: optional cap; None means no cap (the solver always
                   finishes within the size of the combination space)

    Returns:
        dict with keys:
            secret, success, contradiction, guesses, time_ms,
            history (list[(guess, score)]), solver_id
    """
    judge = Judge(secret, level)
    session = SolverSession(level, solver, seed=seed)

    t0 = time.perf_counter()
    session.start()
    while not session.finished:
        if max_turns is not None and len(session.history) >= max_turns:
            break
        session.submit(judge.score(session.guess))
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "secret": judge.secret,
        "success": session.status == SessionStatus.SOLVED,
        "contradiction": session.status == SessionStatus.CONTRADICTION,
        "guesses": len(session.history),
        "time_ms": dt,
        "history": list(session.history),
        "solver_id": solver.id,
    }


def run_batch(
        solver,
        secrets: Iterable[Combination],
        *,
        level: int,
        seed: int | None = None,
        sample: int | None = None,
        max_turns: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, secret, level=level, seed=case_seed, max_turns=max_turns))
    return out
