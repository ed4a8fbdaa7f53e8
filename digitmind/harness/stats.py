"""
Summary statistics over a batch of game results.
"""

from __future__ import annotations
from typing import Dict, List

import numpy as np


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate harness results into one flat, JSON-friendly dict.

    Guess-count statistics only cover solved games; contradictions cannot
    happen with a mechanized judge, so a non-zero count points at a bug.
    """
    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=float)
    out = {
        "games": len(results),
        "solved": int(solved.size),
        "contradictions": sum(1 for r in results if r.get("contradiction")),
        "mean_guesses": None,
        "median_guesses": None,
        "p90_guesses": None,
        "max_guesses": None,
        "mean_time_ms": float(np.mean([r["time_ms"] for r in results])) if results else None,
    }
    if solved.size:
        out.update({
            "mean_guesses": round(float(solved.mean()), 4),
            "median_guesses": float(np.median(solved)),
            "p90_guesses": float(np.percentile(solved, 90)),
            "max_guesses": int(solved.max()),
        })
    return out


def pretty_summary(summary: Dict) -> str:
    """One-line human summary, e.g. for the CLI."""
    if not summary["solved"]:
        return f"games={summary['games']} solved=0 contradictions={summary['contradictions']}"
    return (f"games={summary['games']} solved={summary['solved']} "
            f"contradictions={summary['contradictions']} | guesses: "
            f"mean={summary['mean_guesses']:.3f} median={summary['median_guesses']:g} "
            f"p90={summary['p90_guesses']:g} max={summary['max_guesses']}")
