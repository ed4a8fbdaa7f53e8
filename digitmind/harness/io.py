"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, summary and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Combinations and scores are prefixed with an apostrophe to keep Excel from
  reading "0123" as the number 123 or "1+2" as a formula.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from digitmind.engine import format_combination


def _excel_safe(text: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "0123" -> "'0123"
    """
    return "'" + text if text else text


def write_csv(results: List[Dict], path: str, level: int, max_turns: int | None = None) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, level, secret, success, contradiction, guesses, time_ms,
      guess_1, score_1, ..., guess_K, score_K

    K is `max_turns`, or the longest history in `results` when not given.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if max_turns is None:
        max_turns = max((len(r.get("history", [])) for r in results), default=0)

    fields = ["solver", "level", "secret", "success", "contradiction", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"score_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "level": level,
                "secret": _excel_safe(format_combination(r["secret"])),
                "success": r["success"],
                "contradiction": r.get("contradiction", False),
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, s = hist[i - 1]
                    row[f"guess_{i}"] = _excel_safe(format_combination(g))
                    row[f"score_{i}"] = _excel_safe(f"{s[0]}+{s[1]}")
                else:
                    row[f"guess_{i}"] = ""
                    row[f"score_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and batch summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, level, seed, sample, outdir)
      - summary: output of harness.stats.summarize(...)
      - num_cases: number of games in this batch
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
