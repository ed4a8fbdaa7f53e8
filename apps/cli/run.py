# apps/cli/run.py
"""
CLI entry point for running DigitMind solver experiments.

This script:
  1) Builds the combination space for the requested level.
  2) Instantiates the requested solver and picks the secrets to play
     (all of them, or a seeded sample).
  3) Runs the batch with a live progress indicator and writes:
       - CSV:  per-case results + guess/score history columns
       - JSON: manifest with config, summary statistics, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from digitmind.engine import DEFAULT_LEVEL, MAX_LEVEL, MIN_LEVEL, generate_all
from digitmind.harness import run_case
from digitmind.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from digitmind.harness.stats import summarize, pretty_summary
from digitmind.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids


def main(argv=None):
    """
    Parse CLI args, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="DigitMind — run solver experiments")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--level", type=int, default=DEFAULT_LEVEL,
                    help=f"alphabet size ({MIN_LEVEL}..{MAX_LEVEL})")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="log every solver turn")
    args = ap.parse_args(argv)

    if args.solver not in get_solver_ids():
        ap.error(f"unknown solver id: {args.solver}. Registered: {solver_choices}")
    if not MIN_LEVEL <= args.level <= MAX_LEVEL:
        ap.error(f"--level must be between {MIN_LEVEL} and {MAX_LEVEL}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1) Whole combination space; every secret is a possible case
    secrets = generate_all(args.level)
    print(f"level={args.level} combinations={len(secrets)} solver={args.solver}")

    # 2) Instantiate solver by id
    solver = create_solver(args.solver)

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(secrets):
        cases = rng.sample(secrets, args.sample)
    else:
        cases = list(secrets)

    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 5) Run batch with live progress
    for idx, secret in enumerate(iterator, 1):
        # Derive a per-game seed so runs are reproducible and independent
        per_seed = args.seed + idx * 1013904223
        results.append(run_case(solver, secret, level=args.level, seed=per_seed))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results)
    print(pretty_summary(summary))

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), level=args.level)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
