import csv
import json
import random
from pathlib import Path

import pytest
from digitmind.engine import InvalidGuessError, generate_all
from digitmind.harness import (Judge, pretty_summary, run_batch, run_case, summarize, write_csv,
                               write_manifest)
from digitmind.harness.io import timestamp_id
from digitmind.solvers import create_solver


def test_run_case_smoke():
    solver = create_solver("random_consistent")
    r = run_case(solver, (2, 0, 5, 1), level=6, seed=42)
    assert r["success"] is True and r["contradiction"] is False
    assert r["history"][-1] == ((2, 0, 5, 1), (4, 0))
    assert r["guesses"] == len(r["history"])
    assert r["solver_id"] == "random_consistent"


def test_run_case_reproducible_with_seed():
    solver = create_solver("random_consistent")
    a = run_case(solver, (7, 3, 1, 9), level=10, seed=5)
    b = run_case(solver, (7, 3, 1, 9), level=10, seed=5)
    assert a["history"] == b["history"]


def test_run_case_turn_cap():
    solver = create_solver("random_consistent")
    r = run_case(solver, (9, 8, 7, 6), level=10, seed=1, max_turns=1)
    assert r["guesses"] == 1
    assert r["success"] == (r["history"][0][0] == (9, 8, 7, 6))


def test_run_batch_level4_all_solved():
    solver = create_solver("random_consistent")
    results = run_batch(solver, generate_all(4), level=4, seed=123)
    assert len(results) == 24
    assert all(r["success"] for r in results)
    assert max(r["guesses"] for r in results) <= 24


def test_run_batch_sample_prefix():
    solver = create_solver("random_consistent")
    results = run_batch(solver, generate_all(5), level=5, seed=1, sample=7)
    assert [r["secret"] for r in results] == generate_all(5)[:7]


def test_judge_scores_and_validates():
    j = Judge((0, 1, 2, 3), 4)
    assert j.score((3, 2, 1, 0)) == (0, 4)
    assert j.score((0, 1, 2, 3)) == (4, 0)
    with pytest.raises(InvalidGuessError):
        j.score((0, 0, 1, 2))
    with pytest.raises(InvalidGuessError):
        Judge((0, 1, 2, 7), 4)


def test_judge_random_secret_is_valid():
    j = Judge.random(8, random.Random(4))
    assert j.secret in generate_all(8)
    assert Judge.random(8, random.Random(4)).secret == j.secret


def test_summarize():
    results = [
        {"success": True, "guesses": 3, "time_ms": 1.0},
        {"success": True, "guesses": 5, "time_ms": 2.0},
        {"success": False, "contradiction": True, "guesses": 2, "time_ms": 3.0},
    ]
    s = summarize(results)
    assert s["games"] == 3 and s["solved"] == 2 and s["contradictions"] == 1
    assert s["mean_guesses"] == 4.0 and s["median_guesses"] == 4.0 and s["max_guesses"] == 5
    assert s["mean_time_ms"] == pytest.approx(2.0)
    assert "solved=2" in pretty_summary(s)


def test_summarize_empty():
    s = summarize([])
    assert s["games"] == 0 and s["mean_guesses"] is None
    assert "solved=0" in pretty_summary(s)


def test_write_csv_and_manifest(tmp_path: Path):
    solver = create_solver("random_consistent")
    results = run_batch(solver, generate_all(4), level=4, seed=9, sample=5)
    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"), level=4)

    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 5
    assert rows[0]["secret"] == "'0123"
    longest = max(r["guesses"] for r in results)
    assert f"guess_{longest}" in rows[0] and f"guess_{longest + 1}" not in rows[0]
    last = results[0]["guesses"]
    assert rows[0][f"score_{last}"] == "'4+0"

    m = write_manifest({"run_id": timestamp_id(), "summary": summarize(results)},
                       str(tmp_path / "out" / "m.json"))
    data = json.loads(Path(m).read_text(encoding="utf-8"))
    assert data["summary"]["solved"] == 5
    assert data["run_id"].endswith("Z")
