import random

import pytest
from digitmind.engine import generate_all
from digitmind.solvers import REGISTRY, BaseSolver, create_solver, get_solver_ids, register
from digitmind.solvers import random_consistent  # registers


def test_registry_lists_random_consistent():
    assert "random_consistent" in get_solver_ids()
    assert isinstance(create_solver("random_consistent"), random_consistent.RandomConsistentSolver)


def test_unknown_solver_id():
    with pytest.raises(ValueError):
        create_solver("minimax")


def test_register_rejects_duplicates_and_missing_ids():
    with pytest.raises(ValueError):
        register(type("Dup", (BaseSolver,), {"id": "random_consistent"}))
    with pytest.raises(ValueError):
        register(type("NoId", (BaseSolver,), {"id": ""}))
    assert REGISTRY["random_consistent"] is random_consistent.RandomConsistentSolver


def test_random_consistent_picks_from_candidates():
    solver = create_solver("random_consistent")
    solver.reset(level=5, seed=17)
    candidates = generate_all(5)[10:20]
    state = {"turn": 2, "level": 5, "candidates": candidates, "history": []}
    picks = {solver.next_guess(state) for _ in range(200)}
    assert picks <= set(candidates)
    assert len(picks) > 5


def test_random_consistent_seeded():
    a, b = create_solver(), create_solver()
    a.reset(level=6, seed=99)
    b.reset(level=6, seed=99)
    state = {"turn": 1, "level": 6, "candidates": generate_all(6), "history": []}
    assert [a.next_guess(state) for _ in range(5)] == [b.next_guess(state) for _ in range(5)]
    assert isinstance(a.rng, random.Random)
