import pytest
from digitmind.engine import (InvalidScoreError, SessionStateError, generate_all, score,
                              space_size)
from digitmind.harness import Judge, SessionStatus, SolverSession
from digitmind.solvers import BaseSolver, create_solver


class FirstCandidateSolver(BaseSolver):
    """Deterministic strategy for tests: always the first remaining candidate."""
    id = "first_candidate"

    def next_guess(self, state: dict):
        return state["candidates"][0]


def _play(session: SolverSession, secret):
    judge = Judge(secret, session.level)
    session.start()
    sizes = [len(session.candidates)]
    while not session.finished:
        assert secret in session.candidates
        session.submit(judge.score(session.guess))
        sizes.append(len(session.candidates))
    return sizes


def test_initial_state():
    s = SolverSession(5, seed=1)
    assert s.status == SessionStatus.INIT
    assert s.turn == 0 and s.guess is None
    assert len(s.candidates) == s.initial_count == space_size(5)


def test_start_emits_candidate_guess():
    s = SolverSession(6, seed=1)
    g = s.start()
    assert g == s.guess and g in s.candidates
    assert s.status == SessionStatus.AWAITING_FEEDBACK
    assert s.turn == 1


def test_wrong_state_calls_raise():
    s = SolverSession(4, seed=1)
    with pytest.raises(SessionStateError):
        s.submit((0, 4))
    s.start()
    with pytest.raises(SessionStateError):
        s.start()
    s.submit((4, 0))
    assert s.status == SessionStatus.SOLVED
    with pytest.raises(SessionStateError):
        s.submit((4, 0))


def test_invalid_score_leaves_session_unchanged():
    s = SolverSession(6, seed=2)
    g = s.start()
    with pytest.raises(InvalidScoreError):
        s.submit((3, 2))
    assert s.guess == g and s.history == []
    assert s.status == SessionStatus.AWAITING_FEEDBACK


def test_exact_four_solves_immediately():
    s = SolverSession(10, seed=3)
    g = s.start()
    assert s.submit((4, 0)) == SessionStatus.SOLVED
    assert s.history == [(g, (4, 0))]
    assert s.finished


def test_contradiction_when_feedback_is_impossible():
    s = SolverSession(4, seed=4)
    s.start()
    # level 4: every combination contains all digits, so exact + partial must be 4
    assert s.submit((1, 2)) == SessionStatus.CONTRADICTION
    assert s.finished
    with pytest.raises(SessionStateError):
        s.submit((0, 4))


def test_contradiction_from_inconsistent_history():
    s = SolverSession(6, solver=FirstCandidateSolver())
    assert s.start() == (0, 1, 2, 3)
    s.submit((0, 0))  # without 0..3 only digits 4 and 5 remain
    assert s.status == SessionStatus.CONTRADICTION


def test_solved_on_first_round_the_secret_is_tried():
    # The first guess is (0, 1, 2, 3), which is the secret.
    s = SolverSession(4, solver=FirstCandidateSolver())
    _play(s, (0, 1, 2, 3))
    assert s.status == SessionStatus.SOLVED
    assert len(s.history) == 1


def test_guess_not_winning_is_removed():
    s = SolverSession(7, seed=5)
    judge = Judge((6, 2, 4, 0), 7)
    g = s.start()
    s.submit(judge.score(g))
    if s.status == SessionStatus.AWAITING_FEEDBACK:
        assert g not in s.candidates
        assert s.guess != g


@pytest.mark.parametrize("level", range(4, 11))
def test_convergence_every_level(level):
    combos = generate_all(level)
    for secret in (combos[0], combos[len(combos) // 2], combos[-1]):
        s = SolverSession(level, create_solver("random_consistent"), seed=level)
        sizes = _play(s, secret)
        assert s.status == SessionStatus.SOLVED
        assert s.history[-1][0] == secret
        assert len(s.history) <= s.initial_count
        # strictly shrinking on every round before the winning one
        assert all(b < a for a, b in zip(sizes[:-1], sizes[1:-1]))


def test_history_scores_match_secret():
    secret = (1, 4, 3, 0)
    s = SolverSession(5, seed=9)
    _play(s, secret)
    for g, sc in s.history:
        assert score(g, secret) == sc
