# apps/cli/play.py
"""
Interactive DigitMind game on the console.

Two modes, picked from a menu until the player quits:
  1) the computer guesses the player's secret combination; the player scores
     each guess (digits in the right position, right digits in the wrong one)
  2) the player guesses a combination the computer has picked

Console I/O goes through `input_fn` / `output` so the whole game can be
scripted from tests. All game logic lives in digitmind.*; this module only
prompts, parses, and prints.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Callable, Optional

from digitmind.engine import (CODE_LENGTH, MAX_LEVEL, MIN_LEVEL, DigitMindError,
                              format_combination, parse_guess)
from digitmind.harness import Judge, SessionStatus, SolverSession
from digitmind.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

QUIT, COMPUTER_GUESSES, HUMAN_GUESSES = 0, 1, 2

MENU = (
    "\nChoose game mode:\n"
    f"{QUIT}. Quit\n"
    f"{COMPUTER_GUESSES}. Computer guesses your combination\n"
    f"{HUMAN_GUESSES}. You guess the combination the computer has selected\n"
)


def _read_int(input_fn: InputFn, prompt: str) -> Optional[int]:
    """Prompt once; None if the answer is not an integer."""
    raw = input_fn(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        return None


def choose_mode(input_fn: InputFn, output: OutputFn) -> int:
    """Show the menu until a listed option is picked."""
    while True:
        output(MENU)
        choice = _read_int(input_fn, "Enter the number of your chosen option: ")
        if choice in (QUIT, COMPUTER_GUESSES, HUMAN_GUESSES):
            return choice
        output("Unknown option.")


def get_difficulty_level(input_fn: InputFn, output: OutputFn) -> int:
    """Ask for the alphabet size until it is within [MIN_LEVEL, MAX_LEVEL]."""
    level = _read_int(input_fn,
                      f"Please enter the difficulty level (from {MIN_LEVEL} to {MAX_LEVEL}): ")
    while level is None or not MIN_LEVEL <= level <= MAX_LEVEL:
        output(f"Invalid input. Please enter a number between {MIN_LEVEL} and {MAX_LEVEL}.")
        level = _read_int(input_fn, "Difficulty level: ")
    return level


def _ask_score(input_fn: InputFn):
    """
    Ask for the feedback on the current guess. The partial count is only
    asked when the guess is not already a win. Returns an (exact, partial)
    pair, or None when something other than integers was typed.
    """
    exact = _read_int(input_fn, "Enter number of digits in the correct position: ")
    if exact is None:
        return None
    if exact == CODE_LENGTH:
        return exact, 0
    partial = _read_int(input_fn, "Enter number of correct digits in the wrong position: ")
    if partial is None:
        return None
    return exact, partial


def computer_player(level: int, input_fn: InputFn, output: OutputFn, *,
                    solver_id: str = DEFAULT_SOLVER, seed: int | None = None) -> SessionStatus:
    """
    The computer breaks the player's code. Returns SOLVED or CONTRADICTION.
    """
    session = SolverSession(level, create_solver(solver_id), seed=seed)
    session.start()

    while not session.finished:
        output(f"Computer's guess: {format_combination(session.guess)}")
        while True:
            feedback = _ask_score(input_fn)
            if feedback is None:
                output("Please enter whole numbers.")
                continue
            try:
                session.submit(feedback)
            except DigitMindError as e:
                output(f"Invalid score: {e}")
                continue
            break

    if session.status == SessionStatus.CONTRADICTION:
        output("Input error detected, restarting game...")
    else:
        output(f"The computer has guessed your combination in {len(session.history)} guesses!")
    return session.status


def human_player(level: int, input_fn: InputFn, output: OutputFn, *,
                 rng: random.Random | None = None) -> int:
    """
    The player breaks the computer's code. Returns the number of scored guesses.
    """
    judge = Judge.random(level, rng)
    attempts = 0

    while True:
        text = input_fn(f"Enter your guess ({CODE_LENGTH} distinct digits between 0 and {level - 1}): ")
        try:
            guess = parse_guess(text, level)
        except DigitMindError as e:
            output(f"Invalid guess: {e}")
            continue

        attempts += 1
        s = judge.score(guess)
        output(f"Digits in the right position: {s.exact}")
        output(f"Correct digits in wrong position: {s.partial}")
        if s.exact == CODE_LENGTH:
            output(f"Congratulations, you have guessed the combination in {attempts} guesses!")
            return attempts


def play(input_fn: InputFn = input, output: OutputFn = print, *,
         solver_id: str = DEFAULT_SOLVER, seed: int | None = None) -> None:
    """Menu loop: play games until the player picks Quit."""
    rng = random.Random(seed)
    output("-- Welcome to DigitMind --")
    while True:
        choice = choose_mode(input_fn, output)
        if choice == QUIT:
            return

        level = get_difficulty_level(input_fn, output)
        if choice == COMPUTER_GUESSES:
            computer_player(level, input_fn, output, solver_id=solver_id,
                            seed=None if seed is None else rng.randrange(2 ** 31))
        else:
            human_player(level, input_fn, output, rng=rng)


def main(argv=None):
    ap = argparse.ArgumentParser(description="DigitMind — guess the 4-digit combination")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--seed", type=int, help="RNG seed (default: OS entropy)")
    ap.add_argument("-v", "--verbose", action="store_true", help="log solver progress to stderr")
    args = ap.parse_args(argv)

    if args.solver not in get_solver_ids():
        ap.error(f"unknown solver id: {args.solver}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        play(solver_id=args.solver, seed=args.seed)
    except (EOFError, KeyboardInterrupt):
        print("\nExiting.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
