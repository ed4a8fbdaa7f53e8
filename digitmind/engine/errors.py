"""
Typed errors raised by the engine.

All of them are ValueErrors: they describe a bad argument handed in by a
caller (a level, a score, a guess) and only ever end the current session,
never the process.
"""


class DigitMindError(ValueError):
    """Base class for every engine error."""


class InvalidLevelError(DigitMindError):
    """Difficulty level outside the supported alphabet sizes."""


class InvalidScoreError(DigitMindError):
    """Feedback that breaks the (exact, partial) invariants."""


class InvalidGuessError(DigitMindError):
    """A guess that is not 4 distinct in-range digits."""


class SessionStateError(DigitMindError):
    """A solver session was driven out of order."""
