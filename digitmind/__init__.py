"""DigitMind: a 4-digit code-breaking game and its solver engine."""

__version__ = "1.0.0"
