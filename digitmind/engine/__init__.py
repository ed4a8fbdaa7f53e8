from .combinations import (CODE_LENGTH, DEFAULT_LEVEL, MAX_LEVEL, MIN_LEVEL, Combination,
                           format_combination, generate_all, is_valid_combination, space_size,
                           validate_level)
from .constraints import filter_candidates, filter_history
from .errors import (DigitMindError, InvalidGuessError, InvalidLevelError, InvalidScoreError,
                     SessionStateError)
from .scoring import Score, is_solved, score
from .selection import select_random
from .validation import parse_guess, validate_score

__all__ = [
    "CODE_LENGTH", "MIN_LEVEL", "MAX_LEVEL", "DEFAULT_LEVEL", "Combination",
    "generate_all", "space_size", "is_valid_combination", "validate_level", "format_combination",
    "Score", "score", "is_solved",
    "filter_candidates", "filter_history",
    "select_random",
    "validate_score", "parse_guess",
    "DigitMindError", "InvalidLevelError", "InvalidScoreError", "InvalidGuessError",
    "SessionStateError",
]
