"""keysmith -- client-side password generation.

Generates passwords from a character-class policy (optionally built from
pronounceable syllables), verifies that every requested class is present,
and scores the result with a distinct-character entropy heuristic.
"""

from .charsets import CHARACTER_SETS, COMMON_SUBSTITUTIONS
from .config import DEFAULT_CONFIG, MAX_UI_LENGTH, MIN_UI_LENGTH, GenerationConfig
from .engine import PasswordEngine, default_engine, generate_password
from .entropy import EntropySource
from .results import EmptyCharset, GeneratedPassword, GenerationFailed, GenerationOutcome
from .strength import (
    crack_time,
    entropy_bits,
    length_label,
    score_strength,
    strength_label,
    strength_score,
)

__version__ = "0.1.0"

__all__ = [
    "CHARACTER_SETS",
    "COMMON_SUBSTITUTIONS",
    "DEFAULT_CONFIG",
    "MAX_UI_LENGTH",
    "MIN_UI_LENGTH",
    "EmptyCharset",
    "EntropySource",
    "GeneratedPassword",
    "GenerationConfig",
    "GenerationFailed",
    "GenerationOutcome",
    "PasswordEngine",
    "crack_time",
    "default_engine",
    "entropy_bits",
    "generate_password",
    "length_label",
    "score_strength",
    "strength_label",
    "strength_score",
]
