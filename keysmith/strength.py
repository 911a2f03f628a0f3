"""Strength and entropy scoring.

All figures here are heuristics computed from the *realised* string:
``length * log2(distinct characters)``.  This is not the information
content of the generation process, and the crack-time buckets are a rough
illustration, not a calibrated cryptanalytic estimate.
"""

import math

from .charsets import char_classes

# Ceiling the strength score is normalised against.
MAX_ENTROPY_BITS = 256

_STRENGTH_LABELS = [(40, "Weak"), (70, "Good"), (90, "Strong")]
_LENGTH_LABELS = [(12, "Weak"), (16, "Good")]
_CRACK_TIMES = [(40, "seconds"), (60, "minutes"), (80, "hours"), (100, "years")]


def _shannon_bits(length: int, distinct: int) -> float:
    if length <= 0 or distinct <= 1:
        return 0.0
    return length * math.log2(distinct)


def entropy_bits(password: str) -> int:
    """Return ``floor(len * log2(unique chars))``; repeated characters lower it."""
    return math.floor(_shannon_bits(len(password), len(set(password))))


def strength_score(password: str) -> float:
    """Return the Shannon-style estimate scaled to 0-100 against 256 bits."""
    bits = _shannon_bits(len(password), len(set(password)))
    return min(100.0, bits / MAX_ENTROPY_BITS * 100)


def strength_label(score: float) -> str:
    for threshold, label in _STRENGTH_LABELS:
        if score < threshold:
            return label
    return "Excellent"


def length_label(length: int) -> str:
    """Label the requested length on its own.

    Deliberately independent of :func:`strength_label`, which scores the
    realised string.
    """
    for limit, label in _LENGTH_LABELS:
        if length <= limit:
            return label
    return "Strong"


def crack_time(bits: int) -> str:
    """Coarse, illustrative crack-time bucket for *bits* of entropy."""
    for threshold, bucket in _CRACK_TIMES:
        if bits < threshold:
            return bucket
    return "millennia"


def score_strength(password: str) -> dict:
    """Analyse *password* and return a report.

    Returns a dict with keys:
        length        -- int
        distinct      -- int (unique characters)
        entropy_bits  -- int
        strength      -- float 0-100
        label         -- str  (Weak / Good / Strong / Excellent)
        length_label  -- str  (Weak / Good / Strong, from length alone)
        crack_time    -- str  (seconds ... millennia)
        char_classes  -- dict[str, bool]  (lowercase, uppercase, numbers, special)
    """
    bits = entropy_bits(password)
    score = strength_score(password)
    return {
        "length": len(password),
        "distinct": len(set(password)),
        "entropy_bits": bits,
        "strength": score,
        "label": strength_label(score),
        "length_label": length_label(len(password)),
        "crack_time": crack_time(bits),
        "char_classes": char_classes(password),
    }
