"""Character classes, syllable alphabets and substitution table."""

import re

# ── Character classes ──────────────────────────────────────────────────────

# Look-alikes removed: 'l' (vs '1'), 'I' and 'O', '0' and '1'.
LOWERCASE = "abcdefghijkmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHJKLMNPQRSTUVWXYZ"
NUMBERS = "23456789"
SPECIAL = "!@#$%^&*()-_=+[]{}|;:,.<>?"

# Order matters: charset composition and class repair both follow it.
CLASS_NAMES = ("lowercase", "uppercase", "numbers", "special")

CHARACTER_SETS = {
    "lowercase": LOWERCASE,
    "uppercase": UPPERCASE,
    "numbers": NUMBERS,
    "special": SPECIAL,
}

_CLASS_PATTERNS = {
    "lowercase": re.compile(r"[a-z]"),
    "uppercase": re.compile(r"[A-Z]"),
    "numbers":   re.compile(r"[0-9]"),
    "special":   re.compile(r"[^a-zA-Z0-9]"),
}

# ── Pronounceable syllables ────────────────────────────────────────────────

VOWELS = "aeiouy"
CONSONANTS = "bcdfghjklmnpqrstvwxz"

SYLLABLE_PATTERNS = ("CVC", "VC")

# ── Common substitutions ───────────────────────────────────────────────────

COMMON_SUBSTITUTIONS = {
    "a": ["@", "4"],
    "e": ["3"],
    "i": ["1", "!"],
    "o": ["0"],
    "s": ["$", "5"],
    "t": ["7"],
}


def has_class(text: str, name: str) -> bool:
    """Return True if *text* contains at least one character of class *name*.

    Membership is by ASCII category (``[a-z]``, ``[A-Z]``, ``[0-9]``,
    anything else), not by the curated sets above, so a substituted ``'1'``
    still counts as a digit.
    """
    return bool(_CLASS_PATTERNS[name].search(text))


def char_classes(text: str) -> dict[str, bool]:
    return {name: has_class(text, name) for name in CLASS_NAMES}


def build_charset(enabled) -> str:
    """Concatenate the enabled classes in the fixed order lower, upper, numbers, special."""
    return "".join(CHARACTER_SETS[name] for name in CLASS_NAMES if name in enabled)
