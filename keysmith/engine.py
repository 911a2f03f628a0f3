"""Password generation engine.

Two randomness sources are used, on purpose, and kept apart:

* ``entropy`` (an :class:`~keysmith.entropy.EntropySource`) picks every
  character and every repair position.  This is the security-relevant one.
* ``cosmetic_rng`` (a plain :class:`random.Random`) only decides the
  syllable shape in pronounceable mode and which letters get a look-alike
  substitution.  It is **not** cryptographic.

Note that the repair and substitution steps skew the final character
distribution away from uniform over the charset, which the
distinct-character entropy estimate does not account for.
"""

import logging
import math
import random
import time

from .charsets import (
    CHARACTER_SETS,
    COMMON_SUBSTITUTIONS,
    CONSONANTS,
    SYLLABLE_PATTERNS,
    VOWELS,
    build_charset,
    has_class,
)
from .config import MAX_ATTEMPTS, SUBSTITUTION_CHANCE, GenerationConfig
from .entropy import EntropySource
from .results import EmptyCharset, GeneratedPassword, GenerationFailed, GenerationOutcome
from .strength import entropy_bits, strength_score

logger = logging.getLogger(__name__)


class PasswordEngine:
    """Build passwords for a :class:`GenerationConfig`.

    The engine holds no per-call state; the only mutable state it touches is
    the pool inside *entropy*.
    """

    def __init__(
        self,
        entropy: EntropySource | None = None,
        *,
        cosmetic_rng: random.Random | None = None,
        substitution_chance: float = SUBSTITUTION_CHANCE,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if not 0.0 <= substitution_chance <= 1.0:
            raise ValueError("substitution_chance must be between 0 and 1")

        self.entropy = entropy if entropy is not None else EntropySource()
        self.cosmetic_rng = cosmetic_rng if cosmetic_rng is not None else random.Random()
        self.substitution_chance = substitution_chance
        self.max_attempts = max_attempts

    def generate(self, config: GenerationConfig) -> GenerationOutcome:
        """Generate one password for *config*.

        Returns :class:`GeneratedPassword` on success, :class:`EmptyCharset`
        when no class is enabled, or :class:`GenerationFailed` when no
        candidate satisfied every enabled class within ``max_attempts``.
        """
        start = time.perf_counter()

        enabled = config.enabled_classes
        charset = build_charset(enabled)
        if not charset:
            return EmptyCharset()

        missing: list[str] = []
        for attempt in range(1, self.max_attempts + 1):
            if config.pronounceable:
                candidate = self._pronounceable(config.length, enabled)
            else:
                candidate = self._direct(config.length, charset)

            candidate = self._substitute(candidate)

            missing = [name for name in enabled if not has_class(candidate, name)]
            if not missing:
                elapsed_ms = (time.perf_counter() - start) * 1000
                return GeneratedPassword(
                    text=candidate,
                    strength=strength_score(candidate),
                    entropy_bits=entropy_bits(candidate),
                    generation_time_ms=elapsed_ms,
                    attempts=attempt,
                )
            logger.debug("Attempt %d missing %s; retrying", attempt, ", ".join(missing))

        logger.warning(
            "Gave up after %d attempts (length=%d, classes=%s)",
            self.max_attempts, config.length, ", ".join(enabled),
        )
        return GenerationFailed(attempts=self.max_attempts, missing=tuple(missing))

    # ── candidate builders ─────────────────────────────────────────────

    def _pick(self, alphabet: str) -> str:
        return alphabet[self.entropy.get_random_value(len(alphabet))]

    def _direct(self, length: int, charset: str) -> str:
        return "".join(self._pick(charset) for _ in range(length))

    def _syllable(self) -> str:
        pattern = SYLLABLE_PATTERNS[0] if self.cosmetic_rng.random() < 0.5 else SYLLABLE_PATTERNS[1]
        return "".join(self._pick(VOWELS if c == "V" else CONSONANTS) for c in pattern)

    def _pronounceable(self, length: int, enabled) -> str:
        syllables = [self._syllable() for _ in range(math.ceil(length / 3))]
        text = "".join(syllables)
        # VC syllables are two letters, so ceil(length / 3) may fall short.
        while len(text) < length:
            text += self._syllable()
        chars = list(text[:length])

        # Overwrite one position per missing class; later ones may clobber earlier ones.
        for name in enabled:
            if not has_class("".join(chars), name):
                pos = self.entropy.get_random_value(len(chars))
                chars[pos] = self._pick(CHARACTER_SETS[name])
        return "".join(chars)

    def _substitute(self, text: str) -> str:
        chars = list(text)
        for i, ch in enumerate(chars):
            options = COMMON_SUBSTITUTIONS.get(ch.lower())
            if options and self.cosmetic_rng.random() < self.substitution_chance:
                chars[i] = self.cosmetic_rng.choice(options)
        return "".join(chars)


_default_engine: PasswordEngine | None = None


def default_engine() -> PasswordEngine:
    """Return the process-wide engine, creating it (and its pool) on first use."""
    global _default_engine
    if _default_engine is None:
        _default_engine = PasswordEngine()
    return _default_engine


def generate_password(
    length: int = 16,
    *,
    lowercase: bool = True,
    uppercase: bool = True,
    numbers: bool = True,
    special: bool = True,
    pronounceable: bool = False,
) -> GenerationOutcome:
    """Generate a password with the shared default engine.

    Raises :class:`ValueError` for ``length < 1``; every other condition is
    reported through the returned outcome.
    """
    config = GenerationConfig(
        length=length,
        lowercase=lowercase,
        uppercase=uppercase,
        numbers=numbers,
        special=special,
        pronounceable=pronounceable,
    )
    return default_engine().generate(config)
