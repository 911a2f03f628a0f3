"""Generation settings."""

from dataclasses import dataclass

from .charsets import CLASS_NAMES

# Range offered by interactive front ends; the engine accepts any length >= 1.
MIN_UI_LENGTH = 8
MAX_UI_LENGTH = 32

# Upper bound on generate/verify rounds before giving up.
MAX_ATTEMPTS = 100

# Probability that a substitutable letter is swapped for a look-alike.
SUBSTITUTION_CHANCE = 0.3


@dataclass(frozen=True)
class GenerationConfig:
    length: int = 16
    lowercase: bool = True
    uppercase: bool = True
    numbers: bool = True
    special: bool = True
    pronounceable: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ValueError(f"Password length must be an integer, got {self.length!r}")
        if self.length < 1:
            raise ValueError("Password length must be at least 1")

    @property
    def enabled_classes(self) -> tuple[str, ...]:
        """Names of the enabled character classes, in charset order."""
        return tuple(name for name in CLASS_NAMES if getattr(self, name))

    @property
    def in_ui_range(self) -> bool:
        return MIN_UI_LENGTH <= self.length <= MAX_UI_LENGTH


DEFAULT_CONFIG = GenerationConfig()
