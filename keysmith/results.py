"""Outcomes returned by :meth:`keysmith.engine.PasswordEngine.generate`."""

from dataclasses import dataclass, field
from typing import Union

from .strength import crack_time, length_label, strength_label


@dataclass(frozen=True)
class GeneratedPassword:
    """A password that passed verification, with its metrics.

    ``text`` is left out of ``repr()`` so the secret never ends up in a log
    line by accident.
    """

    text: str = field(repr=False)
    strength: float
    entropy_bits: int
    generation_time_ms: float
    attempts: int = 1

    ok = True

    @property
    def label(self) -> str:
        return strength_label(self.strength)

    @property
    def length_label(self) -> str:
        return length_label(len(self.text))

    @property
    def crack_time(self) -> str:
        return crack_time(self.entropy_bits)


@dataclass(frozen=True)
class EmptyCharset:
    """No character class was enabled; nothing was generated."""

    message: str = "Select at least one character set"

    ok = False


@dataclass(frozen=True)
class GenerationFailed:
    """Verification kept failing until the attempt limit ran out."""

    attempts: int
    missing: tuple[str, ...] = ()

    ok = False

    @property
    def message(self) -> str:
        return (
            f"Could not satisfy {', '.join(self.missing) or 'class'} "
            f"requirements after {self.attempts} attempts"
        )


GenerationOutcome = Union[GeneratedPassword, EmptyCharset, GenerationFailed]
