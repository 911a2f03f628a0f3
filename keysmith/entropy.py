"""Pooled entropy source.

Random 32-bit words are fetched from the operating system in batches of
:data:`POOL_SIZE` and handed out one at a time.  The pool is refilled once
three quarters of it have been consumed, so a long password never stalls
on an empty buffer half way through.

``get_random_value(n)`` reduces a word with ``% n``.  This carries a
modulo bias whenever ``n`` does not divide 2**32.  For the alphabets used
here (at most ~90 symbols) the bias is below 1 part in 10**7 and is
accepted as is.

If the platform has no CSPRNG (``os.urandom`` raises
``NotImplementedError``), words are built by XOR-ing timer ticks,
wall-clock time and :func:`random.random`.  That fallback is **not**
cryptographically secure.  It is flagged on the instance
(``fallback_engaged``) and logged at WARNING level.
"""

import logging
import os
import random
import threading
import time

logger = logging.getLogger(__name__)

POOL_SIZE = 1024
REFILL_THRESHOLD = 0.75

_WORD_BYTES = 4
_WORD_MASK = 0xFFFFFFFF


class EntropySource:
    """Uniform random integers in ``[0, max)`` backed by a refillable pool.

    Each instance owns its pool; create one per engine (or per test) to
    keep state independent.  ``get_random_value`` is safe to call from
    several threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pool: list[int] = []
        self._cursor = 0
        self.fallback_engaged = False
        self.refills = 0
        self._fill()

    @property
    def cursor(self) -> int:
        return self._cursor

    def get_random_value(self, max: int) -> int:
        """Return a random integer in ``[0, max)``."""
        if isinstance(max, bool) or not isinstance(max, int) or max <= 0:
            raise ValueError(f"max must be a positive integer, got {max!r}")

        with self._lock:
            if self._cursor >= len(self._pool) * REFILL_THRESHOLD:
                self._fill()
            value = self._pool[self._cursor]
            self._cursor += 1
        return value % max

    # ── internals ──────────────────────────────────────────────────────

    def _fill(self) -> None:
        try:
            data = os.urandom(POOL_SIZE * _WORD_BYTES)
        except NotImplementedError:
            self._pool = _fallback_words(POOL_SIZE)
            if not self.fallback_engaged:
                logger.warning(
                    "No system CSPRNG available; using weak time/PRNG "
                    "fallback entropy. Generated passwords are NOT "
                    "cryptographically secure."
                )
            self.fallback_engaged = True
        else:
            self._pool = [
                int.from_bytes(data[i : i + _WORD_BYTES], "little")
                for i in range(0, len(data), _WORD_BYTES)
            ]
        self._cursor = 0
        self.refills += 1
        logger.debug("Entropy pool filled (%d words, fill #%d)", len(self._pool), self.refills)


def _fallback_words(count: int) -> list[int]:
    # Weak: every input here is predictable or seeded from the clock.
    return [
        (
            time.perf_counter_ns()
            ^ (time.time_ns() // 1_000_000)
            ^ int(random.random() * _WORD_MASK)
        ) & _WORD_MASK
        for _ in range(count)
    ]
