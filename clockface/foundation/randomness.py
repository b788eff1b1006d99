"""Injectable randomness for cosmetic haze jitter.

The render pipeline only ever calls ``random()`` on its source, so a
``random.Random`` instance satisfies the protocol directly.  Tests pass a
seeded instance or a ``FixedRandom`` to assert structure without asserting
exact pixel values.
"""

from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float:
        """Return a float in [0.0, 1.0)."""
        ...


class FixedRandom:
    """Deterministic source that always returns the same value.

    ``FixedRandom(0.5)`` yields zero rotation jitter and the midpoint scale.
    """

    def __init__(self, value: float = 0.5) -> None:
        if not 0.0 <= value < 1.0:
            raise ValueError("value must be in [0.0, 1.0)")
        self._value = value

    def random(self) -> float:
        return self._value


def make_random_source(seed: int | None = None) -> RandomSource:
    """Build the default source, seeded when *seed* is given."""
    return random.Random(seed)
