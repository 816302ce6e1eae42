"""Injectable random source: every generator decision draws from one of these."""

from __future__ import annotations

import random
from typing import Protocol


class RandomSource(Protocol):
    """Subset of random.Random the generator depends on."""

    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


def make_random_source(seed: int | None = None) -> RandomSource:
    """Return a random.Random; seed=None leaves it seeded from the OS."""
    return random.Random(seed)
