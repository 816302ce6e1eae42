"""Amount synthesizer for financial events."""

from __future__ import annotations

import math

from txgen.random_source import RandomSource


def synthesize_amount(rng: RandomSource, low: float = 100.0, high: float = 200.0) -> float:
    """Uniform draw in [low, high). No rounding; full float precision is kept."""
    value = low + rng.random() * (high - low)
    # low + r * span can round up to high when r is within an ulp of 1.0
    return min(value, math.nextafter(high, low))
