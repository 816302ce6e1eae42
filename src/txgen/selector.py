"""Deposit vs withdrawal choice for each iteration."""

from __future__ import annotations

from txgen.events import EventKind
from txgen.random_source import RandomSource


def pick_financial_kind(rng: RandomSource, p_deposit: float = 0.5) -> EventKind:
    if rng.random() < p_deposit:
        return EventKind.DEPOSIT
    return EventKind.WITHDRAWAL
