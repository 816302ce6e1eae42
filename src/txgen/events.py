"""Event types emitted by the generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EventKind(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"


FINANCIAL_KINDS = frozenset({EventKind.DEPOSIT, EventKind.WITHDRAWAL})
LIFECYCLE_KINDS = frozenset({EventKind.DISPUTE, EventKind.RESOLVE, EventKind.CHARGEBACK})


@dataclass(frozen=True)
class FinancialEvent:
    """Deposit or withdrawal; tx_id is the loop index that produced it."""

    kind: EventKind
    client_id: int
    tx_id: int
    amount: float


@dataclass(frozen=True)
class LifecycleEvent:
    """Dispute, resolve or chargeback referencing an earlier financial tx_id."""

    kind: EventKind
    client_id: int
    tx_id: int


Event = FinancialEvent | LifecycleEvent
