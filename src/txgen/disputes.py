"""Dispute lifecycle tracker: open disputes and their resolve/chargeback closes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from txgen.events import EventKind, LifecycleEvent
from txgen.random_source import RandomSource


class OpenDisputeSet:
    """
    Transaction ids under active dispute.

    Members live in a list so a uniformly random one can be picked by index and
    removed by swapping it with the last element; _index maps tx_id -> position.
    """

    def __init__(self) -> None:
        self._members: list[int] = []
        self._index: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, tx_id: object) -> bool:
        return tx_id in self._index

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._members))

    def add(self, tx_id: int) -> None:
        if tx_id in self._index:
            return
        self._index[tx_id] = len(self._members)
        self._members.append(tx_id)

    def pop_random(self, rng: RandomSource) -> int:
        """Remove and return a uniformly chosen member. Raises KeyError when empty."""
        if not self._members:
            raise KeyError("pop from an empty dispute set")
        pos = rng.randrange(len(self._members))
        tx_id = self._members[pos]
        last = self._members.pop()
        if last != tx_id:
            self._members[pos] = last
            self._index[last] = pos
        del self._index[tx_id]
        return tx_id


@dataclass
class DisputeTracker:
    """Runs the dispute, resolve and chargeback trials for one iteration at a time."""

    p_dispute: float = 0.1
    p_resolve: float = 0.1
    p_chargeback: float = 0.1
    open_disputes: OpenDisputeSet = field(default_factory=OpenDisputeSet)

    def advance(self, rng: RandomSource, tx_id: int, client_id: int) -> list[LifecycleEvent]:
        """
        Evaluate the three trials in order after financial event tx_id was emitted.

        All emitted events carry the iteration's client_id, not the owner of the
        disputed transaction. Resolve and chargeback are skipped without a draw
        when no dispute is open.
        """
        out: list[LifecycleEvent] = []
        if rng.random() < self.p_dispute:
            self.open_disputes.add(tx_id)
            out.append(LifecycleEvent(EventKind.DISPUTE, client_id, tx_id))
        trials = ((EventKind.RESOLVE, self.p_resolve), (EventKind.CHARGEBACK, self.p_chargeback))
        for kind, p in trials:
            if self.open_disputes and rng.random() < p:
                closed = self.open_disputes.pop_random(rng)
                out.append(LifecycleEvent(kind, client_id, closed))
        return out
