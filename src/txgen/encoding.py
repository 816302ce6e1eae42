"""Record encoder: one event -> one comma-delimited line."""

from __future__ import annotations

from collections.abc import Iterable

from txgen import HEADER
from txgen.events import Event, FinancialEvent


def encode_record(event: Event) -> str:
    """Financial events carry 4 fields, lifecycle events 3 (no amount column)."""
    if isinstance(event, FinancialEvent):
        return f"{event.kind.value},{event.client_id},{event.tx_id},{event.amount!r}"
    return f"{event.kind.value},{event.client_id},{event.tx_id}"


def encode_stream(events: Iterable[Event]) -> str:
    """Header plus one line per event, newline-separated, no trailing newline."""
    lines = [HEADER]
    lines.extend(encode_record(e) for e in events)
    return "\n".join(lines)
