"""Stream driver: one financial event per iteration plus any dispute lifecycle events."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field

from txgen.amount import synthesize_amount
from txgen.disputes import DisputeTracker
from txgen.encoding import encode_stream
from txgen.events import Event, EventKind, FinancialEvent
from txgen.logging_config import get_logger
from txgen.population import ClientPopulation
from txgen.random_source import RandomSource, make_random_source
from txgen.schemas import GeneratorConfig
from txgen.selector import pick_financial_kind

logger = get_logger(__name__)


@dataclass
class GeneratorState:
    """Everything that lives for one run: client counters and open disputes."""

    population: ClientPopulation
    disputes: DisputeTracker

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> GeneratorState:
        p = config.probabilities
        return cls(
            population=ClientPopulation(p_new=p.new_client),
            disputes=DisputeTracker(
                p_dispute=p.dispute, p_resolve=p.resolve, p_chargeback=p.chargeback
            ),
        )


@dataclass
class GenerationSummary:
    """Per-kind line counts for a finished run."""

    counts: Counter = field(default_factory=Counter)
    clients: int = 0
    open_disputes: int = 0

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def describe(self) -> str:
        parts = ", ".join(f"{k.value}={self.counts.get(k, 0)}" for k in EventKind)
        return (
            f"{self.total} events ({parts}); {self.clients} clients; "
            f"{self.open_disputes} disputes left open"
        )


class StreamGenerator:
    """Drives the selector, population, amount and dispute models in a fixed order."""

    def __init__(
        self, config: GeneratorConfig | None = None, rng: RandomSource | None = None
    ) -> None:
        self.config = config or GeneratorConfig()
        self.rng = rng if rng is not None else make_random_source(self.config.seed)
        self.state = GeneratorState.from_config(self.config)
        self.summary = GenerationSummary()

    def step(self, tx_id: int) -> list[Event]:
        """Run iteration tx_id; returns the financial event followed by lifecycle events."""
        rng = self.rng
        kind = pick_financial_kind(rng, self.config.probabilities.deposit)
        client_id = self.state.population.next_client_id(rng)
        amount = synthesize_amount(rng, self.config.amount.min, self.config.amount.max)
        events: list[Event] = [FinancialEvent(kind, client_id, tx_id, amount)]
        events.extend(self.state.disputes.advance(rng, tx_id, client_id))
        for e in events:
            self.summary.counts[e.kind] += 1
        return events

    def events(self, count: int) -> Iterator[Event]:
        """Yield every event of a `count`-iteration run in emission order.

        Each run starts from fresh client counters and an empty dispute set, since
        tx ids restart at 0.
        """
        self.state = GeneratorState.from_config(self.config)
        self.summary = GenerationSummary()
        for tx_id in range(count):
            yield from self.step(tx_id)
        self.summary.clients = self.state.population.max_client_id
        self.summary.open_disputes = len(self.state.disputes.open_disputes)

    def render(self, count: int) -> str:
        """Header + all encoded lines, buffered in memory and joined once."""
        text = encode_stream(self.events(count))
        logger.info("Generated %s", self.summary.describe())
        return text


def generate_stream(
    count: int, rng: RandomSource | None = None, config: GeneratorConfig | None = None
) -> str:
    """Render a complete stream of `count` iterations."""
    return StreamGenerator(config, rng).render(count)
