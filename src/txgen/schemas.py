"""Pydantic v2 models for validated generator settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class AmountRange(BaseModel):
    min: float = 100.0
    max: float = 200.0

    @model_validator(mode="after")
    def check_bounds(self) -> AmountRange:
        if not self.min < self.max:
            raise ValueError(f"amount.min ({self.min}) must be below amount.max ({self.max})")
        return self


class Probabilities(BaseModel):
    """Bernoulli trial probabilities, each in [0, 1]."""

    new_client: float = Field(default=0.75, ge=0.0, le=1.0)
    deposit: float = Field(default=0.5, ge=0.0, le=1.0)
    dispute: float = Field(default=0.1, ge=0.0, le=1.0)
    resolve: float = Field(default=0.1, ge=0.0, le=1.0)
    chargeback: float = Field(default=0.1, ge=0.0, le=1.0)


class GeneratorConfig(BaseModel):
    """Validated view of the `generator` config section.

    transactions is deliberately unconstrained: a negative count yields no iterations.
    """

    transactions: int = 1_000_000
    seed: int | None = None
    amount: AmountRange = Field(default_factory=AmountRange)
    probabilities: Probabilities = Field(default_factory=Probabilities)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> GeneratorConfig:
        return cls.model_validate(config.get("generator") or {})
