"""Pytest fixtures: scripted random source, sample config."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest


class ScriptedRandom:
    """Random source replaying fixed draws; raises IndexError on any unexpected draw."""

    def __init__(self, floats: Iterable[float] = (), ints: Iterable[int] = ()) -> None:
        self.floats = list(floats)
        self.ints = list(ints)

    def random(self) -> float:
        return self.floats.pop(0)

    def randrange(self, stop: int) -> int:
        value = self.ints.pop(0)
        assert 0 <= value < stop, f"scripted randrange value {value} outside [0, {stop})"
        return value

    @property
    def exhausted(self) -> bool:
        return not self.floats and not self.ints


@pytest.fixture
def scripted():
    """Factory: scripted(floats=[...], ints=[...]) -> ScriptedRandom."""
    return ScriptedRandom


@pytest.fixture
def config_path(tmp_path: Path) -> str:
    """Return path to a temporary config dir with default.yaml."""
    cfg_dir = tmp_path / "config"
    cfg_dir.mkdir()
    (cfg_dir / "default.yaml").write_text(
        """
app:
  log_level: WARNING
generator:
  transactions: 50
  seed: 7
  amount:
    min: 10
    max: 20
  probabilities:
    dispute: 0.5
"""
    )
    return str(cfg_dir / "default.yaml")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TXGEN_CONFIG_PATH", "TXGEN_LOG_LEVEL", "TXGEN_TRANSACTIONS", "TXGEN_SEED"):
        monkeypatch.delenv(name, raising=False)
