"""Configuration loading from YAML + environment overrides."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from txgen import DEFAULT_TRANSACTIONS


def _load_yaml(path: str | Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively overlay `override` onto a copy of `base`."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


class AppSettings(BaseSettings):
    """App-level settings with env override."""

    model_config = SettingsConfigDict(
        env_prefix="TXGEN_",
        extra="ignore",
    )

    config_path: str = Field(default="config/default.yaml", alias="TXGEN_CONFIG_PATH")
    log_level: str | None = Field(default=None, alias="TXGEN_LOG_LEVEL")
    transactions: int | None = Field(default=None, alias="TXGEN_TRANSACTIONS")
    seed: int | None = Field(default=None, alias="TXGEN_SEED")


def get_config(config_path: str | None = None) -> dict[str, Any]:
    """Load config: built-in defaults <- YAML file (if present) <- TXGEN_* env."""
    settings = AppSettings()
    path = config_path or settings.config_path
    base = _default_config()
    if Path(path).exists():
        base = _deep_merge(base, _load_yaml(path))
    app_cfg = base["app"] = base.get("app") or {}
    gen = base["generator"] = base.get("generator") or {}
    if settings.transactions is not None:
        gen["transactions"] = settings.transactions
    if settings.seed is not None:
        gen["seed"] = settings.seed
    if settings.log_level:
        app_cfg["log_level"] = settings.log_level
    return base


def _default_config() -> dict[str, Any]:
    return {
        "app": {"name": "txgen", "log_level": "INFO"},
        "generator": {
            "transactions": DEFAULT_TRANSACTIONS,
            "seed": None,
            "amount": {"min": 100.0, "max": 200.0},
            "probabilities": {
                "new_client": 0.75,
                "deposit": 0.5,
                "dispute": 0.1,
                "resolve": 0.1,
                "chargeback": 0.1,
            },
        },
    }


def get_config_hash(config: dict[str, Any]) -> str:
    """Fingerprint of the merged settings; the CLI logs its prefix so two streams
    can be traced back to the same generator section.
    """
    canonical = yaml.dump(config, default_flow_style=False, sort_keys=True, allow_unicode=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
