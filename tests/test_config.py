"""Tests for config loading and generator settings validation."""

import pytest
from pydantic import ValidationError

from txgen.config import _deep_merge, _default_config, get_config, get_config_hash
from txgen.schemas import GeneratorConfig


def test_default_config() -> None:
    cfg = _default_config()
    assert cfg["app"]["log_level"] == "INFO"
    assert cfg["generator"]["transactions"] == 1_000_000
    assert cfg["generator"]["seed"] is None


def test_deep_merge() -> None:
    base = {"a": 1, "b": {"x": 1, "y": 2}}
    override = {"b": {"y": 3}, "c": 4}
    out = _deep_merge(base, override)
    assert out == {"a": 1, "b": {"x": 1, "y": 3}, "c": 4}
    assert base["b"]["y"] == 2


def test_missing_file_uses_defaults(tmp_path) -> None:
    cfg = get_config(str(tmp_path / "nope.yaml"))
    assert cfg["generator"] == _default_config()["generator"]


def test_get_config_with_file(config_path: str) -> None:
    cfg = get_config(config_path)
    gen = cfg["generator"]
    assert gen["transactions"] == 50
    assert gen["seed"] == 7
    assert gen["amount"] == {"min": 10, "max": 20}
    # untouched keys keep defaults
    assert gen["probabilities"]["dispute"] == 0.5
    assert gen["probabilities"]["new_client"] == 0.75


def test_env_overrides_file(config_path: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TXGEN_TRANSACTIONS", "12")
    monkeypatch.setenv("TXGEN_SEED", "3")
    monkeypatch.setenv("TXGEN_LOG_LEVEL", "DEBUG")
    cfg = get_config(config_path)
    assert cfg["generator"]["transactions"] == 12
    assert cfg["generator"]["seed"] == 3
    assert cfg["app"]["log_level"] == "DEBUG"


def test_env_config_path(config_path: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TXGEN_CONFIG_PATH", config_path)
    assert get_config()["generator"]["transactions"] == 50


def test_config_hash_is_stable() -> None:
    a = _default_config()
    b = _default_config()
    assert get_config_hash(a) == get_config_hash(b)
    b["generator"]["seed"] = 1
    assert get_config_hash(a) != get_config_hash(b)


def test_generator_config_from_config(config_path: str) -> None:
    gen = GeneratorConfig.from_config(get_config(config_path))
    assert gen.transactions == 50
    assert gen.seed == 7
    assert gen.amount.min == 10.0
    assert gen.probabilities.dispute == 0.5
    assert gen.probabilities.resolve == 0.1


def test_generator_config_rejects_bad_probability() -> None:
    with pytest.raises(ValidationError):
        GeneratorConfig.model_validate({"probabilities": {"dispute": 1.5}})
    with pytest.raises(ValidationError):
        GeneratorConfig.model_validate({"probabilities": {"new_client": -0.1}})


def test_generator_config_rejects_inverted_amount_range() -> None:
    with pytest.raises(ValidationError, match="must be below"):
        GeneratorConfig.model_validate({"amount": {"min": 200, "max": 100}})


def test_generator_config_allows_any_count() -> None:
    assert GeneratorConfig.model_validate({"transactions": -1}).transactions == -1
    assert GeneratorConfig.from_config({}).transactions == 1_000_000


def test_empty_sections_become_dicts(tmp_path) -> None:
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("app:\ngenerator:\n")
    cfg = get_config(str(cfg_path))
    assert cfg["app"] == {}
    assert cfg["generator"] == {}
    assert GeneratorConfig.from_config(cfg).transactions == 1_000_000


def test_empty_app_section_with_env_log_level(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text("app:\n")
    monkeypatch.setenv("TXGEN_LOG_LEVEL", "ERROR")
    assert get_config(str(cfg_path))["app"] == {"log_level": "ERROR"}
