"""Typer CLI: write a synthetic transaction event stream to stdout or a file."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from txgen.config import get_config, get_config_hash
from txgen.generator import StreamGenerator
from txgen.logging_config import get_logger, setup_logging
from txgen.schemas import GeneratorConfig

app = typer.Typer(help="Synthetic payment transaction stream generator")
logger = get_logger(__name__)


@app.command()
def generate(
    count: int | None = typer.Option(
        None, "--count", "-n", help="Number of iterations (financial events); default 1000000"
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for a reproducible stream"),
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Write to this file instead of stdout"
    ),
) -> None:
    """Generate deposits, withdrawals and dispute lifecycle events as CSV lines."""
    cfg = get_config(config)
    setup_logging((cfg.get("app") or {}).get("log_level", "INFO"))
    if count is not None:
        cfg["generator"]["transactions"] = count
    if seed is not None:
        cfg["generator"]["seed"] = seed
    try:
        gen_cfg = GeneratorConfig.from_config(cfg)
    except ValidationError as e:
        typer.echo(f"Invalid generator config: {e}", err=True)
        raise typer.Exit(1) from e
    logger.info(
        "Generating %d transactions (seed=%s, config_hash=%s)",
        gen_cfg.transactions,
        gen_cfg.seed,
        get_config_hash(cfg)[:12],
    )
    text = StreamGenerator(gen_cfg).render(gen_cfg.transactions) + "\n"
    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        logger.info("Wrote stream to %s", out_path)
    else:
        typer.echo(text, nl=False)
