"""CLI entrypoint for silicon-tvl."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from .logger import setup_logging
from .runner import Target
from .settings import CONFIG_ENV_VAR, OutputFormat, TvlSettings
from .state import AppState

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    add_help_option=True,
    pretty_exceptions_enable=True,
    pretty_exceptions_short=True,
    pretty_exceptions_show_locals=False,
    rich_markup_mode="rich",
    help="Compute Silicon.net TVL from GPU listings and the pool token supply.",
)


def _build_logger() -> logging.Logger:
    return logging.getLogger("silicon_tvl")


@app.command()
def report(
    target: Annotated[
        Target,
        typer.Argument(help="Entry point to run: gpus, pool-token or all."),
    ] = Target.ALL,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a TOML config file (can include [silicon_tvl] table).",
        ),
    ] = None,
    rpc_url: Annotated[
        str | None,
        typer.Option("--rpc-url", help="Arbitrum RPC endpoint."),
    ] = None,
    block_number: Annotated[
        int | None,
        typer.Option(
            "--block-number",
            help="Block number for on-chain reads. If not provided, the latest block is used.",
        ),
    ] = None,
    http_timeout: Annotated[
        float | None,
        typer.Option("--http-timeout", help="Seconds to wait on each GPU listing page."),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format (table or json)."),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Override logging verbosity (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL).",
        ),
    ] = None,
    show_config: Annotated[
        bool,
        typer.Option("--show-config", help="Print effective config and exit."),
    ] = False,
):
    """Run the TVL entry point(s) once and print what they report."""
    if config_path:
        os.environ[CONFIG_ENV_VAR] = str(config_path)

    init_kwargs: dict[str, object] = {}
    if rpc_url is not None:
        init_kwargs["rpc_url"] = rpc_url
    if block_number is not None:
        init_kwargs["block_number"] = block_number
    if http_timeout is not None:
        init_kwargs["http_timeout"] = http_timeout
    if output_format is not None:
        init_kwargs["output_format"] = output_format
    if log_level is not None:
        init_kwargs["log_level"] = log_level

    try:
        settings = TvlSettings(**init_kwargs)
    except ValidationError as e:
        raise typer.BadParameter(str(e)) from e

    if show_config:
        typer.echo(json.dumps(settings.as_safe_dict(), indent=2))
        raise typer.Exit(code=0)

    setup_logging(settings.log_level)
    state = AppState(settings=settings, logger=_build_logger())

    from .formatter import print_json, print_table
    from .runner import run_tvl

    result = asyncio.run(run_tvl(state, target))

    if settings.output_format == OutputFormat.JSON:
        print_json(result)
    else:
        print_table(result)


def run() -> None:
    """Entrypoint used by the console script."""
    app()


if __name__ == "__main__":
    run()
