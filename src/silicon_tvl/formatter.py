"""Console output for a TVL run."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table

from .price_table import DEFAULT_PRICE_TABLE, PriceTable
from .runner import RunResult


def _truncate_address(address: str) -> str:
    return f"{address[:10]}...{address[-4:]}"


def _format_usd(amount: float) -> str:
    return f"${amount:,.2f}"


def result_to_dict(result: RunResult) -> dict[str, Any]:
    data: dict[str, Any] = {"balances": result.balances.to_dict()}
    if result.valuation is not None:
        data["gpus"] = {
            "counts": result.valuation.counts,
            "total_gpus": result.valuation.total_gpus,
            "total_usd": result.valuation.total_usd,
            "unclassified": sorted(result.valuation.unclassified),
        }
    if result.pool_token_supply is not None:
        data["pool_token_supply"] = str(result.pool_token_supply)
    return data


def print_json(result: RunResult) -> None:
    print(json.dumps(result_to_dict(result), indent=2))


def print_table(
    result: RunResult,
    table: PriceTable = DEFAULT_PRICE_TABLE,
    console: Console | None = None,
) -> None:
    """Print a rich dashboard of the run."""
    console = console or Console()
    parts: list[Any] = []

    if result.valuation is not None:
        gpu_table = Table(expand=True)
        gpu_table.add_column("GPU", style="cyan", no_wrap=True)
        gpu_table.add_column("Count", justify="right")
        gpu_table.add_column("Unit Price", justify="right", style="yellow")
        gpu_table.add_column("Value", justify="right", style="green")
        for label, count in result.valuation.counts.items():
            price = table.price_of(label)
            gpu_table.add_row(
                label, str(count), _format_usd(price), _format_usd(count * price)
            )
        gpu_table.add_row(
            "[bold]TOTAL[/]",
            f"[bold]{result.valuation.total_gpus}[/]",
            "",
            f"[bold]{_format_usd(result.valuation.total_usd)}[/]",
        )
        parts.append(Panel(gpu_table, title="[bold]GPU Valuation[/]", border_style="cyan"))
        if result.valuation.unclassified:
            parts.append(
                Panel(
                    ", ".join(sorted(result.valuation.unclassified)),
                    title="[bold]Uncategorized GPU Types[/]",
                    border_style="yellow",
                )
            )

    balances = result.balances
    summary = Table(show_header=False, box=None, padding=(0, 1))
    summary.add_column("Key", style="dim")
    summary.add_column("Value", style="green")
    summary.add_row("Chain", balances.chain)
    summary.add_row("USD value", _format_usd(balances.usd_value))
    for token, amount in balances.tokens.items():
        summary.add_row(_truncate_address(token), f"{amount:,}")
    if balances.is_empty:
        summary.add_row("Note", "[yellow]nothing reported[/]")
    parts.append(Panel(summary, title="[bold]Reported Balances[/]", border_style="green"))

    console.print()
    console.print(
        Panel(
            Group(*parts),
            title="[bold white]Silicon.net TVL[/]",
            border_style="white",
            padding=(1, 2),
        )
    )
    console.print()
