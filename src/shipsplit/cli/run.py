# Copyright (c) Syntropy Systems
"""shipsplit run command."""
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from shipsplit.cli.payload import load_policy, read_input, with_variant
from shipsplit.filter import run as run_filter

console = Console()


def run(
    input_file: Path | None = typer.Argument(
        None,
        help="Cart snapshot JSON file ('-' or omitted reads stdin)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config", "-c",
        help="Path to config.yaml (default: nearest .shipsplit/config.yaml)",
    ),
    variant: str | None = typer.Option(
        None,
        "--variant", "-v",
        help="Override the cart's assigned variant",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Indent the JSON output",
    ),
) -> None:
    """Run the variant filter over a cart snapshot and print the operations.

    Example:
        shipsplit run cart.json --variant B

    """
    try:
        policy = load_policy(config)
        payload = with_variant(read_input(input_file), policy, variant)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    result = run_filter(payload, policy)
    # Plain echo so the output stays machine-readable
    typer.echo(result.model_dump_json(indent=2 if pretty else None))
