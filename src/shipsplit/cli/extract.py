# Copyright (c) Syntropy Systems
"""shipsplit extract command."""
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from shipsplit.cli.payload import load_policy

console = Console()


def extract(
    titles: list[str] = typer.Argument(
        ...,
        help="Delivery option titles to parse",
    ),
    config: Path | None = typer.Option(
        None,
        "--config", "-c",
        help="Path to config.yaml (applies allowed_tokens)",
    ),
) -> None:
    """Print the variant token embedded in each title ('-' if untagged)."""
    try:
        policy = load_policy(config)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    for title in titles:
        token = policy.token_for(title)
        console.print(f"{escape(title)} -> {token or '-'}", highlight=False)
