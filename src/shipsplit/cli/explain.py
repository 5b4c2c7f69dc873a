# Copyright (c) Syntropy Systems
"""shipsplit explain command."""
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shipsplit.cli.payload import load_policy, read_input, with_variant
from shipsplit.filter import explain as explain_cart

console = Console()

REASON_STYLES = {
    "control": "dim",
    "exempt": "yellow",
    "untagged": "dim",
    "match": "green",
    "mismatch": "red",
}


def explain(
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
) -> None:
    """Show the decision for every delivery option in a cart snapshot."""
    try:
        policy = load_policy(config)
        payload = with_variant(read_input(input_file), policy, variant)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    cart = payload.cart
    decisions = explain_cart(cart, policy)
    if not decisions:
        console.print("[yellow]No delivery options in cart[/yellow]")
        return

    assigned = policy.assigned_variant(cart)
    table = Table(title=f"Variant: {assigned or 'control'}")
    table.add_column("#", style="dim")
    table.add_column("Handle")
    table.add_column("Title")
    table.add_column("Token")
    table.add_column("Decision")
    table.add_column("Reason")

    for i, decision in enumerate(decisions):
        style = REASON_STYLES[decision.reason]
        table.add_row(
            str(i),
            escape(decision.handle),
            escape(decision.title),
            decision.token or "-",
            "show" if decision.visible else "[red]hide[/red]",
            f"[{style}]{decision.reason}[/{style}]",
        )

    console.print(table)
    hidden = sum(1 for d in decisions if not d.visible)
    console.print(f"\n[bold]{hidden} of {len(decisions)}[/bold] option(s) hidden")
