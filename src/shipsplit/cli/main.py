# Copyright (c) Syntropy Systems
"""Main CLI entry point for shipsplit."""

import typer

from shipsplit.cli.explain import explain
from shipsplit.cli.extract import extract
from shipsplit.cli.init_cmd import init
from shipsplit.cli.run import run

app = typer.Typer(
    name="shipsplit",
    help=(
        "Shipping rate split testing. Hide the delivery options that "
        "belong to another experiment variant."
    ),
    no_args_is_help=True,
    add_completion=False,
)

# Register commands
_ = app.command()(init)
_ = app.command()(run)
_ = app.command()(explain)
_ = app.command()(extract)


if __name__ == "__main__":
    app()
