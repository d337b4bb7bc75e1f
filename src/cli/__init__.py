"""CLI entry point for the move runner."""

from __future__ import annotations

import click

from src.cli.commands import check_config, console, run


@click.group()
def cli() -> None:
    """Remote-controlled move runner."""


cli.add_command(run)
cli.add_command(console)
cli.add_command(check_config)
