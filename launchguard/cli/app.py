"""Main Typer application — imports and registers all CLI commands.

Entry point: ``launchguard`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from launchguard.cli.commands.check import address_cmd, check_cmd
from launchguard.cli.commands.scan import scan_cmd
from launchguard.config import config

app = typer.Typer(
    name="launchguard",
    help="launchguard: integrity and completeness checks for game-launch artifacts.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (defaults to LAUNCHGUARD_LOG_LEVEL).",
    ),
) -> None:
    """Configure logging before any subcommand runs."""
    logging.basicConfig(
        level=(log_level or config.log_level).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


# Register subcommands
app.command(name="address", help="Print the content address for a hash.")(address_cmd)
app.command(name="check", help="Check one asset object by hash and size.")(check_cmd)
app.command(name="scan", help="Scan a release manifest for missing artifacts.")(scan_cmd)


@app.command(name="config", help="Show the effective configuration.")
def config_cmd() -> None:
    """Print every configuration value and where to override it."""
    console = Console()
    table = Table(title="launchguard configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Environment variable", style="dim")

    for name, value in config.model_dump().items():
        table.add_row(name, str(value), f"LAUNCHGUARD_{name.upper()}")

    console.print(table)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
