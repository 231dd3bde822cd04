"""``launchguard address`` and ``launchguard check`` — single-object commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from launchguard.config import config
from launchguard.core.content_address import InvalidHashFormat, path_for
from launchguard.core.integrity import IntegrityChecker
from launchguard.core.storage import GameDirectory
from launchguard.models.outcomes import VerificationOutcome

console = Console()

OUTCOME_STYLES: dict[VerificationOutcome, str] = {
    VerificationOutcome.VALID: "green",
    VerificationOutcome.MISSING: "yellow",
    VerificationOutcome.SIZE_MISMATCH: "bold red",
    VerificationOutcome.HASH_MISMATCH: "bold red",
    VerificationOutcome.IO_ERROR: "magenta",
}


def address_cmd(
    content_hash: str = typer.Argument(..., metavar="HASH", help="SHA-1 hex digest."),
) -> None:
    """Print the content address (``<prefix>/<hash>``) for a hash."""
    try:
        console.print(path_for(content_hash), highlight=False)
    except InvalidHashFormat as exc:
        console.print(f"[bold red]Invalid hash:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2)


def check_cmd(
    content_hash: str = typer.Argument(..., metavar="HASH", help="Expected SHA-1 hex digest."),
    size: int = typer.Argument(..., min=0, help="Expected size in bytes."),
    game_dir: Path | None = typer.Option(
        None,
        "--root",
        "-r",
        help="Game directory (defaults to LAUNCHGUARD_GAME_DIR).",
    ),
) -> None:
    """Check one asset object and print the detailed outcome.

    Exits 0 when the object is valid and 1 otherwise.
    """
    directory = GameDirectory(game_dir or config.game_dir)
    checker = IntegrityChecker(chunk_size=config.chunk_size)
    try:
        outcome = checker.reporting_verify(
            directory.objects_root(), size, content_hash
        )
    except InvalidHashFormat as exc:
        console.print(f"[bold red]Invalid hash:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2)

    style = OUTCOME_STYLES[outcome]
    console.print(f"{path_for(content_hash)}: [{style}]{outcome.value}[/{style}]")
    if not outcome.is_valid:
        raise typer.Exit(code=1)
