"""``launchguard scan MANIFEST`` — report which artifacts need fetching.

The manifest file is a ``ReleaseManifest`` serialized as JSON with its own
schema (``ReleaseManifest.model_dump_json()``), not an upstream launcher
version document.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from launchguard.cli.commands.check import OUTCOME_STYLES
from launchguard.config import config
from launchguard.core.integrity import IntegrityChecker
from launchguard.core.storage import GameDirectory, StorageUnavailable
from launchguard.models.artifacts import LibraryRecord
from launchguard.models.manifest import ReleaseManifest
from launchguard.models.outcomes import ScanReport, VerificationOutcome

console = Console()


def _build_table(report: ScanReport, show_valid: bool) -> Table:
    table = Table(title=f"Release {report.version}")
    table.add_column("Kind", style="dim")
    table.add_column("Identifier", style="cyan")
    table.add_column("Hash")
    table.add_column("Size", justify="right")
    table.add_column("Outcome")

    for result in report.results:
        if result.is_valid and not show_valid:
            continue
        record = result.record
        kind = "library" if isinstance(record, LibraryRecord) else "asset"
        style = OUTCOME_STYLES[result.outcome]
        table.add_row(
            kind,
            escape(record.identifier),
            record.content_hash[:12],
            str(record.size),
            f"[{style}]{result.outcome.value}[/{style}]",
        )
    return table


def _summary(report: ScanReport) -> Panel:
    counts = report.counts()
    lines = [
        f"[bold]Artifacts:[/bold] {len(report.results)}",
        f"[bold]Valid:[/bold]     {counts[VerificationOutcome.VALID]}",
        f"[bold]To fetch:[/bold]  {len(report.invalid)}",
    ]
    for outcome in VerificationOutcome:
        if outcome.is_valid or not counts[outcome]:
            continue
        lines.append(f"  [dim]{outcome.value}:[/dim] {counts[outcome]}")

    complete = report.is_complete
    return Panel(
        "\n".join(lines),
        title="[bold]Complete[/bold]" if complete else "[bold]Incomplete[/bold]",
        border_style="green" if complete else "red",
        padding=(1, 2),
    )


def scan_cmd(
    manifest_file: Path = typer.Argument(
        ...,
        metavar="MANIFEST",
        help="ReleaseManifest JSON file.",
    ),
    game_dir: Path | None = typer.Option(
        None,
        "--root",
        "-r",
        help="Game directory (defaults to LAUNCHGUARD_GAME_DIR).",
    ),
    workers: int | None = typer.Option(
        None,
        "--workers",
        "-w",
        min=1,
        help="Concurrent checks (defaults to LAUNCHGUARD_MAX_WORKERS).",
    ),
    show_all: bool = typer.Option(
        False,
        "--all",
        help="List valid artifacts too.",
    ),
) -> None:
    """Scan a release manifest and list missing or corrupt artifacts.

    Exits 0 when every artifact is present and intact, 1 when some need
    fetching, and 2 when the manifest or the game directory is unusable.
    """
    try:
        manifest = ReleaseManifest.model_validate_json(manifest_file.read_bytes())
    except OSError as exc:
        console.print(f"[bold red]Cannot read manifest:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2)
    except ValidationError as exc:
        console.print(f"[bold red]Invalid manifest:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2)

    directory = GameDirectory(game_dir or config.game_dir)
    checker = IntegrityChecker(chunk_size=config.chunk_size)

    try:
        report = manifest.scan(
            directory.objects_root(),
            max_workers=workers or config.max_workers,
            checker=checker,
        )
    except StorageUnavailable as exc:
        console.print(f"[bold red]Storage unavailable:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2)

    if report.invalid or show_all or config.show_valid:
        console.print(_build_table(report, show_all or config.show_valid))
    console.print(_summary(report))

    if not report.is_complete:
        raise typer.Exit(code=1)
