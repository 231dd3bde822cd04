"""launchguard CLI — Typer-based command-line interface.

Provides the ``launchguard`` command with subcommands for deriving content
addresses, checking single objects and scanning whole release manifests.

All output uses Rich for formatted terminal display.
"""
