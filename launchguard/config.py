"""Runtime configuration — env-driven via pydantic-settings.

Reads LAUNCHGUARD_* environment variables and an optional .env file in the
working directory.

Examples
--------
Override via environment::

    export LAUNCHGUARD_GAME_DIR=/home/me/.minecraft
    export LAUNCHGUARD_MAX_WORKERS=8
    export LAUNCHGUARD_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LaunchGuardConfig(BaseSettings):
    """Configuration with environment variable overrides."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LAUNCHGUARD_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Game directory whose assets/objects tree is checked
    game_dir: Path = Path(".minecraft")

    # Verification
    chunk_size: int = Field(default=8192, gt=0)
    max_workers: int = Field(default=1, ge=1)  # 1 = serial scan

    # CLI output
    show_valid: bool = False


# Module-level singleton — import as `from launchguard.config import config`
config = LaunchGuardConfig()
