"""Release manifest: the artifacts one release needs on local storage."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from launchguard.models.artifacts import ArtifactRecord, AssetRecord, LibraryRecord
from launchguard.models.outcomes import ScanReport

if TYPE_CHECKING:
    from launchguard.core.integrity import IntegrityChecker
    from launchguard.core.storage import StorageRoot


class ReleaseManifest(BaseModel):
    """The declared assets and libraries for one release.

    Both collections behave as ordered sets: duplicates (by record
    equality) are dropped at construction, first occurrence wins. The
    manifest is frozen; scanning it never changes it.
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(min_length=1)
    release_type: str | None = None  # "release", "snapshot", ...; None if unknown
    asset_index: str | None = None
    legacy: bool = False  # pre-1.7.10 releases using the legacy asset index
    assets: tuple[AssetRecord, ...] = ()
    libraries: tuple[LibraryRecord, ...] = ()

    @field_validator("assets", "libraries")
    @classmethod
    def _dedupe(cls, records: tuple[ArtifactRecord, ...]) -> tuple[ArtifactRecord, ...]:
        return tuple(dict.fromkeys(records))

    @property
    def asset_index_name(self) -> str:
        """Name of the asset index; ``"legacy"`` for legacy releases."""
        if self.legacy:
            return "legacy"
        return self.asset_index or self.version

    @property
    def artifacts(self) -> tuple[ArtifactRecord, ...]:
        """Assets followed by libraries."""
        return (*self.assets, *self.libraries)

    # ------------------------------------------------------------------
    # Completeness
    # ------------------------------------------------------------------

    def scan(
        self,
        root: StorageRoot,
        *,
        max_workers: int = 1,
        cancel: threading.Event | None = None,
        checker: IntegrityChecker | None = None,
    ) -> ScanReport:
        """Check every artifact under ``root`` and report each outcome."""
        return self._scan(root, self.artifacts, max_workers, cancel, checker)

    def missing_or_invalid(
        self,
        root: StorageRoot,
        *,
        max_workers: int = 1,
        cancel: threading.Event | None = None,
        checker: IntegrityChecker | None = None,
    ) -> frozenset[ArtifactRecord]:
        """Return every artifact that is absent, wrong-sized or corrupt.

        An empty set means the release is complete under ``root``.
        """
        return self.scan(
            root, max_workers=max_workers, cancel=cancel, checker=checker
        ).missing_or_invalid

    def missing_assets(self, root: StorageRoot, **kwargs) -> frozenset[ArtifactRecord]:
        return self._scan(root, self.assets, **kwargs).missing_or_invalid

    def missing_libraries(self, root: StorageRoot, **kwargs) -> frozenset[ArtifactRecord]:
        return self._scan(root, self.libraries, **kwargs).missing_or_invalid

    def _scan(
        self,
        root: StorageRoot,
        records: tuple[ArtifactRecord, ...],
        max_workers: int = 1,
        cancel: threading.Event | None = None,
        checker: IntegrityChecker | None = None,
    ) -> ScanReport:
        from launchguard.core.scanner import ManifestScanner

        scanner = ManifestScanner(checker=checker, max_workers=max_workers)
        results = scanner.scan(root, records, cancel=cancel)
        return ScanReport(version=self.version, results=tuple(results))

    def __str__(self) -> str:
        return self.version
