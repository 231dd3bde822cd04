"""launchguard data models — all Pydantic v2, all frozen (immutable)."""

from launchguard.models.artifacts import (
    ArtifactRecord,
    AssetRecord,
    InvalidArtifactError,
    LibraryRecord,
)
from launchguard.models.outcomes import ScanReport, VerificationOutcome, VerificationResult
from launchguard.models.manifest import ReleaseManifest

__all__ = [
    # artifacts
    "ArtifactRecord",
    "AssetRecord",
    "LibraryRecord",
    "InvalidArtifactError",
    # outcomes
    "VerificationOutcome",
    "VerificationResult",
    "ScanReport",
    # manifest
    "ReleaseManifest",
]
