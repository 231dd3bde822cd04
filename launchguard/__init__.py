"""launchguard: integrity and completeness checks for game-launch artifacts.

Given the assets and libraries a release declares (each with a SHA-1 and a
size), works out which are present and intact in the local game directory
and which must be fetched again:

  - Content addressing: objects live at ``<objects>/<hash[0:2]>/<hash>``
  - Streaming SHA-1 verification with a size pre-check
  - Boolean ``verify`` plus a detailed ``VerificationOutcome``
  - Serial or thread-pooled manifest scans with cancellation
"""

__version__ = "0.1.0"
__description__ = "Content-addressed integrity checks for game-launch artifacts"

from launchguard.core.content_address import InvalidHashFormat, path_for
from launchguard.core.integrity import IntegrityChecker, reporting_verify, verify
from launchguard.core.scanner import ManifestScanner, ScanCancelled
from launchguard.core.storage import GameDirectory, StorageRoot, StorageUnavailable
from launchguard.models import (
    ArtifactRecord,
    AssetRecord,
    InvalidArtifactError,
    LibraryRecord,
    ReleaseManifest,
    ScanReport,
    VerificationOutcome,
    VerificationResult,
)

__all__ = [
    "ArtifactRecord",
    "AssetRecord",
    "GameDirectory",
    "IntegrityChecker",
    "InvalidArtifactError",
    "InvalidHashFormat",
    "LibraryRecord",
    "ManifestScanner",
    "ReleaseManifest",
    "ScanCancelled",
    "ScanReport",
    "StorageRoot",
    "StorageUnavailable",
    "VerificationOutcome",
    "VerificationResult",
    "path_for",
    "reporting_verify",
    "verify",
    "__version__",
]
