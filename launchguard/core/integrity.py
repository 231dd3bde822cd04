"""Integrity checks for content-addressed objects.

An object is valid when a regular file exists at its content address,
its length equals the expected size, and its SHA-1 equals the expected
hash. The size is compared first so obviously wrong files are never
hashed.

Two APIs are offered:

- ``verify`` returns a plain bool and is what fetch decisions use.
- ``reporting_verify`` returns a :class:`VerificationOutcome` that says
  which check failed.

Neither raises for per-file problems. An ``OSError`` while inspecting or
reading the file is reported as ``IO_ERROR`` (and ``False``).
"""

from __future__ import annotations

import logging
import os
import stat

from launchguard.core.hasher import DEFAULT_CHUNK_SIZE, hex_to_bytes, sha1_file
from launchguard.core.storage import StorageRoot
from launchguard.models.artifacts import ArtifactRecord
from launchguard.models.outcomes import VerificationOutcome, VerificationResult

logger = logging.getLogger(__name__)


class IntegrityChecker:
    """Checks objects under a :class:`StorageRoot` against size and SHA-1.

    Holds no per-call state, so one instance may be shared between
    threads. Every call opens, reads and closes its own file handle.

    Parameters
    ----------
    chunk_size:
        Bytes read per step while hashing.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._chunk_size = chunk_size

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    # ------------------------------------------------------------------
    # Boolean API
    # ------------------------------------------------------------------

    def verify(self, root: StorageRoot, expected_size: int, expected_hash: str) -> bool:
        """Return True iff the object for ``expected_hash`` is present and intact."""
        return self.reporting_verify(root, expected_size, expected_hash).is_valid

    # ------------------------------------------------------------------
    # Detailed API
    # ------------------------------------------------------------------

    def reporting_verify(
        self, root: StorageRoot, expected_size: int, expected_hash: str
    ) -> VerificationOutcome:
        """Check one object and say which check, if any, failed."""
        outcome, _ = self._check(root, expected_size, expected_hash)
        return outcome

    def verify_record(self, root: StorageRoot, record: ArtifactRecord) -> VerificationResult:
        """Check the object behind ``record`` and wrap the outcome with it."""
        outcome, detail = self._check(root, record.size, record.content_hash)
        return VerificationResult(record=record, outcome=outcome, detail=detail)

    def _check(
        self, root: StorageRoot, expected_size: int, expected_hash: str
    ) -> tuple[VerificationOutcome, str | None]:
        path = root.resolve(expected_hash)

        try:
            st = os.stat(path)
        except FileNotFoundError:
            return VerificationOutcome.MISSING, None
        except NotADirectoryError:
            # The prefix directory is a file, so the object cannot exist.
            return VerificationOutcome.MISSING, None
        except OSError as exc:
            logger.warning("Cannot stat %s: %s", path, exc)
            return VerificationOutcome.IO_ERROR, str(exc)

        if not stat.S_ISREG(st.st_mode):
            return VerificationOutcome.MISSING, None

        if st.st_size != expected_size:
            logger.debug(
                "Size mismatch for %s: expected %d, found %d",
                expected_hash, expected_size, st.st_size,
            )
            return VerificationOutcome.SIZE_MISMATCH, None

        try:
            actual = sha1_file(path, self._chunk_size)
        except OSError as exc:
            logger.warning("Cannot read %s: %s", path, exc)
            return VerificationOutcome.IO_ERROR, str(exc)

        if actual != hex_to_bytes(expected_hash):
            logger.debug("Hash mismatch for %s: found %s", expected_hash, actual.hex())
            return VerificationOutcome.HASH_MISMATCH, None

        return VerificationOutcome.VALID, None


_default_checker = IntegrityChecker()


def verify(root: StorageRoot, expected_size: int, expected_hash: str) -> bool:
    """Module-level shortcut for :meth:`IntegrityChecker.verify`."""
    return _default_checker.verify(root, expected_size, expected_hash)


def reporting_verify(
    root: StorageRoot, expected_size: int, expected_hash: str
) -> VerificationOutcome:
    """Module-level shortcut for :meth:`IntegrityChecker.reporting_verify`."""
    return _default_checker.reporting_verify(root, expected_size, expected_hash)
