"""Manifest scanning: check every record and collect what needs fetching.

Records are checked serially in manifest order, or on a thread pool when
``max_workers > 1``. Worker threads only return results; the calling
thread merges them, so no shared collection is written concurrently.
Results are always reported in manifest order.

Cancellation goes through a ``threading.Event``. Once set, no new checks
are started, checks already reading a file run to completion, and
``ScanCancelled`` is raised with the partial results discarded.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait

from launchguard.core.integrity import IntegrityChecker
from launchguard.core.storage import StorageRoot
from launchguard.models.artifacts import ArtifactRecord
from launchguard.models.outcomes import VerificationResult

logger = logging.getLogger(__name__)


class ScanCancelled(RuntimeError):
    """Raised when a scan is cancelled before every record was checked."""


class ManifestScanner:
    """Runs :class:`IntegrityChecker` over a sequence of records.

    Parameters
    ----------
    checker:
        The checker to use. A default one is created if not provided.
    max_workers:
        Number of concurrent checks. ``1`` scans serially.
    """

    def __init__(
        self,
        checker: IntegrityChecker | None = None,
        max_workers: int = 1,
    ) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self._checker = checker or IntegrityChecker()
        self._max_workers = max_workers

    @property
    def max_workers(self) -> int:
        return self._max_workers

    def scan(
        self,
        root: StorageRoot,
        records: Sequence[ArtifactRecord],
        cancel: threading.Event | None = None,
    ) -> list[VerificationResult]:
        """Check every record against ``root`` and return results in order.

        Raises ``StorageUnavailable`` if the root itself cannot be read and
        ``ScanCancelled`` if ``cancel`` is set before the scan finishes.
        """
        root.ensure_accessible()
        logger.debug(
            "Scanning %d records under %s (workers=%d)",
            len(records), root.base_path, self._max_workers,
        )

        if self._max_workers == 1 or len(records) <= 1:
            results = self._scan_serial(root, records, cancel)
        else:
            results = self._scan_parallel(root, records, cancel)

        invalid = sum(1 for r in results if not r.is_valid)
        logger.debug("Scan finished: %d of %d records need fetching", invalid, len(results))
        return results

    def _scan_serial(
        self,
        root: StorageRoot,
        records: Sequence[ArtifactRecord],
        cancel: threading.Event | None,
    ) -> list[VerificationResult]:
        results: list[VerificationResult] = []
        for record in records:
            if cancel is not None and cancel.is_set():
                raise ScanCancelled(
                    f"Scan cancelled after {len(results)} of {len(records)} records"
                )
            results.append(self._checker.verify_record(root, record))
        return results

    def _scan_parallel(
        self,
        root: StorageRoot,
        records: Sequence[ArtifactRecord],
        cancel: threading.Event | None,
    ) -> list[VerificationResult]:
        slots: list[VerificationResult | None] = [None] * len(records)
        pending: dict[Future[VerificationResult], int] = {}
        next_index = 0

        with ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="launchguard-scan"
        ) as executor:
            # Keep at most max_workers checks in flight so cancellation
            # takes effect before the whole manifest has been queued.
            while next_index < len(records) or pending:
                while (
                    next_index < len(records)
                    and len(pending) < self._max_workers
                    and not (cancel is not None and cancel.is_set())
                ):
                    future = executor.submit(
                        self._checker.verify_record, root, records[next_index]
                    )
                    pending[future] = next_index
                    next_index += 1

                if not pending:
                    break

                done, _ = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    slots[pending.pop(future)] = future.result()

        if cancel is not None and cancel.is_set() and any(s is None for s in slots):
            completed = sum(1 for s in slots if s is not None)
            raise ScanCancelled(
                f"Scan cancelled after {completed} of {len(records)} records"
            )
        return [s for s in slots if s is not None]
