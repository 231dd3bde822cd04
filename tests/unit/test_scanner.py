"""Tests for ManifestScanner — serial and thread-pooled scans, cancellation."""

from __future__ import annotations

import threading

import pytest

from launchguard.core.integrity import IntegrityChecker
from launchguard.core.scanner import ManifestScanner, ScanCancelled
from launchguard.models.manifest import ReleaseManifest
from launchguard.models.outcomes import VerificationOutcome


class _CancellingChecker(IntegrityChecker):
    """Sets ``cancel`` after ``after`` checks have been made."""

    def __init__(self, cancel: threading.Event, after: int) -> None:
        super().__init__()
        self._cancel = cancel
        self._after = after
        self._lock = threading.Lock()
        self.calls = 0

    def verify_record(self, root, record):
        with self._lock:
            self.calls += 1
            if self.calls >= self._after:
                self._cancel.set()
        return super().verify_record(root, record)


class TestManifestScanner:
    def test_rejects_zero_workers(self):
        with pytest.raises(ValueError):
            ManifestScanner(max_workers=0)

    def test_serial_results_in_order(self, objects_root, make_asset):
        records = [make_asset(f"r{i}", bytes([i]) * (i + 1), store=i % 2 == 0) for i in range(6)]
        results = ManifestScanner().scan(objects_root, records)
        assert [r.record for r in results] == records
        assert [r.is_valid for r in results] == [i % 2 == 0 for i in range(6)]

    @pytest.mark.parametrize("workers", [2, 4, 16])
    def test_parallel_results_in_order(self, objects_root, make_asset, workers: int):
        records = [make_asset(f"r{i}", f"data-{i}".encode(), store=i % 4 != 1) for i in range(40)]
        results = ManifestScanner(max_workers=workers).scan(objects_root, records)
        assert [r.record for r in results] == records
        assert [r.outcome for r in results] == [
            VerificationOutcome.MISSING if i % 4 == 1 else VerificationOutcome.VALID
            for i in range(40)
        ]

    def test_cancel_before_start(self, objects_root, make_asset):
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(ScanCancelled):
            ManifestScanner().scan(objects_root, [make_asset("a", b"a")], cancel=cancel)

    def test_serial_cancel_stops_new_checks(self, objects_root, make_asset):
        records = [make_asset(f"r{i}", bytes([i])) for i in range(10)]
        cancel = threading.Event()
        checker = _CancellingChecker(cancel, after=3)
        with pytest.raises(ScanCancelled):
            ManifestScanner(checker=checker).scan(objects_root, records, cancel=cancel)
        assert checker.calls == 3

    def test_parallel_cancel_stops_new_checks(self, objects_root, make_asset):
        records = [make_asset(f"r{i}", bytes([i])) for i in range(50)]
        cancel = threading.Event()
        checker = _CancellingChecker(cancel, after=5)
        with pytest.raises(ScanCancelled):
            ManifestScanner(checker=checker, max_workers=2).scan(
                objects_root, records, cancel=cancel
            )
        # At most the checks already in flight when cancel was set may finish.
        assert checker.calls < len(records)

    def test_unset_cancel_event_is_harmless(self, objects_root, make_asset):
        records = [make_asset("a", b"a"), make_asset("b", b"b")]
        results = ManifestScanner(max_workers=2).scan(
            objects_root, records, cancel=threading.Event()
        )
        assert all(r.is_valid for r in results)


class TestConcurrentManifests:
    def test_two_manifests_scanned_concurrently(self, objects_root, make_asset):
        first = ReleaseManifest(
            version="first",
            assets=[make_asset(f"first/{i}", f"first {i}".encode(), store=i % 2 == 0)
                    for i in range(20)],
        )
        second = ReleaseManifest(
            version="second",
            assets=[make_asset(f"second/{i}", f"second {i}".encode(), store=i % 5 != 0)
                    for i in range(20)],
        )
        expected_first = first.missing_or_invalid(objects_root)
        expected_second = second.missing_or_invalid(objects_root)

        results: dict[str, list[frozenset]] = {"first": [], "second": []}

        def _run(manifest: ReleaseManifest) -> None:
            for _ in range(5):
                results[manifest.version].append(
                    manifest.missing_or_invalid(objects_root, max_workers=3)
                )

        threads = [threading.Thread(target=_run, args=(m,)) for m in (first, second)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results["first"] == [expected_first] * 5
        assert results["second"] == [expected_second] * 5
        assert len(expected_first) == 10
        assert len(expected_second) == 4
