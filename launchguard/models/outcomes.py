"""Verification outcome models."""

from __future__ import annotations

from collections import Counter
from enum import Enum

from pydantic import BaseModel, ConfigDict

from launchguard.models.artifacts import ArtifactRecord


class VerificationOutcome(str, Enum):
    """Why an object is, or is not, usable.

    Everything other than ``VALID`` collapses to ``False`` in the boolean
    ``verify`` API.
    """

    VALID = "valid"
    MISSING = "missing"
    SIZE_MISMATCH = "size_mismatch"
    HASH_MISMATCH = "hash_mismatch"
    IO_ERROR = "io_error"

    @property
    def is_valid(self) -> bool:
        return self is VerificationOutcome.VALID


class VerificationResult(BaseModel):
    """The outcome of checking one record against a storage root."""

    model_config = ConfigDict(frozen=True)

    record: ArtifactRecord
    outcome: VerificationOutcome
    detail: str | None = None  # OSError text for IO_ERROR

    @property
    def is_valid(self) -> bool:
        return self.outcome.is_valid


class ScanReport(BaseModel):
    """Per-record results of a manifest scan, in manifest order."""

    model_config = ConfigDict(frozen=True)

    version: str
    results: tuple[VerificationResult, ...] = ()

    @property
    def invalid(self) -> tuple[ArtifactRecord, ...]:
        """Records that are missing or invalid, in manifest order."""
        return tuple(r.record for r in self.results if not r.is_valid)

    @property
    def missing_or_invalid(self) -> frozenset[ArtifactRecord]:
        return frozenset(self.invalid)

    @property
    def is_complete(self) -> bool:
        return all(r.is_valid for r in self.results)

    def counts(self) -> dict[VerificationOutcome, int]:
        """Number of records per outcome. Outcomes that did not occur map to 0."""
        tally = Counter(r.outcome for r in self.results)
        return {outcome: tally.get(outcome, 0) for outcome in VerificationOutcome}
