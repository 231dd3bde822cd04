"""Required-artifact records: assets and libraries (immutable)."""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    field_validator,
)

from launchguard.core.content_address import path_for

SHA1_PATTERN = r"^[0-9a-f]{40}$"


class InvalidArtifactError(ValueError):
    """Raised when a record is built from malformed manifest data.

    Only ``ArtifactRecord.of()`` raises this. Keyword construction and
    JSON loading raise ``pydantic.ValidationError`` instead; both are
    ``ValueError`` subclasses, so catch ``ValueError`` to handle either.
    """


class ArtifactRecord(BaseModel):
    """One required file, identified by its SHA-1 and size.

    The content_hash is both the integrity check and the storage key.
    Two records are equal iff every field is equal.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str
    content_hash: str = Field(pattern=SHA1_PATTERN)  # 40 lowercase hex chars
    size: StrictInt = Field(ge=0)

    @field_validator("identifier")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @classmethod
    def of(cls, identifier: str, content_hash: str, size: int, **extra: Any):
        """Build a record, raising ``InvalidArtifactError`` on bad input."""
        try:
            return cls(
                identifier=identifier, content_hash=content_hash, size=size, **extra
            )
        except ValidationError as exc:
            raise InvalidArtifactError(
                f"Invalid {cls.__name__} {identifier!r}: {exc}"
            ) from exc

    @property
    def path(self) -> str:
        """Content address of this record: ``<hash[0:2]>/<hash>``."""
        return path_for(self.content_hash)

    def to_display_string(self) -> str:
        return f"{self.identifier} [hash={self.content_hash}, size={self.size}]"

    def __str__(self) -> str:
        return self.to_display_string()


class AssetRecord(ArtifactRecord):
    """A game asset, identified by its virtual path (e.g. ``minecraft/sounds/x.ogg``)."""

    @property
    def virtual_path(self) -> str:
        return self.identifier


class LibraryRecord(ArtifactRecord):
    """A library, identified by a ``group:artifact:version[:classifier]`` coordinate.

    Libraries are checked at their content address like assets.
    """

    @field_validator("identifier")
    @classmethod
    def _coordinate(cls, value: str) -> str:
        parts = value.split(":")
        if len(parts) not in (3, 4) or not all(parts):
            raise ValueError(
                f"expected group:artifact:version[:classifier], got {value!r}"
            )
        return value
