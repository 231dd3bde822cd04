"""Shared test fixtures for launchguard."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from launchguard.core.hasher import sha1_hex
from launchguard.core.integrity import IntegrityChecker
from launchguard.core.storage import GameDirectory, StorageRoot
from launchguard.models.artifacts import AssetRecord, LibraryRecord


@pytest.fixture
def game_dir(tmp_path: Path) -> GameDirectory:
    """Provide a game directory with an empty assets/objects tree."""
    directory = GameDirectory(tmp_path / ".minecraft")
    directory.asset_objects.mkdir(parents=True)
    return directory


@pytest.fixture
def objects_root(game_dir: GameDirectory) -> StorageRoot:
    """Provide the storage root over the game directory's asset objects."""
    return game_dir.objects_root()


@pytest.fixture
def checker() -> IntegrityChecker:
    return IntegrityChecker()


@pytest.fixture
def write_object(objects_root: StorageRoot) -> Callable[[bytes], tuple[str, int]]:
    """Factory fixture: store bytes at their content address, return (hash, size)."""

    def _write(data: bytes) -> tuple[str, int]:
        digest = sha1_hex(data)
        path = objects_root.resolve(digest)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return digest, len(data)

    return _write


@pytest.fixture
def make_asset(
    write_object: Callable[[bytes], tuple[str, int]],
) -> Callable[..., AssetRecord]:
    """Factory fixture: store bytes and return an AssetRecord describing them."""

    def _factory(virtual_path: str, data: bytes, *, store: bool = True) -> AssetRecord:
        if store:
            digest, size = write_object(data)
        else:
            digest, size = sha1_hex(data), len(data)
        return AssetRecord(identifier=virtual_path, content_hash=digest, size=size)

    return _factory


@pytest.fixture
def make_library(
    write_object: Callable[[bytes], tuple[str, int]],
) -> Callable[..., LibraryRecord]:
    """Factory fixture: store bytes and return a LibraryRecord describing them."""

    def _factory(coordinate: str, data: bytes, *, store: bool = True) -> LibraryRecord:
        if store:
            digest, size = write_object(data)
        else:
            digest, size = sha1_hex(data), len(data)
        return LibraryRecord(identifier=coordinate, content_hash=digest, size=size)

    return _factory
