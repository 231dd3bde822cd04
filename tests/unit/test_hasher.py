"""Tests for the SHA-1 helpers."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from launchguard.core.hasher import hex_to_bytes, sha1_file, sha1_hex


class TestSha1:
    def test_known_vector(self):
        assert sha1_hex(b"test") == "a94a8fe5ccb19ba61c4c0873d391e987982fbbd3"

    def test_empty_input(self):
        assert sha1_hex(b"") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"

    def test_hex_is_lowercase(self):
        assert sha1_hex(b"abc") == sha1_hex(b"abc").lower()

    @pytest.mark.parametrize("chunk_size", [1, 7, 8192, 1 << 20])
    def test_streaming_matches_one_shot(self, tmp_path: Path, chunk_size: int):
        data = bytes(range(256)) * 100
        path = tmp_path / "blob"
        path.write_bytes(data)
        assert sha1_file(path, chunk_size) == hashlib.sha1(data).digest()

    def test_missing_file_raises_oserror(self, tmp_path: Path):
        with pytest.raises(OSError):
            sha1_file(tmp_path / "nope")


class TestHexToBytes:
    def test_round_trip(self):
        assert hex_to_bytes("00ff10") == b"\x00\xff\x10"

    def test_invalid_hex(self):
        assert hex_to_bytes("zz") is None

    def test_odd_length(self):
        assert hex_to_bytes("abc") is None
