"""SHA-1 helpers for content addressing and integrity checks.

SHA-1 must be available in the running interpreter. It is looked up once
at import time; a build without it cannot verify anything and fails here
instead of on every call.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

DEFAULT_CHUNK_SIZE = 8192

if "sha1" not in hashlib.algorithms_available:  # pragma: no cover
    raise RuntimeError("SHA-1 is not available in this Python build")


def sha1_hex(data: bytes) -> str:
    """Return the lowercase SHA-1 hex digest of raw bytes."""
    return hashlib.sha1(data).hexdigest()


def sha1_file(path: Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """Stream a file through SHA-1 and return the raw digest.

    Reads ``chunk_size`` bytes at a time so memory use does not grow with
    the file. I/O errors propagate as ``OSError``.
    """
    digest = hashlib.sha1()
    with open(path, "rb") as fh:
        for chunk in iter(lambda: fh.read(chunk_size), b""):
            digest.update(chunk)
    return digest.digest()


def hex_to_bytes(hex_digest: str) -> bytes | None:
    """Decode a hex digest, returning ``None`` if it is not valid hex."""
    try:
        return bytes.fromhex(hex_digest)
    except ValueError:
        return None
