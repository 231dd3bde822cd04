"""Content-address derivation for stored objects.

Layout: {objects_root}/{hash[0:2]}/{hash}

The separator is always ``/``; joining onto a real filesystem path is the
job of :class:`launchguard.core.storage.StorageRoot`.
"""

from __future__ import annotations


class InvalidHashFormat(ValueError):
    """Raised when a hash is too short to derive a content address from."""


def path_for(content_hash: str) -> str:
    """Return the relative content address ``<prefix>/<hash>`` for a hash.

    The prefix is the first two characters of the hash.
    """
    if not content_hash or len(content_hash) < 2:
        raise InvalidHashFormat(
            f"Cannot derive a content address from hash {content_hash!r}"
        )
    return f"{content_hash[:2]}/{content_hash}"
