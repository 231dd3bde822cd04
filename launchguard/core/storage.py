"""Directory handles for the local game directory and its object stores.

``StorageRoot`` wraps one content-addressed subtree (normally
``assets/objects``) and turns a content address into a real path.
``GameDirectory`` knows the standard layout of a game directory and hands
out storage roots for it.

Neither class creates anything on disk. The directories are owned by the
caller; this layer only reads from them.
"""

from __future__ import annotations

from pathlib import Path

from launchguard.core.content_address import path_for


class StorageUnavailable(RuntimeError):
    """Raised when a storage root cannot be accessed at all."""


class StorageRoot:
    """A content-addressed object tree rooted at ``base_path``.

    Parameters
    ----------
    base_path:
        Directory that holds the ``<prefix>/<hash>`` entries.
    """

    def __init__(self, base_path: Path | str) -> None:
        self._base = Path(base_path)

    @property
    def base_path(self) -> Path:
        return self._base

    def resolve(self, content_hash: str) -> Path:
        """Return the absolute path of the object stored under ``content_hash``."""
        return (self._base / path_for(content_hash)).absolute()

    def ensure_accessible(self) -> None:
        """Raise ``StorageUnavailable`` unless the root is a readable directory."""
        try:
            if not self._base.is_dir():
                raise StorageUnavailable(
                    f"Storage root is missing or not a directory: {self._base}"
                )
            # Listing catches permission problems that is_dir() does not.
            next(iter(self._base.iterdir()), None)
        except OSError as exc:
            raise StorageUnavailable(
                f"Storage root cannot be read: {self._base} ({exc})"
            ) from exc

    def __repr__(self) -> str:
        return f"StorageRoot({str(self._base)!r})"


class GameDirectory:
    """The local game directory.

    Every declared artifact, asset or library, is stored under
    ``{root}/assets/objects/`` at its content address.
    """

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def assets(self) -> Path:
        return self._root / "assets"

    @property
    def asset_objects(self) -> Path:
        return self.assets / "objects"

    def objects_root(self) -> StorageRoot:
        """Return the storage root over ``assets/objects``."""
        return StorageRoot(self.asset_objects)

    def __repr__(self) -> str:
        return f"GameDirectory({str(self._root)!r})"
