"""Local-disk implementation of :class:`~webbuild.core.protocols.FileSystem`."""

from __future__ import annotations

import shutil
from pathlib import Path


class LocalFileSystem:
    """Concrete :class:`FileSystem` backed by :mod:`pathlib` and :mod:`shutil`."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def remove_tree(self, path: Path) -> None:
        """Remove *path* recursively; a plain file is unlinked."""
        target = Path(path)
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()
