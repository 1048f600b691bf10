"""File-system access used by the locator and the generator.

Components receive a ``FileSystem`` explicitly instead of touching the disk
through module-level calls, so tests can substitute an in-memory double.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Minimal set of operations the scaffolder needs."""

    def is_dir(self, path: Path) -> bool: ...

    def is_file(self, path: Path) -> bool: ...

    def list_dir(self, path: Path) -> list[str]: ...

    def make_dirs(self, path: Path) -> None: ...

    def write_text(self, path: Path, content: str) -> None: ...


class LocalFileSystem:
    """``FileSystem`` backed by the real disk."""

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def is_file(self, path: Path) -> bool:
        return Path(path).is_file()

    def list_dir(self, path: Path) -> list[str]:
        """Return entry names sorted by name, so enumeration order is stable."""
        return sorted(entry.name for entry in Path(path).iterdir())

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, content: str) -> None:
        """Write *content* atomically.

        The text is written to a temporary file in the destination directory
        and renamed over *path*, so readers never observe a partial file.  The
        file keeps the mode of the one it replaces; new files get the usual
        umask-derived mode.
        """
        path = Path(path)
        mode = _target_mode(path)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                os.chmod(tmp_name, mode)
                fh.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def _target_mode(path: Path) -> int:
    """Permission bits for a file written to *path*."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
