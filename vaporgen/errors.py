"""Exceptions raised by the vaporgen scaffolder.

Every user-facing failure derives from ``ScaffoldError`` so the CLI can
report it and exit non-zero without catching unrelated bugs.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for errors that abort a generation run."""


class ProjectNotFoundError(ScaffoldError):
    """Raised when no target source directory can be determined."""


class MissingSourcesDirError(ProjectNotFoundError):
    """Raised when the start directory has no ``Sources`` directory."""

    def __init__(self, sources_path: Path) -> None:
        self.sources_path = sources_path
        super().__init__(
            f"Could not find '{sources_path.name}' directory in {sources_path.parent}. "
            "Are you running this from the root of your project?"
        )


class AmbiguousProjectError(ProjectNotFoundError):
    """Raised when several source directories exist and none is marked."""

    def __init__(self, sources_path: Path, candidates: list[str]) -> None:
        self.sources_path = sources_path
        self.candidates = list(candidates)
        found = ", ".join(self.candidates) if self.candidates else "none"
        super().__init__(
            f"Could not auto-detect the project folder in {sources_path}. Found: {found}"
        )


class ScaffoldIOError(ScaffoldError):
    """Raised when a directory or file cannot be read or written."""

    def __init__(self, path: Path, reason: str, action: str = "write") -> None:
        self.path = path
        self.action = action
        super().__init__(f"Failed to {action} {path}: {reason}")
