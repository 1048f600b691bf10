"""Project root detection.

Finds the application source directory inside ``Sources/`` using a fixed
priority chain.  The first satisfied rule wins:

1. Exactly one subdirectory: that is the project.
2. A subdirectory containing ``configure.swift`` (the Vapor entry point).
3. A subdirectory named ``App``.

Anything else is ambiguous and reported with the list of candidates.
"""

from __future__ import annotations

from pathlib import Path

from vaporgen.config import GeneratorConfig
from vaporgen.errors import AmbiguousProjectError, MissingSourcesDirError, ScaffoldIOError
from vaporgen.filesystem import FileSystem, LocalFileSystem


def list_candidates(sources_path: Path, fs: FileSystem) -> list[str]:
    """Return visible subdirectory names of *sources_path* in enumeration order."""
    return [
        entry
        for entry in fs.list_dir(sources_path)
        if not entry.startswith(".") and fs.is_dir(sources_path / entry)
    ]


def locate_target(
    start_dir: Path | None = None,
    fs: FileSystem | None = None,
    config: GeneratorConfig | None = None,
) -> Path:
    """Return the absolute path of the directory to generate files into.

    Args:
        start_dir: Directory expected to contain ``Sources/``.  Defaults to
            ``config.start_dir``.
        fs: File-system capability.  Defaults to the local disk.
        config: Layout conventions.  Defaults to ``GeneratorConfig()``.

    Raises:
        MissingSourcesDirError: ``Sources/`` does not exist.
        AmbiguousProjectError: no rule selected a single directory.
        ScaffoldIOError: the project tree could not be read.
    """
    config = config or GeneratorConfig()
    fs = fs or LocalFileSystem()
    if start_dir is not None:
        config = config.model_copy(update={"start_dir": Path(start_dir)})

    sources_path = config.sources_path
    try:
        return _select_target(sources_path, fs, config)
    except OSError as exc:
        path = Path(exc.filename) if exc.filename else sources_path
        raise ScaffoldIOError(path, exc.strerror or str(exc), action="read") from exc


def _select_target(sources_path: Path, fs: FileSystem, config: GeneratorConfig) -> Path:
    if not fs.is_dir(sources_path):
        raise MissingSourcesDirError(sources_path)

    candidates = list_candidates(sources_path, fs)

    if len(candidates) == 1:
        return sources_path / candidates[0]

    for candidate in candidates:
        if fs.is_file(sources_path / candidate / config.marker_filename):
            return sources_path / candidate

    if config.fallback_target in candidates:
        return sources_path / config.fallback_target

    raise AmbiguousProjectError(sources_path, candidates)
