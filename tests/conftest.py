"""Shared pytest fixtures for the vaporgen test suite.

Provides reusable fixtures for:
- An in-memory ``FileSystem`` double with failure injection
- Vapor project layouts (single target, multi-target, marked, ambiguous)
- ``GeneratorConfig`` instances rooted at the fake or a temporary project
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Callable

import pytest

from vaporgen.config import GeneratorConfig


FAKE_ROOT = Path("/project")


# ---------------------------------------------------------------------------
# In-memory file system
# ---------------------------------------------------------------------------

class InMemoryFileSystem:
    """Dictionary-backed ``FileSystem`` for tests.

    Paths listed in *fail_on* raise ``PermissionError`` when listed, created
    or written to, which lets tests simulate a failure in the middle of a run.
    """

    def __init__(
        self,
        dirs: Iterable[str | Path] = (),
        files: dict[str | Path, str] | None = None,
        fail_on: Iterable[str | Path] = (),
    ) -> None:
        self.dirs: set[Path] = set()
        self.files: dict[Path, str] = {}
        self.fail_on = {Path(p) for p in fail_on}
        self.writes: list[Path] = []
        for d in dirs:
            self._add_dir(Path(d))
        for path, content in (files or {}).items():
            self._add_dir(Path(path).parent)
            self.files[Path(path)] = content

    def _add_dir(self, path: Path) -> None:
        self.dirs.add(path)
        self.dirs.update(path.parents)

    def _check(self, path: Path) -> None:
        if path in self.fail_on:
            raise PermissionError(13, "Permission denied", str(path))

    def is_dir(self, path: Path) -> bool:
        return Path(path) in self.dirs

    def is_file(self, path: Path) -> bool:
        return Path(path) in self.files

    def list_dir(self, path: Path) -> list[str]:
        path = Path(path)
        self._check(path)
        if path not in self.dirs:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        entries = {p.name for p in self.dirs if p.parent == path and p != path}
        entries.update(p.name for p in self.files if p.parent == path)
        return sorted(entries)

    def make_dirs(self, path: Path) -> None:
        path = Path(path)
        self._check(path)
        self._add_dir(path)

    def write_text(self, path: Path, content: str) -> None:
        path = Path(path)
        self._check(path)
        if path.parent not in self.dirs:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        self.files[path] = content
        self.writes.append(path)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_fs() -> Callable[..., InMemoryFileSystem]:
    """Factory for custom in-memory layouts."""
    return InMemoryFileSystem


@pytest.fixture
def fake_config() -> GeneratorConfig:
    """Config rooted at the in-memory project root."""
    return GeneratorConfig(start_dir=FAKE_ROOT)


@pytest.fixture
def single_app_fs() -> InMemoryFileSystem:
    """A project with a single ``Sources/App`` target."""
    return InMemoryFileSystem(dirs=[FAKE_ROOT / "Sources" / "App"])


@pytest.fixture
def vapor_project(tmp_path: Path) -> Path:
    """A real on-disk Vapor project with ``Sources/App/configure.swift``."""
    root = tmp_path / "MyVaporApp"
    app = root / "Sources" / "App"
    app.mkdir(parents=True)
    (app / "configure.swift").write_text("import Vapor\n", encoding="utf-8")
    (root / "Package.swift").write_text("// swift-tools-version: 5.9\n", encoding="utf-8")
    return root


@pytest.fixture
def umask_022():
    """Run the test with the common ``022`` umask, restoring the old one after."""
    previous = os.umask(0o022)
    yield
    os.umask(previous)
