"""vaporgen configuration.

Layout conventions of the target Vapor project, gathered in one typed model so
that tests and alternative layouts can override them without touching the
generator.  The configuration is built from CLI arguments on every run and is
never persisted.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class GeneratorConfig(BaseModel):
    """Conventions used to locate the project and name generated files."""

    start_dir: Path = Field(default_factory=Path.cwd, description="Directory the search starts from")
    source_extension: str = Field(default="swift", min_length=1)
    sources_dir: str = Field(default="Sources")
    marker_stem: str = Field(default="configure", description="Stem of the app entry file")
    fallback_target: str = Field(default="App")
    models_dir: str = Field(default="Models")
    migrations_dir: str = Field(default="Migrations")
    controllers_dir: str = Field(default="Controllers")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def sources_path(self) -> Path:
        """Absolute path of the ``Sources`` directory under ``start_dir``."""
        return self.start_dir.resolve() / self.sources_dir

    @property
    def marker_filename(self) -> str:
        """File whose presence marks the application target (``configure.swift``)."""
        return f"{self.marker_stem}.{self.source_extension}"

    def model_filename(self, name: str) -> str:
        return f"{name}.{self.source_extension}"

    def migration_filename(self, name: str) -> str:
        return f"Create{name}.{self.source_extension}"

    def controller_filename(self, name: str) -> str:
        return f"{name}Controller.{self.source_extension}"
