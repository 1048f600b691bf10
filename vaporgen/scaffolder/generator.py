"""Resource scaffolding orchestrator.

Takes a resource name and its field declarations and writes the Fluent model,
the Fluent migration and the Vapor route controller into the project's
application target.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, Field
from rich.markup import escape

from vaporgen.config import GeneratorConfig
from vaporgen.errors import ScaffoldIOError
from vaporgen.fields import (
    ResourceField,
    capitalize_name,
    is_swift_identifier,
    parse_fields,
)
from vaporgen.filesystem import FileSystem, LocalFileSystem
from vaporgen.locator import locate_target
from vaporgen.utils import print_created, print_info, print_warning

from .templates import TemplateRenderer


MODEL_TEMPLATE = "model.swift.j2"
MIGRATION_TEMPLATE = "migration.swift.j2"
CONTROLLER_TEMPLATE = "controller.swift.j2"


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class GenerationResult(BaseModel):
    """Outcome of a successful run."""

    resource_name: str
    target_dir: Path
    written: list[Path] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ResourceGenerator:
    """Scaffolds the three source files of a resource.

    The render methods are pure; only :meth:`write` touches the file system,
    always through the injected ``FileSystem``.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        fs: FileSystem | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.fs = fs or LocalFileSystem()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self, name: str, raw_fields: Sequence[str] = ()) -> GenerationResult:
        """Run the whole pipeline for one resource.

        Args:
            name: Resource name as typed by the user; it is capitalized first.
            raw_fields: ``name[:type]`` tokens in declaration order.

        Returns:
            A ``GenerationResult`` listing the written files.

        Raises:
            ProjectNotFoundError: the target directory cannot be determined.
            ScaffoldIOError: the project tree cannot be read, or a directory
                or file cannot be written.  Files written before the failure
                are left in place.
        """
        resource_name = capitalize_name(name)
        print_info(f"Generating files for resource: [bold]{escape(resource_name)}[/bold]...")

        fields = parse_fields(raw_fields)
        self._warn_invalid_identifiers(resource_name, fields)

        target = locate_target(fs=self.fs, config=self.config)
        print_info(f"Generating {escape(resource_name)} with {len(fields)} field(s)...")

        result = GenerationResult(resource_name=resource_name, target_dir=target)
        result.written.append(
            self.write(
                self.render_model(resource_name, fields),
                target / self.config.models_dir,
                self.config.model_filename(resource_name),
            )
        )
        result.written.append(
            self.write(
                self.render_migration(resource_name, fields),
                target / self.config.migrations_dir,
                self.config.migration_filename(resource_name),
            )
        )
        result.written.append(
            self.write(
                self.render_controller(resource_name),
                target / self.config.controllers_dir,
                self.config.controller_filename(resource_name),
            )
        )
        return result

    # -- Rendering ---------------------------------------------------------

    def render_model(self, name: str, fields: Sequence[ResourceField]) -> str:
        """Render the Fluent model class."""
        return self.renderer.render(MODEL_TEMPLATE, {"name": name, "fields": list(fields)})

    def render_migration(self, name: str, fields: Sequence[ResourceField]) -> str:
        """Render the create/delete migration for the model's schema."""
        return self.renderer.render(MIGRATION_TEMPLATE, {"name": name, "fields": list(fields)})

    def render_controller(self, name: str) -> str:
        """Render the route collection with the list and create endpoints."""
        return self.renderer.render(CONTROLLER_TEMPLATE, {"name": name})

    # -- Writing -----------------------------------------------------------

    def write(self, content: str, directory: Path, filename: str) -> Path:
        """Write *content* to ``directory/filename``, creating *directory* if needed.

        Existing files are overwritten.

        Raises:
            ScaffoldIOError: wraps any ``OSError`` from the file system.
        """
        directory = Path(directory)
        path = directory / filename
        try:
            if not self.fs.is_dir(directory):
                self.fs.make_dirs(directory)
            self.fs.write_text(path, content)
        except OSError as exc:
            raise ScaffoldIOError(path, exc.strerror or str(exc)) from exc
        print_created(path)
        return path

    # -- Helpers -----------------------------------------------------------

    def _warn_invalid_identifiers(
        self, resource_name: str, fields: Sequence[ResourceField]
    ) -> None:
        """Warn about names that will not compile; generation still proceeds."""
        if not is_swift_identifier(resource_name):
            print_warning(
                f"Resource name '{resource_name}' is not a valid Swift identifier; "
                "the generated code will not compile as-is."
            )
        for field in fields:
            if not is_swift_identifier(field.name):
                print_warning(
                    f"Field name '{field.name}' is not a valid Swift identifier."
                )
