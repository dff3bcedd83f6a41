"""Main scaffolding orchestrator.

Takes a project name and materializes the static Express + MongoDB API
blueprint from :mod:`.catalog` under ``<output_dir>/<project_name>``:
directories first, then every rendered file.

Quick usage::

    from apiscaffold.scaffolder import generate_project

    result = await generate_project("mytiffin", "/tmp/output")
    if not result.success:
        for event in result.failed:
            print(event.relative_path, event.error_kind)
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, Field, computed_field

from .catalog import DEFAULT_CATALOG, TemplateCatalog
from .context import VariableContext
from .materializer import ArtifactEvent, ArtifactKind, ArtifactListener, Materializer
from .paths import resolve
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class GenerationResult(BaseModel):
    """Outcome of one generation run, in artifact order."""

    root: Path = Field(..., description="Generated project root")
    artifacts: list[ArtifactEvent] = Field(default_factory=list)

    @computed_field  # type: ignore[misc]
    @property
    def success(self) -> bool:
        """True when every directory and file was created."""
        return all(a.success for a in self.artifacts)

    @property
    def created(self) -> list[ArtifactEvent]:
        return [a for a in self.artifacts if a.success]

    @property
    def failed(self) -> list[ArtifactEvent]:
        return [a for a in self.artifacts if not a.success]

    @property
    def files(self) -> list[ArtifactEvent]:
        return [a for a in self.artifacts if a.kind is ArtifactKind.FILE]

    @property
    def directories(self) -> list[ArtifactEvent]:
        return [a for a in self.artifacts if a.kind is ArtifactKind.DIRECTORY]


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Sequences directory creation before file creation for one catalog.

    Templates are rendered and every path is resolved before the first
    filesystem call, so a broken catalog (``UnboundVariable`` or
    ``PathTraversal``) fails without leaving a partial tree.  Filesystem
    failures after that point are recorded per artifact and the run
    continues.
    """

    def __init__(
        self,
        catalog: TemplateCatalog = DEFAULT_CATALOG,
        *,
        renderer: TemplateRenderer | None = None,
        materializer: Materializer | None = None,
        listeners: Iterable[ArtifactListener] | None = None,
    ) -> None:
        self.catalog = catalog
        self.renderer = renderer or TemplateRenderer()
        self.materializer = materializer or Materializer()
        for listener in listeners or []:
            self.materializer.subscribe(listener)

    # -- Public API --------------------------------------------------------

    async def generate(self, root: str | Path, context: VariableContext) -> GenerationResult:
        """Materialize the catalog under *root*.

        Args:
            root: The project root directory (created if missing).
            context: Variables substituted into every content template.

        Returns:
            A ``GenerationResult`` listing every attempted artifact.
        """
        root = Path(root)
        rendered = self._render_files(root, context)
        for directory in self.catalog.list_directories():
            resolve(root, directory)

        result = GenerationResult(root=root)

        # 1. Directories
        result.artifacts.extend(
            await self.materializer.create_directories(root, self.catalog.list_directories())
        )

        # 2. Files (parents are created by the write itself)
        for relative_path, content in rendered:
            result.artifacts.append(
                await self.materializer.write_file(root, relative_path, content)
            )

        return result

    # -- Rendering ---------------------------------------------------------

    def _render_files(self, root: Path, context: VariableContext) -> list[tuple[str, str]]:
        rendered: list[tuple[str, str]] = []
        for spec in self.catalog.list_files():
            resolve(root, spec.path)
            content = self.renderer.render(spec.template, context, spec.path)
            rendered.append((spec.path, content))
        return rendered


# ---------------------------------------------------------------------------
# Convenience entry points
# ---------------------------------------------------------------------------


async def generate(
    root: str | Path, catalog: TemplateCatalog, context: VariableContext
) -> GenerationResult:
    """Materialize *catalog* under *root* with *context*."""
    return await ProjectGenerator(catalog).generate(root, context)


async def generate_project(
    project_name: str,
    output_dir: str | Path | None = None,
    *,
    catalog: TemplateCatalog = DEFAULT_CATALOG,
    listeners: Iterable[ArtifactListener] | None = None,
) -> GenerationResult:
    """Generate the project *project_name* inside *output_dir*.

    The context is validated before anything touches the disk: an empty
    name raises ``InvalidContext`` and no directory is created.

    Args:
        project_name: Used verbatim as the root directory name.
        output_dir: Parent directory; defaults to the current working
            directory.
        catalog: Blueprint to materialize.
        listeners: Callables receiving each ``ArtifactEvent`` as it happens.
    """
    context = VariableContext(project_name)
    base = Path(output_dir) if output_dir is not None else Path.cwd()
    generator = ProjectGenerator(catalog, listeners=listeners)
    return await generator.generate(base / context.name, context)
