"""apiscaffold scaffolder -- materializes the Express API blueprint on disk.

Quick usage::

    from apiscaffold.scaffolder import generate_project

    result = await generate_project("my-api")
    assert result.success
"""

from apiscaffold.scaffolder.catalog import DEFAULT_CATALOG, FileSpec, TemplateCatalog
from apiscaffold.scaffolder.context import VariableContext
from apiscaffold.scaffolder.errors import (
    FilesystemError,
    InvalidContext,
    InvalidTemplate,
    PathTraversal,
    ScaffoldError,
    UnboundVariable,
)
from apiscaffold.scaffolder.generator import (
    GenerationResult,
    ProjectGenerator,
    generate,
    generate_project,
)
from apiscaffold.scaffolder.materializer import ArtifactEvent, ArtifactKind, Materializer
from apiscaffold.scaffolder.paths import resolve
from apiscaffold.scaffolder.templates import TemplateRenderer, render

__all__ = [
    "DEFAULT_CATALOG",
    "ArtifactEvent",
    "ArtifactKind",
    "FileSpec",
    "FilesystemError",
    "GenerationResult",
    "InvalidContext",
    "InvalidTemplate",
    "Materializer",
    "PathTraversal",
    "ProjectGenerator",
    "ScaffoldError",
    "TemplateCatalog",
    "TemplateRenderer",
    "UnboundVariable",
    "VariableContext",
    "generate",
    "generate_project",
    "render",
    "resolve",
]
