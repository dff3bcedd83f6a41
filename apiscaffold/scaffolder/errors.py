"""Exceptions raised by the scaffolding engine.

``InvalidContext`` is raised before any I/O.  ``PathTraversal``,
``UnboundVariable`` and ``InvalidTemplate`` indicate a broken catalog and are
never collected into a ``GenerationResult``.  ``FilesystemError`` is reported per artifact.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error raised by the scaffolder."""


class InvalidContext(ScaffoldError):
    """Raised when the variable context cannot be built (e.g. empty name)."""


class PathTraversal(ScaffoldError):
    """Raised when a relative path would resolve outside the project root."""

    def __init__(self, root: Path, relative_path: str) -> None:
        self.root = root
        self.relative_path = relative_path
        super().__init__(f"Path {relative_path!r} escapes project root {root}")


class UnboundVariable(ScaffoldError):
    """Raised when a template references a variable the context does not define."""

    def __init__(self, variable: str, template_name: str | None = None) -> None:
        self.variable = variable
        self.template_name = template_name
        where = f" in {template_name}" if template_name else ""
        super().__init__(f"Unbound template variable {variable!r}{where}")


class InvalidTemplate(ScaffoldError):
    """Raised when a template cannot be parsed."""

    def __init__(
        self, message: str, template_name: str | None = None, lineno: int | None = None
    ) -> None:
        self.message = message
        self.template_name = template_name
        self.lineno = lineno
        where = f" in {template_name}" if template_name else ""
        line = f" (line {lineno})" if lineno else ""
        super().__init__(f"Template syntax error{where}{line}: {message}")


class FilesystemError(ScaffoldError):
    """Raised when a directory or file cannot be created on disk.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")
