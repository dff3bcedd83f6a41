"""Variable context for template interpolation.

A context is built from a single project name and exposes exactly two
variables to the catalog templates:

* ``name`` -- the project name, verbatim.
* ``name_lower`` -- the project name lower-cased (used for the MongoDB
  database name).  This is the ``{nameLower}`` placeholder; templates must
  spell it ``{{ name_lower }}``, and ``{{ nameLower }}`` is rejected as an
  unbound variable when the catalog is built.

The project name is expected to be a single valid path component.  It is not
sanitised here; callers are responsible for rejecting separators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import InvalidContext


# Names every catalog template may reference.  Anything else is an
# authoring bug caught when the catalog is loaded.
CONTEXT_VARIABLES: frozenset[str] = frozenset({"name", "name_lower"})


@dataclass(frozen=True)
class VariableContext:
    """Immutable substitution values for one generation run.

    Variables are snake_case: the lower-cased name is ``name_lower``.
    """

    project_name: str

    def __post_init__(self) -> None:
        if not isinstance(self.project_name, str) or not self.project_name:
            raise InvalidContext("Project name must be a non-empty string")

    @property
    def name(self) -> str:
        return self.project_name

    @property
    def name_lower(self) -> str:
        return self.project_name.lower()

    def as_dict(self) -> dict[str, Any]:
        """Return the ``{variable: value}`` mapping passed to the renderer."""
        return {
            "name": self.name,
            "name_lower": self.name_lower,
        }
