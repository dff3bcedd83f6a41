"""apiscaffold configuration.

Typed settings for the CLI.  Uses a Pydantic v2 model so values are
validated at construction time and can be serialised to/from JSON or read
from environment variables.  The scaffolding engine itself never reads the
environment; only ``Config.from_env`` does.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Settings for one ``apiscaffold`` invocation."""

    project_name: str = Field(default="")
    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Parent directory of the generated project",
    )
    quiet: bool = Field(default=False, description="Suppress per-artifact output")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def project_root(self) -> Path:
        """Directory the project is generated into."""
        return self.output_dir / self.project_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            APISCAFFOLD_OUTPUT_DIR, APISCAFFOLD_QUIET.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("APISCAFFOLD_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["APISCAFFOLD_OUTPUT_DIR"])
        if os.environ.get("APISCAFFOLD_QUIET"):
            kwargs["quiet"] = os.environ["APISCAFFOLD_QUIET"].strip().lower() in _TRUTHY
        return cls(**kwargs)
