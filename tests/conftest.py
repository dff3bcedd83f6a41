"""Shared pytest fixtures for the apiscaffold test suite.

Provides reusable fixtures for:
- Temporary output directories
- Variable contexts
- Small hand-built catalogs
- Recording artifact listeners
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from apiscaffold.scaffolder.catalog import FileSpec, TemplateCatalog
from apiscaffold.scaffolder.context import VariableContext
from apiscaffold.scaffolder.materializer import ArtifactEvent


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Parent directory that generated projects are written into."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    yield output_dir


@pytest.fixture
def project_root(tmp_output_dir: Path) -> Path:
    """Project root for the ``mytiffin`` project (not created yet)."""
    return tmp_output_dir / "mytiffin"


# ---------------------------------------------------------------------------
# Contexts & catalogs
# ---------------------------------------------------------------------------

@pytest.fixture
def context() -> VariableContext:
    return VariableContext("mytiffin")


@pytest.fixture
def mixed_case_context() -> VariableContext:
    """A context whose verbatim and lower-cased names differ."""
    return VariableContext("MyTiffin")


@pytest.fixture
def small_catalog() -> TemplateCatalog:
    """A three-file catalog, one of which lives in an unlisted directory."""
    return TemplateCatalog(
        directories=["src/api", "src/config"],
        files=[
            FileSpec("src/api/index.js", "// {{ name }} api\n"),
            FileSpec("src/config/db.js", "const db = '{{ name_lower }}';"),
            FileSpec("docs/guide/README.md", "# {{ name }}"),
        ],
    )


# ---------------------------------------------------------------------------
# Listeners
# ---------------------------------------------------------------------------

class RecordingListener:
    """Collects every ``ArtifactEvent`` it receives."""

    def __init__(self) -> None:
        self.events: list[ArtifactEvent] = []

    def __call__(self, event: ArtifactEvent) -> None:
        self.events.append(event)


@pytest.fixture
def recorder() -> RecordingListener:
    return RecordingListener()


# ---------------------------------------------------------------------------
# Console output
# ---------------------------------------------------------------------------

@pytest.fixture
def captured_console(monkeypatch) -> io.StringIO:
    """Redirect the shared Rich console into a wide, colourless buffer."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=400, color_system=None, soft_wrap=True)
    monkeypatch.setattr("apiscaffold.utils.console", console)
    monkeypatch.setattr("apiscaffold.cli.console", console)
    return buffer
