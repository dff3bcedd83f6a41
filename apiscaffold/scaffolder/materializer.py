"""Create directories and write files for a generation run.

Every attempted artifact produces an ``ArtifactEvent`` which is returned to
the caller and pushed to any subscribed listeners (the CLI uses one to print
progress).  ``OSError`` from the filesystem is converted into a failed event
carrying a ``FilesystemError``; it never aborts the run.

File writes always overwrite: an existing file at the target path is
replaced in full, with no merge and no backup.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import FilesystemError
from .paths import resolve


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class ArtifactKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"


class ArtifactEvent(BaseModel):
    """Outcome of creating a single directory or file."""

    kind: ArtifactKind
    path: Path = Field(..., description="Resolved absolute target path")
    relative_path: str = Field(..., description="Catalog-relative path")
    success: bool = Field(default=True)
    error_kind: Optional[str] = Field(default=None, description="Exception class name on failure")
    error: Optional[str] = Field(default=None, description="Human-readable failure message")
    exception: Optional[FilesystemError] = Field(
        default=None, exclude=True, description="The raised error, chained to the OSError"
    )

    model_config = ConfigDict(arbitrary_types_allowed=True)


ArtifactListener = Callable[[ArtifactEvent], None]


# ---------------------------------------------------------------------------
# Materializer
# ---------------------------------------------------------------------------


class Materializer:
    """Turns resolved paths and rendered content into filesystem artifacts.

    Blocking filesystem calls run in a worker thread via
    ``asyncio.to_thread``; artifacts are still processed one at a time.
    """

    def __init__(self, listeners: Iterable[ArtifactListener] | None = None) -> None:
        self._listeners: list[ArtifactListener] = list(listeners or [])

    def subscribe(self, listener: ArtifactListener) -> None:
        """Register *listener* to receive every ``ArtifactEvent``."""
        self._listeners.append(listener)

    async def create_directories(
        self, root: str | Path, paths: Iterable[str]
    ) -> list[ArtifactEvent]:
        """Create every directory in *paths* under *root*, in order."""
        return [await self.create_directory(root, rel) for rel in paths]

    async def create_directory(self, root: str | Path, relative_path: str) -> ArtifactEvent:
        """Create ``root/relative_path`` and any missing ancestors.

        Creating a directory that already exists is not an error.
        """
        target = resolve(root, relative_path)
        try:
            await asyncio.to_thread(_make_dirs, target)
        except OSError as exc:
            return self._failed(ArtifactKind.DIRECTORY, target, relative_path, exc)
        return self._emit(
            ArtifactEvent(kind=ArtifactKind.DIRECTORY, path=target, relative_path=relative_path)
        )

    async def write_file(
        self, root: str | Path, relative_path: str, content: str
    ) -> ArtifactEvent:
        """Write *content* to ``root/relative_path``, replacing any existing file.

        Missing parent directories are created first.
        """
        target = resolve(root, relative_path)
        try:
            await asyncio.to_thread(_write_file, target, content)
        except OSError as exc:
            return self._failed(ArtifactKind.FILE, target, relative_path, exc)
        return self._emit(
            ArtifactEvent(kind=ArtifactKind.FILE, path=target, relative_path=relative_path)
        )

    # -- Internal ----------------------------------------------------------

    def _failed(
        self, kind: ArtifactKind, target: Path, relative_path: str, exc: OSError
    ) -> ArtifactEvent:
        error = FilesystemError(target, exc.strerror or str(exc))
        error.__cause__ = exc
        return self._emit(
            ArtifactEvent(
                kind=kind,
                path=target,
                relative_path=relative_path,
                success=False,
                error_kind=type(error).__name__,
                error=str(error),
                exception=error,
            )
        )

    def _emit(self, event: ArtifactEvent) -> ArtifactEvent:
        for listener in self._listeners:
            listener(event)
        return event


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _make_dirs(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
