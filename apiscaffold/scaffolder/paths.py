"""Resolve catalog-relative paths against the project root."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from .errors import PathTraversal


def resolve(root: str | Path, relative_path: str) -> Path:
    """Join *relative_path* (POSIX style) onto *root*.

    The join is purely lexical; nothing on disk is touched.  Empty and
    absolute paths are rejected, as is any path containing a ``..`` segment,
    even one that would land back inside *root*.

    Raises:
        PathTraversal: If the result would not be a path strictly below *root*.
    """
    root_path = Path(root)
    rel = PurePosixPath(relative_path)
    parts = [p for p in rel.parts if p != "."]
    if (
        not parts
        or rel.is_absolute()
        or Path(relative_path).is_absolute()
        or ".." in parts
    ):
        raise PathTraversal(root_path, relative_path)
    return root_path.joinpath(*parts)
