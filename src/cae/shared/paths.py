"""Project path resolution."""

from __future__ import annotations

import os
from pathlib import Path

from cae.errors import PathNotFoundError


def resolve_project_path(project_path: str, *, cwd: str | Path | None = None) -> Path:
    """Turn a user-supplied project path into an absolute root.

    A path starting with a separator is taken as absolute; anything else is
    joined to ``cwd`` (the process working directory by default).

    Raises ``PathNotFoundError`` if the result does not exist.
    """
    if project_path.startswith(("/", os.sep)):
        full_path = Path(project_path)
    else:
        base = Path(cwd) if cwd is not None else Path.cwd()
        full_path = base / project_path

    try:
        exists = full_path.exists()
    except OSError as exc:
        raise PathNotFoundError(f"Cannot access project path {project_path}: {exc}") from exc
    if not exists:
        raise PathNotFoundError(f"Project path not found: {project_path}")
    return full_path.absolute()
