"""Non-throwing text file reader.

Absence and read failures are reported in the returned ``FileContent``
rather than raised, so callers branch on ``exists`` instead of catching.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class FileContent(BaseModel):
    """Result of reading a text file."""

    content: str = ""
    exists: bool = False
    message: str = ""


def read_text_file(file_path: str | Path, *, root: str | Path | None = None) -> FileContent:
    """Read a UTF-8 text file, resolving relative paths against ``root`` (CWD by default)."""
    path = Path(file_path)
    if not path.is_absolute():
        path = (Path(root) if root is not None else Path.cwd()) / path

    if not path.is_file():
        return FileContent(exists=False, message=f"File not found: {file_path}")

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Failed to read %s: %s", path, exc)
        return FileContent(exists=False, message=f"Error reading file: {exc}")

    return FileContent(content=content, exists=True, message=f"Read {file_path}")
