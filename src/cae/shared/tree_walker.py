"""Depth-bounded, exclude-aware traversal of a project tree."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

import pathspec

from cae.errors import WalkError
from cae.schemas.options import DEFAULT_EXCLUDE_PATTERNS, DEFAULT_MAX_DEPTH
from cae.schemas.report import FileRecord

logger = logging.getLogger(__name__)


class TreeWalker:
    """Enumerate files and directories under a root.

    Exclude patterns use gitignore syntax. A directory that matches is
    neither reported nor descended into, so everything beneath it is gone
    too. Depth counts path segments below the root: with ``max_depth=1``
    only the root's direct children are returned.
    """

    def __init__(
        self,
        root: str | Path,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        exclude_patterns: Iterable[str] = DEFAULT_EXCLUDE_PATTERNS,
        respect_gitignore: bool = False,
    ) -> None:
        self.root = Path(root)
        self.max_depth = max_depth
        self._exclude = pathspec.GitIgnoreSpec.from_lines(list(exclude_patterns))
        self._gitignore = self._load_gitignore() if respect_gitignore else None

    def _load_gitignore(self) -> pathspec.GitIgnoreSpec | None:
        gi = self.root / ".gitignore"
        try:
            if not gi.is_file():
                return None
            lines = gi.read_text(errors="replace").splitlines()
        except OSError as exc:
            raise WalkError(f"Cannot read {gi}: {exc}") from exc
        return pathspec.GitIgnoreSpec.from_lines(lines)

    def _is_excluded(self, rel: str, is_dir: bool) -> bool:
        # Directory-only patterns ("build/") need the trailing slash to match
        candidates = (rel, f"{rel}/") if is_dir else (rel,)
        for spec in (self._exclude, self._gitignore):
            if spec is not None and any(spec.match_file(c) for c in candidates):
                return True
        return False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def walk(self) -> list[FileRecord]:
        """Return every non-excluded entry within ``max_depth``, sorted by path.

        Raises ``WalkError`` if the root is not a directory or any entry
        cannot be listed or stat-ed.
        """
        try:
            root_is_dir = self.root.is_dir()
        except OSError as exc:
            raise WalkError(f"Cannot stat {self.root}: {exc}") from exc
        if not root_is_dir:
            raise WalkError(f"Project root is not a directory: {self.root}")

        records: list[FileRecord] = []
        self._walk_dir(self.root, depth=1, records=records)
        records.sort(key=lambda r: r.path)
        logger.debug("Walked %s: %d entries (max_depth=%d)", self.root, len(records), self.max_depth)
        return records

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _walk_dir(self, directory: Path, *, depth: int, records: list[FileRecord]) -> None:
        if depth > self.max_depth:
            return
        try:
            children = list(directory.iterdir())
        except OSError as exc:
            raise WalkError(f"Cannot list directory {directory}: {exc}") from exc

        for child in children:
            try:
                st = child.lstat()
            except OSError as exc:
                raise WalkError(f"Cannot stat {child}: {exc}") from exc

            rel = _display_path(child.relative_to(self.root).as_posix())
            is_symlink = stat.S_ISLNK(st.st_mode)
            # A broken link is not a directory; os.path.isdir never raises
            is_dir = os.path.isdir(child) if is_symlink else stat.S_ISDIR(st.st_mode)
            if self._is_excluded(rel, is_dir):
                continue
            if is_dir:
                records.append(FileRecord(path=rel, kind="directory"))
                # Symlinked directories are reported but never followed
                if not is_symlink:
                    self._walk_dir(child, depth=depth + 1, records=records)
            else:
                records.append(
                    FileRecord(
                        path=rel,
                        kind="file",
                        size_bytes=st.st_size,
                        extension=PurePosixPath(rel).suffix or None,
                    )
                )


def _display_path(rel: str) -> str:
    """Replace undecodable filename bytes so the path serializes as UTF-8."""
    return os.fsencode(rel).decode("utf-8", "replace")
