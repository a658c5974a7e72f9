"""File classification by path and extension.

A file is placed in the first bucket whose predicate holds, in the order
config, documentation, source. All three flags are still recorded on the
``FileRecord``.
"""

from __future__ import annotations

from collections.abc import Collection
from enum import Enum

from cae.schemas.report import FileRecord

# Manifests, build-tool configs, container files and tooling dotfiles.
# Matched as substrings of the relative path.
CONFIG_PATTERNS: tuple[str, ...] = (
    "package.json",
    "tsconfig.json",
    "webpack.config.js",
    "vite.config.ts",
    "next.config.js",
    "tailwind.config.js",
    ".env",
    ".env.local",
    "docker-compose.yml",
    "Dockerfile",
    ".gitignore",
    ".eslintrc",
)

DOCUMENTATION_EXTENSION = ".md"
DOCUMENTATION_MARKERS: tuple[str, ...] = ("README", "docs/", "CHANGELOG")

SOURCE_EXTENSIONS: frozenset[str] = frozenset(
    {".ts", ".tsx", ".js", ".jsx", ".py", ".java", ".go", ".rs", ".php"}
)


class Bucket(str, Enum):
    CONFIG = "config"
    DOCUMENTATION = "documentation"
    SOURCE = "source"


def is_config_file(path: str) -> bool:
    return any(pattern in path or path.endswith(pattern) for pattern in CONFIG_PATTERNS)


def is_documentation_file(path: str, extension: str | None) -> bool:
    return extension == DOCUMENTATION_EXTENSION or any(m in path for m in DOCUMENTATION_MARKERS)


def is_source_file(extension: str | None) -> bool:
    return extension in SOURCE_EXTENSIONS


def is_allowed(record: FileRecord, include_extensions: Collection[str]) -> bool:
    """Whether a walked entry takes part in the report at all."""
    return record.kind == "file" and record.extension in include_extensions


def classify(record: FileRecord) -> FileRecord:
    """Return a copy of ``record`` with the three classification flags set."""
    return record.model_copy(
        update={
            "is_config": is_config_file(record.path),
            "is_source": is_source_file(record.extension),
            "is_documentation": is_documentation_file(record.path, record.extension),
        }
    )


def bucket_for(record: FileRecord) -> Bucket | None:
    """Pick the output bucket for a classified record; ``None`` if no predicate held."""
    if record.is_config:
        return Bucket.CONFIG
    if record.is_documentation:
        return Bucket.DOCUMENTATION
    if record.is_source:
        return Bucket.SOURCE
    return None
