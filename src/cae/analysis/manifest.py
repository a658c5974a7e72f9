"""Tech stack inference from source extensions and the package manifest."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

from cae.errors import ManifestParseError
from cae.schemas.report import MAX_DEPENDENCIES, FileRecord, TechStack
from cae.shared.file_reader import read_text_file

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"

# Runtime group first; merge order decides dependency order
DEPENDENCY_GROUPS: tuple[str, ...] = ("dependencies", "devDependencies")

LANGUAGE_BY_EXTENSION = MappingProxyType({
    ".ts": "TypeScript",
    ".tsx": "TypeScript",
    ".js": "JavaScript",
    ".jsx": "JavaScript",
    ".py": "Python",
    ".java": "Java",
    ".go": "Go",
    ".rs": "Rust",
    ".php": "PHP",
})

# Substring of a dependency name -> framework display name. Order matters:
# frameworks are reported in the order their first match is found.
FRAMEWORK_PATTERNS: tuple[tuple[str, str], ...] = (
    ("react", "React"),
    ("next", "Next.js"),
    ("vue", "Vue.js"),
    ("nuxt", "Nuxt.js"),
    ("angular", "Angular"),
    ("express", "Express.js"),
    ("fastify", "Fastify"),
    ("nestjs", "NestJS"),
    ("@mastra/core", "Mastra"),
    ("zendframework", "Zend Framework"),
    ("laravel", "Laravel"),
    ("symfony", "Symfony"),
    ("cakephp", "CakePHP"),
    ("codeigniter", "CodeIgniter"),
    ("yii", "Yii"),
    ("phalcon", "Phalcon"),
)


def detect_languages(source_files: Sequence[FileRecord]) -> list[str]:
    languages: list[str] = []
    for record in source_files:
        language = LANGUAGE_BY_EXTENSION.get(record.extension or "")
        if language and language not in languages:
            languages.append(language)
    return languages


def detect_frameworks(dependencies: Sequence[str]) -> list[str]:
    """Match every dependency against every pattern; one entry per framework."""
    frameworks: list[str] = []
    for dep in dependencies:
        for pattern, framework in FRAMEWORK_PATTERNS:
            if pattern in dep and framework not in frameworks:
                frameworks.append(framework)
    return frameworks


def find_manifest(config_files: Sequence[FileRecord]) -> FileRecord | None:
    """Pick the shallowest ``package.json``; ties go to the earliest in walk order.

    In a monorepo the root manifest wins over ``apps/*/package.json``.
    """
    candidates = [f for f in config_files if f.path.endswith(MANIFEST_FILENAME)]
    if not candidates:
        return None
    return min(candidates, key=lambda f: f.path.count("/"))


def parse_manifest_dependencies(text: str) -> list[str]:
    """Return runtime then dev dependency names in declaration order.

    A name declared in both groups keeps its first position. Raises
    ``ManifestParseError`` for invalid JSON or an unexpected shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(f"Invalid JSON in {MANIFEST_FILENAME}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestParseError(
            f"{MANIFEST_FILENAME} must contain a JSON object, got {type(data).__name__}"
        )

    merged: dict[str, Any] = {}
    for group in DEPENDENCY_GROUPS:
        deps = data.get(group)
        if deps is None:
            continue
        if not isinstance(deps, dict):
            raise ManifestParseError(f"'{group}' must be an object, got {type(deps).__name__}")
        merged.update(deps)
    return list(merged)


def analyze_tech_stack(
    root: str | Path,
    config_files: Sequence[FileRecord],
    source_files: Sequence[FileRecord],
) -> TechStack:
    """Infer languages, frameworks and dependencies for a project.

    Never raises for manifest problems: a missing, unreadable or malformed
    manifest yields empty ``frameworks`` and ``dependencies``.
    """
    languages = detect_languages(source_files)

    manifest = find_manifest(config_files)
    if manifest is None:
        logger.debug("No %s among %d config files", MANIFEST_FILENAME, len(config_files))
        return TechStack(languages=languages)

    logger.debug("Reading manifest %s", manifest.path)
    result = read_text_file(manifest.path, root=root)
    try:
        if not result.exists:
            raise ManifestParseError(result.message)
        dependencies = parse_manifest_dependencies(result.content)
    except ManifestParseError as exc:
        logger.warning("Failed to parse %s: %s", manifest.path, exc)
        return TechStack(languages=languages)

    return TechStack(
        languages=languages,
        frameworks=detect_frameworks(dependencies),
        dependencies=dependencies[:MAX_DEPENDENCIES],
    )
