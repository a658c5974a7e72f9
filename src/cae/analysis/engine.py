"""The analysis operation: resolve, walk, classify, infer the stack, summarize."""

from __future__ import annotations

import logging
from pathlib import Path

from cae.analysis.classifier import Bucket, bucket_for, classify, is_allowed
from cae.analysis.manifest import analyze_tech_stack
from cae.analysis.summary import build_summary
from cae.errors import AnalysisError, PathNotFoundError, WalkError
from cae.schemas.options import AnalysisOptions
from cae.schemas.report import FileRecord, ProjectReport
from cae.shared.paths import resolve_project_path
from cae.shared.tree_walker import TreeWalker

logger = logging.getLogger(__name__)


def analyze_codebase(options: AnalysisOptions, *, cwd: str | Path | None = None) -> ProjectReport:
    """Analyze the project at ``options.project_path`` and return a fresh report.

    Raises ``AnalysisError`` (chained to a ``PathNotFoundError`` or
    ``WalkError``) when the root cannot be resolved or traversed. Manifest
    problems never raise; they only leave the tech stack without
    dependencies and frameworks.
    """
    try:
        root = resolve_project_path(options.project_path, cwd=cwd)
        walker = TreeWalker(
            root,
            max_depth=options.max_depth,
            exclude_patterns=options.exclude_patterns,
            respect_gitignore=options.respect_gitignore,
        )
        entries = walker.walk()
    except (PathNotFoundError, WalkError) as exc:
        raise AnalysisError(f"Codebase analysis failed: {exc}") from exc

    return build_report(root, entries, options.include_extensions)


def build_report(root: Path, entries: list[FileRecord], include_extensions: list[str]) -> ProjectReport:
    """Classify walked entries into buckets and assemble the report."""
    buckets: dict[Bucket, list[FileRecord]] = {bucket: [] for bucket in Bucket}
    total_files = 0
    total_directories = 0

    for entry in entries:
        if entry.kind == "directory":
            total_directories += 1
            continue
        if not is_allowed(entry, include_extensions):
            continue

        total_files += 1
        record = classify(entry)
        bucket = bucket_for(record)
        if bucket is not None:
            buckets[bucket].append(record)

    source_files = buckets[Bucket.SOURCE]
    config_files = buckets[Bucket.CONFIG]
    document_files = buckets[Bucket.DOCUMENTATION]

    tech_stack = analyze_tech_stack(root, config_files, source_files)
    logger.info(
        "Analyzed %s: %d files, %d directories (%d source, %d config, %d docs)",
        root, total_files, total_directories,
        len(source_files), len(config_files), len(document_files),
    )

    return ProjectReport(
        total_files=total_files,
        total_directories=total_directories,
        source_files=source_files,
        config_files=config_files,
        document_files=document_files,
        tech_stack=tech_stack,
        summary=build_summary(source_files, config_files, document_files, tech_stack),
    )
