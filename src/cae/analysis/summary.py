"""Short plain-text summary appended to the project report."""

from __future__ import annotations

from collections.abc import Sequence

from cae.schemas.report import FileRecord, TechStack

NONE_PLACEHOLDER = "none"
SUMMARY_DEPENDENCIES = 5


def build_summary(
    source_files: Sequence[FileRecord],
    config_files: Sequence[FileRecord],
    document_files: Sequence[FileRecord],
    tech_stack: TechStack,
) -> str:
    lines = [
        "Project analysis:",
        f"- Source files: {len(source_files)}",
        f"- Config files: {len(config_files)}",
        f"- Documentation files: {len(document_files)}",
        f"- Languages: {', '.join(tech_stack.languages) or NONE_PLACEHOLDER}",
        f"- Frameworks: {', '.join(tech_stack.frameworks) or NONE_PLACEHOLDER}",
        f"- Key dependencies: {', '.join(tech_stack.dependencies[:SUMMARY_DEPENDENCIES])}",
    ]
    return "\n".join(lines).strip()
