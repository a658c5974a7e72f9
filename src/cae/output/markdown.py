"""Markdown report builder — renders a ProjectReport for downstream agents."""

from __future__ import annotations

from cae.schemas.report import FileRecord, ProjectReport


def render_markdown_report(report: ProjectReport, *, title: str = "Codebase Analysis") -> str:
    """Render a ProjectReport into a Markdown string."""
    sections: list[str] = []

    sections.append(f"# {title}\n")

    # Summary
    sections.append("## Summary\n")
    sections.append("```")
    sections.append(report.summary)
    sections.append("```\n")

    # Counts
    sections.append("## Project Structure\n")
    sections.append(f"- **Total files:** {report.total_files}")
    sections.append(f"- **Total directories:** {report.total_directories}")
    sections.append(f"- **Source files:** {len(report.source_files)}")
    sections.append(f"- **Config files:** {len(report.config_files)}")
    sections.append(f"- **Documentation files:** {len(report.document_files)}")
    sections.append("")

    # Tech Stack
    stack = report.tech_stack
    sections.append("## Tech Stack\n")
    sections.append(f"- **Languages:** {', '.join(stack.languages) or 'none'}")
    sections.append(f"- **Frameworks:** {', '.join(stack.frameworks) or 'none'}")
    if stack.dependencies:
        sections.append("- **Dependencies:**")
        for dep in stack.dependencies:
            sections.append(f"  - `{dep}`")
    sections.append("")

    for heading, records in (
        ("Source Files", report.source_files),
        ("Config Files", report.config_files),
        ("Documentation Files", report.document_files),
    ):
        if records:
            sections.append(f"## {heading}\n")
            sections.append(_render_file_table(records))

    return "\n".join(sections)


def _render_file_table(records: list[FileRecord]) -> str:
    rows = ["| Path | Size |", "|------|------|"]
    for record in records:
        rows.append(f"| `{record.path}` | {_format_size(record.size_bytes)} |")
    return "\n".join(rows) + "\n"


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"
