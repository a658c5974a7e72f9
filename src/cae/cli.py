"""Typer CLI — ``cae analyze`` and ``cae validate`` commands."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from cae.analysis.engine import analyze_codebase
from cae.config import load_config
from cae.errors import AnalysisError
from cae.output.markdown import render_markdown_report
from cae.schemas.options import AnalysisOptions
from cae.schemas.report import ProjectReport

# Load .env file from the working directory (if it exists)
load_dotenv()

app = typer.Typer(
    name="cae",
    help="Codebase Analysis Engine — classify project files and infer the tech stack.",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )


def _build_options(config: Path | None, **overrides: object) -> AnalysisOptions:
    if config is not None:
        return load_config(config, **overrides)
    return AnalysisOptions(**{k: v for k, v in overrides.items() if v is not None})


@app.command()
def validate(
    config: Path = typer.Option(..., "--config", "-c", envvar="CAE_CONFIG", help="Path to an options YAML file"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Validate an options file without running the analysis."""
    _setup_logging(verbose)

    try:
        opts = load_config(config)
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        console.print(f"[red]Config validation failed:[/] {exc}")
        raise typer.Exit(code=1)

    console.print("[green]Config is valid![/]\n")
    console.print(f"  Project path:  {opts.project_path}")
    console.print(f"  Max depth:     {opts.max_depth}")
    console.print(f"  Excludes:      {', '.join(opts.exclude_patterns) or '(none)'}")
    console.print(f"  Extensions:    {', '.join(opts.include_extensions) or '(none)'}")
    console.print(f"  .gitignore:    {'respected' if opts.respect_gitignore else 'ignored'}")


@app.command()
def analyze(
    path: str = typer.Argument(None, help="Project directory (absolute, or relative to the working directory)."),
    config: Path = typer.Option(None, "--config", "-c", envvar="CAE_CONFIG", help="Path to an options YAML file"),
    max_depth: int = typer.Option(None, "--max-depth", "-d", help="Directory depth to explore (default: 5)."),
    exclude: list[str] = typer.Option(None, "--exclude", "-x", help="Exclude glob (repeatable). Replaces the defaults."),
    include: list[str] = typer.Option(None, "--include", "-i", help="Extension to analyze (repeatable). Replaces the defaults."),
    gitignore: bool = typer.Option(False, "--gitignore", help="Also skip paths ignored by the root .gitignore."),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    markdown: bool = typer.Option(False, "--markdown", help="Render Markdown (to --output, or to stdout)."),
    output: Path = typer.Option(None, "--output", "-o", help="Write the report to this file."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Analyze a codebase and report its structure and tech stack.

    Examples:

        cae analyze ./my-app

        cae analyze ./my-app --max-depth 3 --exclude node_modules --exclude vendor --json

        cae analyze --config cae.yml --output report.md --markdown
    """
    _setup_logging(verbose)

    if path is None and config is None:
        console.print("[red]Error:[/] give a project PATH or --config with project_path set.")
        raise typer.Exit(code=1)

    try:
        opts = _build_options(
            config,
            project_path=path,
            max_depth=max_depth,
            exclude_patterns=list(exclude) if exclude else None,
            include_extensions=list(include) if include else None,
            respect_gitignore=True if gitignore else None,
        )
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        console.print(f"[red]Invalid options:[/] {exc}")
        raise typer.Exit(code=1)

    try:
        report = analyze_codebase(opts)
    except AnalysisError as exc:
        console.print(f"[red]Analysis failed:[/] {exc}")
        raise typer.Exit(code=1)

    if output:
        if markdown:
            output.write_text(render_markdown_report(report, title=f"Codebase Analysis: {opts.project_path}"), encoding="utf-8")
        else:
            output.write_text(report.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        console.print(f"[green]Report written to:[/] {output}")

    if as_json:
        # Plain echo: rich would wrap long lines
        typer.echo(report.model_dump_json(by_alias=True, indent=2))
    elif markdown and not output:
        typer.echo(render_markdown_report(report, title=f"Codebase Analysis: {opts.project_path}"))
    elif not output:
        _print_report(report)


def _print_report(report: ProjectReport) -> None:
    table = Table(title="Project Structure")
    table.add_column("Category", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row("Total files", str(report.total_files))
    table.add_row("Total directories", str(report.total_directories))
    table.add_row("Source files", str(len(report.source_files)))
    table.add_row("Config files", str(len(report.config_files)))
    table.add_row("Documentation files", str(len(report.document_files)))
    console.print(table)

    stack = report.tech_stack
    console.print("\n[bold]── Tech Stack ──[/]\n")
    console.print(f"  Languages:    {', '.join(stack.languages) or 'none'}")
    console.print(f"  Frameworks:   {', '.join(stack.frameworks) or 'none'}")
    console.print(f"  Dependencies: {', '.join(stack.dependencies) or 'none'}")
    console.print("")
    console.print(report.summary)
