"""Pydantic models for the project report handed to downstream agents.

Serialize with ``by_alias=True`` to get the camelCase wire form
(``sizeBytes``, ``totalFiles``, ``techStack``, ...).
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

MAX_DEPENDENCIES = 20


class _ReportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class FileRecord(_ReportModel):
    """One filesystem entry found by the walk."""

    path: str  # relative to the project root, POSIX separators
    kind: Literal["file", "directory"]
    size_bytes: int = 0
    extension: str | None = None  # e.g. ".ts"; None for dotfiles and extensionless names
    is_config: bool = False
    is_source: bool = False
    is_documentation: bool = False


class TechStack(_ReportModel):
    """Languages, frameworks and dependencies inferred for the project."""

    languages: list[str] = []  # deduplicated, first-seen order
    frameworks: list[str] = []  # deduplicated, first-seen order
    dependencies: list[str] = []  # manifest declaration order, at most MAX_DEPENDENCIES


class ProjectReport(_ReportModel):
    """Full output of one analysis run."""

    total_files: int
    total_directories: int
    source_files: list[FileRecord] = []
    config_files: list[FileRecord] = []
    document_files: list[FileRecord] = []
    tech_stack: TechStack = TechStack()
    summary: str = ""
