"""Analysis options schema: inputs to ``analyze_codebase`` and the YAML config."""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_MAX_DEPTH = 5

# Version control, dependency caches and build output.
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    "coverage",
    ".nyc_output",
)

# Common source, markup and config-ish extensions.
DEFAULT_INCLUDE_EXTENSIONS: tuple[str, ...] = (
    ".ts", ".tsx", ".js", ".jsx", ".py", ".java", ".go", ".rs",
    ".md", ".json", ".yaml", ".yml", ".toml", ".xml",
)


class AnalysisOptions(BaseModel):
    """Parameters for one analysis run.

    Field names are snake_case in Python; the camelCase spellings
    (``projectPath``, ``maxDepth``, ...) are accepted too.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Absolute, or relative to the working directory
    project_path: str

    # Path segments below the root; direct children are depth 1
    max_depth: int = DEFAULT_MAX_DEPTH

    # gitignore-style globs; a match prunes the whole subtree
    exclude_patterns: list[str] = list(DEFAULT_EXCLUDE_PATTERNS)

    # Files with any other extension are invisible to the report
    include_extensions: list[str] = list(DEFAULT_INCLUDE_EXTENSIONS)

    # Also skip whatever the root .gitignore ignores
    respect_gitignore: bool = False

    @field_validator("project_path")
    @classmethod
    def check_project_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("project_path must not be empty")
        return v

    @field_validator("max_depth")
    @classmethod
    def check_max_depth(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"max_depth must be >= 0, got {v}")
        return v

    @field_validator("include_extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Accept ``ts`` as shorthand for ``.ts``."""
        return [ext if ext.startswith(".") else f".{ext}" for ext in v if ext]
