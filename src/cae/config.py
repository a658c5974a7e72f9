"""YAML config loader. Reads an analysis options file into AnalysisOptions."""

from pathlib import Path

import yaml
from pydantic.alias_generators import to_camel

from cae.schemas.options import AnalysisOptions


def load_config(path: str | Path, **overrides: object) -> AnalysisOptions:
    """Load and validate an analysis options file.

    Keyword ``overrides`` that are not ``None`` replace values from the file
    (the CLI passes its flags this way).

    Raises ``FileNotFoundError`` if the path doesn't exist and
    ``pydantic.ValidationError`` if the YAML content is invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text())
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must be a YAML mapping, got {type(raw).__name__}")

    # A list key with only commented-out items loads as None; treat as empty.
    # Also strip empty-string or None items from actual lists.
    for key in ("exclude_patterns", "excludePatterns", "include_extensions", "includeExtensions"):
        if key in raw:
            if raw[key] is None:
                raw[key] = []
            elif isinstance(raw[key], list):
                raw[key] = [item for item in raw[key] if item]

    for key, value in overrides.items():
        if value is None:
            continue
        # The camelCase spelling would otherwise win during validation
        raw.pop(to_camel(key), None)
        raw[key] = value
    return AnalysisOptions(**raw)
