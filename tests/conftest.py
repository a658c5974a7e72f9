"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """A small TypeScript project with an excluded node_modules tree."""
    (tmp_path / "index.ts").write_text("export const hello = 'world';")
    (tmp_path / "package.json").write_text(
        json.dumps(
            {
                "name": "sample-app",
                "dependencies": {"react": "^18.0.0"},
                "devDependencies": {"express": "^4.18.0"},
            }
        )
    )
    (tmp_path / "README.md").write_text("# Sample App")

    lodash = tmp_path / "node_modules" / "lodash"
    lodash.mkdir(parents=True)
    (lodash / "index.js").write_text("module.exports = {}")
    (lodash / "package.json").write_text('{"name": "lodash"}')

    return tmp_path


@pytest.fixture
def tmp_config(tmp_path: Path, sample_project: Path) -> Path:
    """Write a minimal valid options YAML and return its path."""
    cfg = tmp_path / "cae.yml"
    cfg.write_text(
        """\
project_path: "{target}"
max_depth: 3
exclude_patterns:
  - node_modules
  - "*.yml"
""".format(target=str(sample_project))
    )
    return cfg
