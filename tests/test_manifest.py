"""Tests for tech stack inference from extensions and package.json."""

import json
import logging
from pathlib import Path

import pytest

from cae.analysis.manifest import (
    analyze_tech_stack,
    detect_frameworks,
    detect_languages,
    find_manifest,
    parse_manifest_dependencies,
)
from cae.errors import ManifestParseError
from cae.schemas.report import FileRecord


def _file(path: str) -> FileRecord:
    return FileRecord(path=path, kind="file", extension=Path(path).suffix or None)


class TestDetectLanguages:

    def test_maps_and_deduplicates(self) -> None:
        files = [_file("a.ts"), _file("b.tsx"), _file("c.py"), _file("d.ts")]
        assert detect_languages(files) == ["TypeScript", "Python"]

    def test_unmapped_extension_ignored(self) -> None:
        assert detect_languages([_file("a.kt"), _file("b.go")]) == ["Go"]


class TestDetectFrameworks:

    def test_one_dependency_many_frameworks(self) -> None:
        # "next-react-bridge" contains both "react" and "next"
        assert detect_frameworks(["next-react-bridge"]) == ["React", "Next.js"]

    def test_deduplicated_first_match_wins(self) -> None:
        frameworks = detect_frameworks(["express", "react", "react-dom", "@types/express"])
        assert frameworks == ["Express.js", "React"]

    def test_scoped_packages(self) -> None:
        assert detect_frameworks(["@nestjs/core", "@mastra/core"]) == ["NestJS", "Mastra"]

    def test_no_match(self) -> None:
        assert detect_frameworks(["lodash", "zod"]) == []


class TestParseManifest:

    def test_runtime_then_dev_order(self) -> None:
        text = json.dumps({"dependencies": {"b": "1", "a": "1"}, "devDependencies": {"c": "1"}})
        assert parse_manifest_dependencies(text) == ["b", "a", "c"]

    def test_duplicate_keeps_first_position(self) -> None:
        text = json.dumps({"dependencies": {"a": "1", "b": "1"}, "devDependencies": {"a": "2", "c": "1"}})
        assert parse_manifest_dependencies(text) == ["a", "b", "c"]

    def test_missing_groups(self) -> None:
        assert parse_manifest_dependencies('{"name": "x"}') == []

    def test_invalid_json(self) -> None:
        with pytest.raises(ManifestParseError, match="Invalid JSON"):
            parse_manifest_dependencies("{not json")

    def test_non_object_document(self) -> None:
        with pytest.raises(ManifestParseError, match="JSON object"):
            parse_manifest_dependencies("[1, 2]")

    def test_non_object_group(self) -> None:
        with pytest.raises(ManifestParseError, match="'dependencies' must be an object"):
            parse_manifest_dependencies('{"dependencies": ["react"]}')


class TestAnalyzeTechStack:

    def test_no_manifest(self, tmp_path: Path) -> None:
        stack = analyze_tech_stack(tmp_path, [_file("tsconfig.json")], [_file("a.ts")])
        assert stack.languages == ["TypeScript"]
        assert stack.frameworks == []
        assert stack.dependencies == []

    def test_shallowest_manifest_wins(self) -> None:
        configs = [_file("tsconfig.json"), _file("apps/web/package.json"), _file("package.json")]
        assert find_manifest(configs).path == "package.json"

    def test_nested_manifests_tie_on_walk_order(self) -> None:
        configs = [_file("apps/admin/package.json"), _file("apps/web/package.json")]
        assert find_manifest(configs).path == "apps/admin/package.json"

    def test_monorepo_uses_root_manifest(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text(json.dumps({"dependencies": {"react": "18"}}))
        configs = [_file("apps/web/package.json"), _file("package.json")]
        stack = analyze_tech_stack(tmp_path, configs, [])
        assert stack.dependencies == ["react"]

    def test_reads_manifest_relative_to_root(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text(
            json.dumps({"dependencies": {"vue": "3"}, "devDependencies": {"nuxt": "3"}})
        )
        stack = analyze_tech_stack(tmp_path, [_file("package.json")], [_file("app.js")])
        assert stack.languages == ["JavaScript"]
        assert stack.dependencies == ["vue", "nuxt"]
        assert stack.frameworks == ["Vue.js", "Nuxt.js"]

    def test_dependencies_capped_at_twenty(self, tmp_path: Path) -> None:
        runtime = {f"dep-{i:02d}": "1" for i in range(15)}
        dev = {f"dev-{i:02d}": "1" for i in range(10)}
        dev["react"] = "18"
        (tmp_path / "package.json").write_text(
            json.dumps({"dependencies": runtime, "devDependencies": dev})
        )
        stack = analyze_tech_stack(tmp_path, [_file("package.json")], [])
        assert len(stack.dependencies) == 20
        assert stack.dependencies[0] == "dep-00"
        assert stack.dependencies[-1] == "dev-04"
        # Frameworks come from every declared dependency, not just the first 20
        assert stack.frameworks == ["React"]

    def test_malformed_manifest_degrades(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / "package.json").write_text("{ this is not json")
        with caplog.at_level(logging.WARNING, logger="cae.analysis.manifest"):
            stack = analyze_tech_stack(tmp_path, [_file("package.json")], [_file("index.ts")])
        assert stack.languages == ["TypeScript"]
        assert stack.frameworks == []
        assert stack.dependencies == []
        assert "Failed to parse package.json" in caplog.text

    def test_unreadable_manifest_degrades(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        # Listed as a config file but gone from disk by the time it is read
        with caplog.at_level(logging.WARNING, logger="cae.analysis.manifest"):
            stack = analyze_tech_stack(tmp_path, [_file("package.json")], [])
        assert stack.dependencies == []
        assert "File not found" in caplog.text
