from __future__ import annotations

import json
from pathlib import Path

from nirman.scaffold import merge_manifest, read_manifest, update_manifest


def load(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def test_creates_manifest_when_missing(tmp_path: Path) -> None:
    update_manifest(tmp_path, "foo", ["bar", "baz"])
    data = load(tmp_path / "package.json")
    assert data == {"name": "foo", "dependencies": {"bar": "latest", "baz": "latest"}}


def test_existing_versions_are_kept(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text(
        json.dumps({"dependencies": {"bar": "1.0.0"}})
    )
    update_manifest(tmp_path, None, ["bar", "qux"])
    data = load(tmp_path / "package.json")
    assert data["dependencies"] == {"bar": "1.0.0", "qux": "latest"}
    assert "name" not in data


def test_unknown_fields_and_order_preserved(tmp_path: Path) -> None:
    original = {
        "private": True,
        "name": "old",
        "scripts": {"dev": "next dev"},
        "version": "0.1.0",
    }
    (tmp_path / "package.json").write_text(json.dumps(original))
    update_manifest(tmp_path, "new", [])
    data = load(tmp_path / "package.json")
    assert list(data) == ["private", "name", "scripts", "version"]
    assert data["name"] == "new"
    assert data["scripts"] == {"dev": "next dev"}
    assert "dependencies" not in data


def test_written_with_two_space_indent(tmp_path: Path) -> None:
    update_manifest(tmp_path, "foo", ["bar"])
    text = (tmp_path / "package.json").read_text()
    assert text == (
        '{\n  "name": "foo",\n  "dependencies": {\n    "bar": "latest"\n  }\n}\n'
    )


def test_invalid_manifest_falls_back_to_empty(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{ not json")
    update_manifest(tmp_path, "foo", [])
    assert load(tmp_path / "package.json") == {"name": "foo"}


def test_non_object_manifest_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("[1, 2]")
    assert read_manifest(tmp_path / "package.json") == {}


def test_merge_replaces_non_mapping_dependencies() -> None:
    manifest = {"dependencies": "oops"}
    merge_manifest(manifest, "", ["a"], default_version="^1.0.0")
    assert manifest == {"dependencies": {"a": "^1.0.0"}}


def test_custom_filename(tmp_path: Path) -> None:
    update_manifest(tmp_path, "foo", ["bar"], filename="manifest.json")
    assert load(tmp_path / "manifest.json")["name"] == "foo"
    assert not (tmp_path / "package.json").exists()
