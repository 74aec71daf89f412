"""Unit tests for ignore patterns (parse .conftreeignore, combine sources, match paths)."""

from __future__ import annotations

from pathlib import Path

from conftree.config import default_config
from conftree.utils.ignore import build_spec, is_ignored, load_patterns, parse_ignore_file


def test_parse_ignore_file_missing_returns_empty(tmp_path: Path) -> None:
    assert parse_ignore_file(tmp_path / "nonexistent") == []


def test_parse_ignore_file_strips_comments_and_blanks(tmp_path: Path) -> None:
    f = tmp_path / ".conftreeignore"
    f.write_text("# comment\n\n*.bak\n  \nbuild/\n# another\n")
    assert parse_ignore_file(f) == ["*.bak", "build/"]


def test_load_patterns_order(tmp_path: Path) -> None:
    (tmp_path / ".conftreeignore").write_text("*.bak\n")
    (tmp_path / ".gitignore").write_text("*.tmp\n")
    config = default_config()
    config["ignore"]["additional_patterns"] = ["drafts/"]
    assert load_patterns(tmp_path, config) == [".git/", ".conftree/", "*.bak", "*.tmp", "drafts/"]


def test_load_patterns_without_gitignore(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("*.tmp\n")
    config = default_config()
    config["ignore"]["use_gitignore"] = False
    assert "*.tmp" not in load_patterns(tmp_path, config)


def test_is_ignored_empty_spec_never_matches(tmp_path: Path) -> None:
    assert not is_ignored(tmp_path / "copy.bara.sky", tmp_path, build_spec([]))


def test_is_ignored_glob(tmp_path: Path) -> None:
    spec = build_spec(["*.bak"])
    assert is_ignored(tmp_path / "workflows" / "release.sky.bak", tmp_path, spec)
    assert not is_ignored(tmp_path / "workflows" / "release.sky", tmp_path, spec)


def test_is_ignored_relative_path(tmp_path: Path) -> None:
    assert is_ignored("notes.bak", tmp_path, build_spec(["*.bak"]))


def test_is_ignored_directory_pattern(tmp_path: Path) -> None:
    spec = build_spec(["drafts/"])
    assert is_ignored(tmp_path / "drafts", tmp_path, spec, is_dir=True)
    assert is_ignored(tmp_path / "drafts" / "x.sky", tmp_path, spec)


def test_is_ignored_outside_root(tmp_path: Path) -> None:
    root = tmp_path / "root"
    root.mkdir()
    assert not is_ignored(tmp_path / "other.bak", root, build_spec(["*.bak"]))
