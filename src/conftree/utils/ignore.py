"""Ignore pattern support: .conftreeignore, .gitignore (gitignore syntax), builtin and additional patterns."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pathspec import PathSpec

CONFTREEIGNORE = ".conftreeignore"
GITIGNORE = ".gitignore"


def parse_ignore_file(path: Path) -> list[str]:
    """Non-empty, non-comment lines of a gitignore-style file; [] if missing."""
    if not path.is_file():
        return []
    patterns: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        s = line.strip()
        if s and not s.startswith("#"):
            patterns.append(s)
    return patterns


def load_patterns(root: Path, config: dict[str, Any]) -> list[str]:
    """
    Combined patterns: builtin, .conftreeignore, .gitignore (if ignore.use_gitignore),
    then ignore.additional_patterns.
    """
    root = Path(root).resolve()
    ignore_cfg = config.get("ignore") or {}
    patterns = list(ignore_cfg.get("builtin_patterns") or [])
    patterns.extend(parse_ignore_file(root / CONFTREEIGNORE))
    if ignore_cfg.get("use_gitignore", True):
        patterns.extend(parse_ignore_file(root / GITIGNORE))
    patterns.extend(ignore_cfg.get("additional_patterns") or [])
    return patterns


def build_spec(patterns: list[str]) -> PathSpec:
    """Build a PathSpec from pattern strings (gitignore-style)."""
    return PathSpec.from_lines("gitignore", patterns)


def is_ignored(path: Path | str, root: Path | str, spec: PathSpec, is_dir: bool = False) -> bool:
    """
    True if path (absolute, or relative to root) matches spec.

    Paths outside root are never ignored. Directory-only patterns such as
    'build/' match when is_dir is set.
    """
    root = Path(root).resolve()
    path = Path(path)
    if not path.is_absolute():
        path = root / path
    try:
        rel = path.resolve().relative_to(root)
    except ValueError:
        return False
    rel_str = rel.as_posix()
    if spec.match_file(rel_str):
        return True
    return is_dir and spec.match_file(rel_str + "/")
