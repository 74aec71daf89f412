"""List config files in a tree, honoring ignore patterns."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from pathspec import PathSpec

from conftree.config import find_project_root, load_config
from conftree.utils.ignore import build_spec, is_ignored, load_patterns


def walk(root: Path, spec: PathSpec) -> list[str]:
    """Root-relative paths ('/a/b') of all non-ignored files under root, sorted."""
    root = root.resolve()
    found: list[str] = []

    def recurse(current: Path) -> None:
        try:
            entries = sorted(current.iterdir(), key=lambda p: p.name)
        except OSError:
            return
        for entry in entries:
            if entry.is_dir():
                if not is_ignored(entry, root, spec, is_dir=True):
                    recurse(entry)
            elif entry.is_file() and not is_ignored(entry, root, spec):
                found.append("/" + entry.relative_to(root).as_posix())

    recurse(root)
    return sorted(found)


def run(args: Namespace) -> None:
    path = Path(getattr(args, "path", Path("."))).resolve()
    if not path.is_dir():
        print(f"Error: {path.as_posix()} is not an existing directory.", file=sys.stderr)
        sys.exit(1)
    project_root = find_project_root(path)
    root = project_root or path
    config = load_config(project_root)
    spec = build_spec(load_patterns(root, config))
    for rel in walk(root, spec):
        print(rel)
