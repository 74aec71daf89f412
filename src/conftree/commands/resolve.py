"""Load an entry config file and follow relative labels from it."""

from __future__ import annotations

import logging
import sys
from argparse import Namespace
from pathlib import Path

from conftree.config import find_project_root, load_config
from conftree.config_file import ConfigFile, SimpleConfigFile
from conftree.errors import CannotResolveLabel, ConfigReadError
from conftree.utils.hashing import content_digest

logger = logging.getLogger(__name__)


def config_root(entry: Path, root: Path | None = None) -> Path:
    """Explicit root, else the enclosing project root, else the entry's directory."""
    if root is not None:
        return root.resolve()
    project_root = find_project_root(entry)
    if project_root is not None:
        return project_root
    return entry.resolve().parent


def follow(entry: ConfigFile, labels: list[str]) -> ConfigFile:
    """Resolve each label relative to the file the previous one resolved to."""
    current = entry
    for label in labels:
        current = current.resolve(label)
        logger.info("%s -> %s", label, current.path())
    return current


def run(args: Namespace) -> None:
    entry_path = Path(args.entry).resolve()
    root = config_root(entry_path, getattr(args, "root", None))
    config = load_config(find_project_root(root))
    encoding = config.get("content_encoding") or "utf-8"

    try:
        entry = SimpleConfigFile(entry_path, root)
        target = follow(entry, list(getattr(args, "labels", None) or []))
    except (CannotResolveLabel, ConfigReadError, ValueError) as e:
        # ValueError: entry is outside --root
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if getattr(args, "path_only", False):
        print(target.path())
    elif getattr(args, "hash", False):
        print(f"{content_digest(target)}  {target.path()}")
    else:
        print(f"# {target.path()}")
        sys.stdout.write(target.read_text(encoding))
        if not target.content().endswith(b"\n"):
            sys.stdout.write("\n")
