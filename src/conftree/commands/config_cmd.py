"""Show or edit configuration (CLI command)."""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from conftree.config import (
    find_project_root,
    global_config_path,
    load_config,
    load_raw_config,
    project_config_path,
    save_config,
    set_nested,
)


def _parse_set_value(value_str: str) -> Any:
    """Parse the VALUE of KEY=VALUE: JSON if it parses (number, bool, null, quoted string), else the raw string."""
    value_str = value_str.strip()
    try:
        return json.loads(value_str)
    except json.JSONDecodeError:
        return value_str


def run(args: Namespace) -> None:
    show = getattr(args, "show", False)
    set_key = getattr(args, "set_key", None)
    use_global = getattr(args, "global_", False)
    project_root = find_project_root(Path(getattr(args, "path", Path("."))).resolve())

    if not show and not set_key:
        print("Error: specify --show or --set KEY=VALUE.", file=sys.stderr)
        sys.exit(1)

    if set_key:
        key_str, sep, value_str = set_key.partition("=")
        key_str = key_str.strip()
        if not sep or not key_str:
            print("Error: --set requires KEY=VALUE (e.g. author.default='Jane <jane@example.com>').", file=sys.stderr)
            sys.exit(1)
        value = _parse_set_value(value_str)
        if use_global or project_root is None:
            target, label = global_config_path(), "global"
        else:
            target, label = project_config_path(project_root), f"project ({project_root.as_posix()})"
        existing = load_raw_config(target)
        set_nested(existing, key_str, value)
        save_config(target, existing)
        print(f"Set {key_str} = {json.dumps(value)} in {label} config.")

    if show:
        config = load_config(project_root)
        source_note = "defaults + global"
        if project_root is not None:
            source_note += f" + project ({project_root.as_posix()})"
        print(f"# Config: {source_note}")
        print(json.dumps(config, indent=2))
