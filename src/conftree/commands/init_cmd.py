"""Mark a directory as a configuration root by creating .conftree/config.json."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from conftree.config import project_config_path, save_config


def run(args: Namespace) -> None:
    root = Path(getattr(args, "path", Path("."))).resolve()
    if not root.is_dir():
        print(f"Error: {root.as_posix()} is not an existing directory.", file=sys.stderr)
        sys.exit(1)
    config_path = project_config_path(root)
    if config_path.exists():
        print(f"Already initialized: {root.as_posix()}")
        return
    save_config(config_path, {})
    print(f"Initialized configuration root at {root.as_posix()}")
