"""Parse an author string and print it in canonical form."""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path

from conftree.author import Author
from conftree.config import find_project_root, get_nested, load_config
from conftree.errors import ConfigValidationError


def run(args: Namespace) -> None:
    author_str = getattr(args, "author", None)
    if author_str is None:
        config = load_config(find_project_root(Path.cwd()))
        author_str = get_nested(config, "author.default")
        if not author_str:
            print("Error: no author given and author.default is not set in config.", file=sys.stderr)
            sys.exit(1)

    try:
        author = Author.parse(author_str)
    except ConfigValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if getattr(args, "json", False):
        print(json.dumps(author.to_dict(), indent=2))
    else:
        print(author)
