"""CLI entry point: argument parsing and subcommand dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from conftree import __version__
from conftree.config import load_config


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure the conftree logger: level from --verbose/--quiet or config,
    console handler on stderr, optional file handler from config.
    """
    config = load_config(None)
    log_cfg = config.get("logging") or {}
    if verbose:
        level_name = "DEBUG"
    elif quiet:
        level_name = "ERROR"
    else:
        level_name = (log_cfg.get("level") or "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    root = logging.getLogger("conftree")
    root.setLevel(level)
    if not root.handlers:
        fmt = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(fmt)
        root.addHandler(console)
        log_file = log_cfg.get("file")
        if log_file:
            try:
                fh = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
            except OSError as e:
                root.warning("Cannot open log file %s: %s", log_file, e)
            else:
                fh.setFormatter(fmt)
                root.addHandler(fh)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conftree",
        description="Inspect configuration trees and normalize change authors.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    log_group = parser.add_mutually_exclusive_group()
    log_group.add_argument("-v", "--verbose", action="store_true", help="Verbose (DEBUG) output.")
    log_group.add_argument("-q", "--quiet", action="store_true", help="Quiet (errors only).")

    # Same flags on subparsers so "conftree resolve main.sky -v" works
    global_flags = argparse.ArgumentParser(add_help=False)
    log_grp = global_flags.add_mutually_exclusive_group()
    log_grp.add_argument("-v", "--verbose", action="store_true", help=argparse.SUPPRESS)
    log_grp.add_argument("-q", "--quiet", action="store_true", help=argparse.SUPPRESS)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    p_init = subparsers.add_parser("init", help="Mark a directory as a configuration root (creates .conftree).")
    p_init.add_argument("path", type=Path, nargs="?", default=Path("."), help="Directory to initialize (default: .).")
    p_init.set_defaults(run="init")

    p_author = subparsers.add_parser(
        "author",
        help="Parse an author string and print its canonical 'Name <email>' form.",
        parents=[global_flags],
    )
    p_author.add_argument("author", nargs="?", help="Author string (default: author.default from config).")
    p_author.add_argument("--json", action="store_true", help="Print name and email as JSON.")
    p_author.set_defaults(run="author")

    p_resolve = subparsers.add_parser(
        "resolve",
        help="Load a config file and follow relative labels from it.",
        parents=[global_flags],
    )
    p_resolve.add_argument("entry", type=Path, help="Entry config file.")
    p_resolve.add_argument("labels", nargs="*", help="Labels to resolve, each relative to the previous result.")
    p_resolve.add_argument("--root", type=Path, help="Configuration root (default: project root, else entry's directory).")
    out_grp = p_resolve.add_mutually_exclusive_group()
    out_grp.add_argument("--hash", action="store_true", help="Print the SHA-256 of the content instead of the content.")
    out_grp.add_argument("--path-only", action="store_true", help="Print only the resolved path.")
    p_resolve.set_defaults(run="resolve")

    p_list = subparsers.add_parser("list", help="List config files under the root, honoring ignore patterns.", parents=[global_flags])
    p_list.add_argument("path", type=Path, nargs="?", default=Path("."), help="Directory inside the tree (default: .).")
    p_list.set_defaults(run="list")

    p_config = subparsers.add_parser("config", help="Show or edit configuration.", parents=[global_flags])
    p_config.add_argument("path", type=Path, nargs="?", default=Path("."), help="Project path for project-local config (default: .).")
    p_config.add_argument("--show", action="store_true", help="Display current settings.")
    p_config.add_argument("--set", dest="set_key", metavar="KEY=VALUE", help="Set a configuration value (dotted key).")
    p_config.add_argument("--global", dest="global_", action="store_true", help="With --set: write to global config even inside a project.")
    p_config.set_defaults(run="config")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=getattr(args, "verbose", False),
        quiet=getattr(args, "quiet", False),
    )

    for attr in ("path", "entry", "root"):
        value = getattr(args, attr, None)
        if value is not None:
            setattr(args, attr, value.resolve())

    run = args.run
    if run == "init":
        from conftree.commands.init_cmd import run as cmd_run
    elif run == "author":
        from conftree.commands.author import run as cmd_run
    elif run == "resolve":
        from conftree.commands.resolve import run as cmd_run
    elif run == "list":
        from conftree.commands.list_cmd import run as cmd_run
    elif run == "config":
        from conftree.commands.config_cmd import run as cmd_run
    else:
        parser.print_help()
        sys.exit(0)

    cmd_run(args)
