"""Integration tests: argument parsing and dispatch through main()."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from conftree import __version__
from conftree.cli import build_parser, main, setup_logging


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out


def test_command_required() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_resolve_flags_parse() -> None:
    args = build_parser().parse_args(["resolve", "main.sky", "a", "b", "--hash", "-v"])
    assert args.run == "resolve"
    assert args.labels == ["a", "b"]
    assert args.hash and args.verbose


def test_main_resolve(fixture_project: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["-q", "resolve", str(fixture_project / "copy.bara.sky"), "workflows/release.sky", "transforms.sky", "--path-only"])
    assert capsys.readouterr().out == "/workflows/transforms.sky\n"


def test_main_author(capsys: pytest.CaptureFixture[str]) -> None:
    main(["author", "Foo <foo@bar.com>"])
    assert capsys.readouterr().out == "Foo <foo@bar.com>\n"


def test_setup_logging_levels() -> None:
    logger = logging.getLogger("conftree")
    setup_logging(verbose=True)
    assert logger.level == logging.DEBUG
    setup_logging(quiet=True)
    assert logger.level == logging.ERROR
