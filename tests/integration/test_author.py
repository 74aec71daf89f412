"""Integration tests: conftree author."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from conftree.commands.author import run as author_run
from conftree.config import global_config_path, save_config


def _args(author: str | None, as_json: bool = False) -> object:
    return type("Args", (), {"author": author, "json": as_json})()


def test_author_prints_canonical_form(capsys: pytest.CaptureFixture[str]) -> None:
    author_run(_args("  Foo Bar<foo@bar.com >"))
    assert capsys.readouterr().out == "Foo Bar <foo@bar.com>\n"


def test_author_json(capsys: pytest.CaptureFixture[str]) -> None:
    author_run(_args("Foo <foo@bar.com>", as_json=True))
    assert json.loads(capsys.readouterr().out) == {"name": "Foo", "email": "foo@bar.com"}


def test_author_invalid_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        author_run(_args("Foo Bar"))
    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "Author 'Foo Bar' doesn't match the expected format 'name <mail@example.com>'" in err


def test_author_default_from_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    save_config(global_config_path(), {"author": {"default": "Release Bot <bot@example.com>"}})
    author_run(_args(None))
    assert capsys.readouterr().out == "Release Bot <bot@example.com>\n"


def test_author_no_default_exits(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit):
        author_run(_args(None))
    assert "author.default is not set" in capsys.readouterr().err
