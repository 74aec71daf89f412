"""Filesystem-backed ConfigFile."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from conftree.config_file.base import ConfigFile
from conftree.config_file.labels import resolve_label
from conftree.errors import CannotResolveLabel, ConfigReadError

logger = logging.getLogger(__name__)


class SimpleConfigFile(ConfigFile):
    """
    A ConfigFile read from local disk.

    The file's bytes are read once, in the constructor. path() is the file's
    location relative to root; root defaults to the filesystem anchor, so a
    file at /etc/app/main.sky has path '/etc/app/main.sky'.
    """

    def __init__(self, file: Path | str, root: Path | str | None = None) -> None:
        # Symlinks are not followed: a file is identified by its in-root location
        file = Path(os.path.abspath(file))
        root = Path(os.path.abspath(root)) if root is not None else Path(file.anchor)
        try:
            rel = file.relative_to(root)
        except ValueError:
            raise ValueError(f"{file.as_posix()} is not inside root {root.as_posix()}") from None
        self._load(root, "/" + rel.as_posix() if rel.parts else "/")

    @classmethod
    def _at(cls, root: Path, path: str) -> SimpleConfigFile:
        """Build from an already-normalized root-relative path."""
        obj = cls.__new__(cls)
        obj._load(root, path)
        return obj

    def _load(self, root: Path, path: str) -> None:
        self._root = root
        self._path = path
        self._file = root.joinpath(*path.split("/")[1:])
        try:
            self._content = self._file.read_bytes()
        except OSError as e:
            raise ConfigReadError(f"Cannot read '{path}': {e}", path) from e
        logger.debug("Read %s (%d bytes)", path, len(self._content))

    @property
    def file(self) -> Path:
        """Absolute location on disk."""
        return self._file

    @property
    def root(self) -> Path:
        return self._root

    def path(self) -> str:
        return self._path

    def content(self) -> bytes:
        return self._content

    def resolve(self, label: str) -> SimpleConfigFile:
        target = resolve_label(self._path, label)
        target_file = self._root.joinpath(*target.split("/")[1:])
        logger.debug("Resolving '%s' from %s -> %s", label, self._path, target)
        try:
            is_dir = target_file.is_dir()
            is_file = not is_dir and target_file.is_file()
        except OSError as e:
            # ENAMETOOLONG, EACCES and the like
            raise ConfigReadError(f"Cannot read '{target}': {e}", target) from e
        if is_dir:
            raise CannotResolveLabel(
                f"Cannot find '{label}'. '{target}' is a directory.", label, target
            )
        if not is_file:
            raise CannotResolveLabel(
                f"Cannot find '{label}'. '{target}' does not exist.", label, target
            )
        return SimpleConfigFile._at(self._root, target)
