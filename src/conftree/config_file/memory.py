"""In-memory ConfigFile backed by a mapping of paths to bytes."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Union

from conftree.config_file.base import ConfigFile
from conftree.config_file.labels import normalize_path, resolve_label
from conftree.errors import CannotResolveLabel, ConfigReadError

FileContents = Mapping[str, Union[bytes, str]]


class MapConfigFile(ConfigFile):
    """
    A ConfigFile over an in-memory tree, e.g. {'/foo': b'...', '/baz/foo': b'...'}.

    Keys are root-relative; the leading '/' is optional and str values are
    encoded as UTF-8. The mapping is copied once, so later changes to the
    caller's dict are not seen by this file or anything resolved from it.
    """

    def __init__(self, path: str, files: FileContents) -> None:
        snapshot: dict[str, bytes] = {}
        for key, value in files.items():
            if isinstance(value, str):
                value = value.encode("utf-8")
            elif not isinstance(value, (bytes, bytearray, memoryview)):
                raise TypeError(f"Content of {key!r} must be bytes or str, not {type(value).__name__}")
            snapshot[normalize_path(key)] = bytes(value)
        self._load(normalize_path(path), MappingProxyType(snapshot))

    @classmethod
    def _at(cls, path: str, files: Mapping[str, bytes]) -> MapConfigFile:
        obj = cls.__new__(cls)
        obj._load(path, files)
        return obj

    def _load(self, path: str, files: Mapping[str, bytes]) -> None:
        if path not in files:
            raise ConfigReadError(f"Cannot read '{path}': no such file", path)
        self._path = path
        self._files = files

    def path(self) -> str:
        return self._path

    def content(self) -> bytes:
        return self._files[self._path]

    def _is_dir(self, path: str) -> bool:
        prefix = path.rstrip("/") + "/"
        return any(key.startswith(prefix) for key in self._files)

    def resolve(self, label: str) -> MapConfigFile:
        target = resolve_label(self._path, label)
        if target not in self._files:
            if self._is_dir(target):
                raise CannotResolveLabel(
                    f"Cannot find '{label}'. '{target}' is a directory.", label, target
                )
            raise CannotResolveLabel(
                f"Cannot find '{label}'. '{target}' does not exist.", label, target
            )
        return MapConfigFile._at(target, self._files)
