"""Abstract ConfigFile interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ConfigFile(ABC):
    """
    One addressable file in a configuration tree.

    Implementations are immutable snapshots: content is fixed at construction
    and resolve() returns a new, independent object.
    """

    @abstractmethod
    def path(self) -> str:
        """Root-relative path with forward slashes (e.g. '/baz/foo')."""
        ...

    @abstractmethod
    def content(self) -> bytes:
        """Raw bytes of the file."""
        ...

    @abstractmethod
    def resolve(self, label: str) -> "ConfigFile":
        """Resolve a label relative to the directory containing this file.

        Raises CannotResolveLabel if the target does not exist or is not a file.
        """
        ...

    def read_text(self, encoding: str = "utf-8") -> str:
        """Content decoded with encoding; undecodable bytes are replaced."""
        return self.content().decode(encoding, errors="replace")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path()!r})"
