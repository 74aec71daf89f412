"""Exception types raised by conftree.

Kept in a leaf module so every other module can import them without cycles.
"""

from __future__ import annotations

from typing import Optional


class ConftreeError(Exception):
    """Base class for all conftree errors."""


class ConfigValidationError(ConftreeError):
    """A user-supplied configuration value is invalid (e.g. a malformed author)."""


class CannotResolveLabel(ConftreeError):
    """A label could not be resolved to an existing, readable file."""

    def __init__(self, message: str, label: str, resolved_path: Optional[str] = None) -> None:
        super().__init__(message)
        self.label = label
        self.resolved_path = resolved_path  # None when the label itself is unusable


class ConfigReadError(ConftreeError):
    """The storage backing a config file could not be read."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path
