"""Content hashing (SHA-256) for config files."""

from __future__ import annotations

import hashlib
from pathlib import Path

from conftree.config_file import ConfigFile


def content_digest(config_file: ConfigFile) -> str:
    """SHA-256 hex digest of a config file's content."""
    return hashlib.sha256(config_file.content()).hexdigest()


def content_hash(path: Path | str) -> str:
    """Compute SHA-256 hash of a file on disk. Binary-safe (reads raw bytes)."""
    path = Path(path)
    if not path.is_file():
        raise ValueError(f"Not a file: {path}")
    return hashlib.sha256(path.read_bytes()).hexdigest()
