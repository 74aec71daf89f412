"""Shared utilities: content hashing, ignore patterns."""

from conftree.utils.hashing import content_digest, content_hash
from conftree.utils.ignore import build_spec, is_ignored, load_patterns, parse_ignore_file

__all__ = [
    "build_spec",
    "content_digest",
    "content_hash",
    "is_ignored",
    "load_patterns",
    "parse_ignore_file",
]
