"""Label normalization shared by every ConfigFile backing.

Paths here are root-relative posix strings that always start with '/'.
Nothing in this module touches the filesystem.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from conftree.errors import CannotResolveLabel

ROOT = "/"


def normalize_path(path: str) -> str:
    """Return path in canonical root-relative form ('/a/b', never trailing '/')."""
    parts = [p for p in path.replace("\\", "/").split("/") if p and p != "."]
    return ROOT + "/".join(parts)


def parent_dir(path: str) -> str:
    """Directory containing the file at path ('/baz/foo' -> '/baz', '/foo' -> '/')."""
    return PurePosixPath(normalize_path(path)).parent.as_posix()


def resolve_label(current_path: str, label: str) -> str:
    """
    Resolve label against the directory of current_path.

    Resolving 'bar' from '/baz/foo' gives '/baz/bar'. '..' segments climb one
    directory but never above the root. Raises CannotResolveLabel for labels
    that are empty, absolute, URL-like, or that escape the root.
    """
    if not isinstance(label, str) or not label.strip():
        raise CannotResolveLabel(f"Cannot resolve {label!r}. A label must be a non-empty string.", str(label))
    if label.startswith(("/", "\\")) or "://" in label:
        raise CannotResolveLabel(
            f"Cannot resolve '{label}'. Only relative labels are supported.", label
        )

    segments = label.replace("\\", "/").split("/")
    stack = [p for p in parent_dir(current_path).split("/") if p]
    for segment in segments:
        if not segment or segment == ".":
            continue
        if segment == "..":
            if not stack:
                raise CannotResolveLabel(
                    f"Cannot find '{label}'. It resolves outside the configuration root.", label
                )
            stack.pop()
            continue
        stack.append(segment)
    return ROOT + "/".join(stack)
