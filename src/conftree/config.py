"""Settings: defaults, global config and project overrides (JSON)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# Directory that marks the root of a configuration tree
CONFTREE_DIR = ".conftree"
CONFIG_FILENAME = "config.json"


def global_config_path() -> Path:
    """Path to global config file (~/.conftree/config.json)."""
    return Path.home() / CONFTREE_DIR / CONFIG_FILENAME


def project_config_path(project_root: Path) -> Path:
    """Path to project-local config (<root>/.conftree/config.json)."""
    return project_root / CONFTREE_DIR / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    return {
        "content_encoding": "utf-8",
        "author": {
            "default": None,
        },
        "logging": {
            "level": "WARNING",
            "file": None,
        },
        "ignore": {
            "use_gitignore": True,
            "builtin_patterns": [".git/", f"{CONFTREE_DIR}/"],
            "additional_patterns": [],
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load a JSON object from path; None if the file is missing, invalid or not an object."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_raw_config(path: Path) -> dict[str, Any]:
    """Config file contents without defaults; {} if missing or invalid."""
    return _load_json(path) or {}


def load_config(project_root: Path | None = None) -> dict[str, Any]:
    """
    Merged configuration: defaults, then ~/.conftree/config.json, then
    <project_root>/.conftree/config.json when project_root is given.
    """
    merged = default_config()
    global_data = _load_json(global_config_path())
    if global_data is not None:
        _deep_merge(merged, global_data)
    if project_root is not None:
        project_data = _load_json(project_config_path(project_root.resolve()))
        if project_data is not None:
            _deep_merge(merged, project_data)
    return merged


def save_config(path: Path, data: dict[str, Any]) -> None:
    """Write data as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def find_project_root(path: Path) -> Path | None:
    """
    Walk upward from path looking for a directory that contains .conftree.
    Returns that directory if found, else None.
    """
    resolved = path.resolve()
    if resolved.is_file():
        resolved = resolved.parent
    current = resolved
    while True:
        if (current / CONFTREE_DIR).is_dir():
            return current
        if current.parent == current:
            return None
        current = current.parent


def get_nested(data: dict[str, Any], key_path: str) -> Any:
    """Value at a dotted key (e.g. 'author.default'); None if missing."""
    current: Any = data
    for part in key_path.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def set_nested(data: dict[str, Any], key_path: str, value: Any) -> None:
    """Set a dotted key in data, creating intermediate dicts."""
    parts = key_path.split(".")
    current = data
    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value
