"""Configuration files addressable by root-relative path and resolvable by relative label."""

from conftree.config_file.base import ConfigFile
from conftree.config_file.memory import MapConfigFile
from conftree.config_file.simple import SimpleConfigFile

__all__ = [
    "ConfigFile",
    "MapConfigFile",
    "SimpleConfigFile",
]
