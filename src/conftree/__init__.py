"""conftree: configuration trees with relative labels, and change author identities."""

from conftree.author import Author
from conftree.config_file import ConfigFile, MapConfigFile, SimpleConfigFile
from conftree.errors import (
    CannotResolveLabel,
    ConfigReadError,
    ConfigValidationError,
    ConftreeError,
)

__version__ = "0.1.0"

__all__ = [
    "Author",
    "CannotResolveLabel",
    "ConfigFile",
    "ConfigReadError",
    "ConfigValidationError",
    "ConftreeError",
    "MapConfigFile",
    "SimpleConfigFile",
    "__version__",
]
