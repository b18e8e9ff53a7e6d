"""treehash — deterministic, content-addressable fingerprints for directory trees."""

__version__ = "0.1.0"

from treehash.config_manager import ConfigManager
from treehash.engine.errors import (
    ConfigError,
    InvalidFileTypeError,
    RootMismatchError,
    TreeHashError,
    TreeHashIOError,
)
from treehash.engine.options import HashOptions
from treehash.engine.records import FileRecord
from treehash.engine.result import TreeHashResult
from treehash.engine.tree import TreeHash
from treehash.engine.walker import IgnoredEntry, IgnoreReason

__all__ = [
    "ConfigError",
    "ConfigManager",
    "FileRecord",
    "HashOptions",
    "IgnoreReason",
    "IgnoredEntry",
    "InvalidFileTypeError",
    "RootMismatchError",
    "TreeHash",
    "TreeHashError",
    "TreeHashIOError",
    "TreeHashResult",
]
