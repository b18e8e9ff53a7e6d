"""Tree hashing engine.

Walks a directory, hashes each file with SHA-256, sorts the
``<digest>  <path>`` lines byte-wise and hashes the resulting table.
"""

from treehash.engine.aggregate import digest_of, digest_of_lines, digest_table
from treehash.engine.errors import (
    ConfigError,
    DigestLengthError,
    FileKind,
    InvalidFileTypeError,
    RootMismatchError,
    TreeHashError,
    TreeHashIOError,
)
from treehash.engine.hasher import ContentHasher
from treehash.engine.options import HashOptions
from treehash.engine.paths import normalize_path
from treehash.engine.records import DigestProvider, FileRecord, RecordSpy
from treehash.engine.result import TreeHashResult
from treehash.engine.table import CanonicalEntry, CanonicalTable
from treehash.engine.tree import TreeHash
from treehash.engine.walker import IgnoredEntry, IgnoreReason, TreeWalker, WalkResult

__all__ = [
    "CanonicalEntry",
    "CanonicalTable",
    "ConfigError",
    "ContentHasher",
    "DigestLengthError",
    "DigestProvider",
    "FileKind",
    "FileRecord",
    "HashOptions",
    "IgnoreReason",
    "IgnoredEntry",
    "InvalidFileTypeError",
    "RecordSpy",
    "RootMismatchError",
    "TreeHash",
    "TreeHashError",
    "TreeHashIOError",
    "TreeHashResult",
    "TreeWalker",
    "WalkResult",
    "digest_of",
    "digest_of_lines",
    "digest_table",
    "normalize_path",
]
