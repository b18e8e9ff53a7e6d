"""Exception hierarchy for tree hashing runs."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class FileKind(str, Enum):
    """Filesystem entry kinds that can't be content-hashed."""

    DIR = "dir"
    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    FIFO = "fifo"
    SOCKET = "socket"


class TreeHashError(Exception):
    """Base class for every failure of a hashing run."""


class TreeHashIOError(TreeHashError, OSError):
    """Raised when a file or directory can't be read."""

    @classmethod
    def from_os_error(cls, exc: OSError, path: str | Path | None = None) -> TreeHashIOError:
        """Wrap *exc*, keeping its errno and naming *path* when given."""
        filename = str(path) if path is not None else exc.filename
        if exc.errno is None:
            return cls(str(exc))
        return cls(exc.errno, exc.strerror, filename)


class InvalidFileTypeError(TreeHashError):
    """Raised when an entry is a directory, device, FIFO or socket."""

    def __init__(self, kind: FileKind, path: str | Path) -> None:
        self.kind = kind
        self.path = Path(path)
        super().__init__(f"Invalid file type {kind.value}: {self.path}")


class RootMismatchError(TreeHashError, ValueError):
    """Raised when a file does not lie under the declared root."""

    def __init__(self, path: str | Path, root: str | Path) -> None:
        self.path = Path(path)
        self.root = Path(root)
        super().__init__(f"{self.path} is not under root {self.root}")


class DigestLengthError(TreeHashError, ValueError):
    """Raised when a digest is not exactly 32 bytes long."""


class ConfigError(TreeHashError, ValueError):
    """Raised when an explicitly given config file can't be used."""
