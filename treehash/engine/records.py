"""File records — a path paired with its lazily computed content digest."""

from __future__ import annotations

import errno
import logging
import os
import stat
from abc import ABC, abstractmethod
from pathlib import Path

from treehash.engine.errors import (
    FileKind,
    InvalidFileTypeError,
    TreeHashIOError,
)
from treehash.engine.hasher import ContentHasher

logger = logging.getLogger(__name__)


def file_kind(mode: int) -> FileKind | None:
    """Return the invalid kind encoded in *mode*, or None for regular files."""
    if stat.S_ISDIR(mode):
        return FileKind.DIR
    if stat.S_ISBLK(mode):
        return FileKind.BLOCK_DEVICE
    if stat.S_ISCHR(mode):
        return FileKind.CHAR_DEVICE
    if stat.S_ISFIFO(mode):
        return FileKind.FIFO
    if stat.S_ISSOCK(mode):
        return FileKind.SOCKET
    return None


# ---------------------------------------------------------------------------
# Abstract provider
# ---------------------------------------------------------------------------

class DigestProvider(ABC):
    """Anything that can report a path and the digest of its contents."""

    @property
    @abstractmethod
    def path(self) -> Path: ...

    @property
    @abstractmethod
    def digest(self) -> bytes | None: ...

    @abstractmethod
    def compute_digest(self) -> None:
        """Compute and store the digest, replacing any stored value."""

    def ensure_digest(self) -> None:
        """Compute the digest unless one is already stored."""
        if self.digest is None:
            self.compute_digest()


# ---------------------------------------------------------------------------
# Filesystem-backed record
# ---------------------------------------------------------------------------

class FileRecord(DigestProvider):
    """A file on disk and the SHA-256 digest of its contents.

    Parameters
    ----------
    path:
        Absolute path of the file.  Symlinks are kept as given; reading
        goes through the link.
    digest:
        Optional precomputed digest.  When set, :meth:`ensure_digest`
        never touches the file.
    """

    def __init__(self, path: str | Path, digest: bytes | None = None) -> None:
        self._path = Path(path)
        self._digest = digest

    @classmethod
    def from_path(cls, path: str | Path) -> FileRecord:
        """Create a record after checking that *path* is an absolute regular file.

        Raises :class:`TreeHashIOError` for relative or missing paths and
        :class:`InvalidFileTypeError` for directories, devices, FIFOs and
        sockets.
        """
        p = Path(path)
        if not p.is_absolute():
            raise TreeHashIOError(errno.EINVAL, "path not absolute", str(p))

        try:
            mode = os.stat(p).st_mode
        except OSError as exc:
            raise TreeHashIOError.from_os_error(exc, p) from exc

        kind = file_kind(mode)
        if kind is not None:
            raise InvalidFileTypeError(kind, p)

        return cls(p)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def digest(self) -> bytes | None:
        return self._digest

    def compute_digest(self) -> None:
        """Read the whole file and store its digest."""
        try:
            self._digest = ContentHasher.hash_file(self._path)
        except OSError as exc:
            raise TreeHashIOError.from_os_error(exc, self._path) from exc
        logger.debug("Hashed %s -> %s", self._path, self._digest.hex())

    def __repr__(self) -> str:
        shown = self._digest.hex() if self._digest is not None else None
        return f"FileRecord(path={str(self._path)!r}, digest={shown!r})"


# ---------------------------------------------------------------------------
# Deterministic double (testing only)
# ---------------------------------------------------------------------------

class RecordSpy(DigestProvider):
    """Record with a programmed digest that counts computations.

    ``compute_digest()`` stores *next_digest* instead of reading a file,
    so tests can check how often hashing was triggered without touching
    the filesystem.
    """

    def __init__(
        self,
        path: str | Path,
        digest: bytes | None = None,
        next_digest: bytes | None = None,
    ) -> None:
        self._path = Path(path)
        self._digest = digest
        self.next_digest = next_digest
        self.compute_calls = 0

    @property
    def path(self) -> Path:
        return self._path

    @property
    def digest(self) -> bytes | None:
        return self._digest

    def compute_digest(self) -> None:
        self.compute_calls += 1
        if self.next_digest is None:
            raise AssertionError(f"No next digest programmed for {self._path}")
        self._digest = self.next_digest
