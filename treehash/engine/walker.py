"""TreeWalker — collect hashable files below a root directory."""

from __future__ import annotations

import errno
import logging
import os
import stat
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from treehash.engine.errors import InvalidFileTypeError, TreeHashIOError
from treehash.engine.records import FileRecord, file_kind

logger = logging.getLogger(__name__)


class IgnoreReason(str, Enum):
    """Why a directory entry was left out of the hash."""

    SYMLINK = "symlink"
    HIDDEN = "hidden"
    DIR = "dir"
    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    FIFO = "fifo"
    SOCKET = "socket"


class IgnoredEntry(BaseModel):
    """A skipped directory entry and the policy that skipped it."""

    model_config = ConfigDict(frozen=True)

    path: Path
    reason: IgnoreReason


class WalkResult(BaseModel):
    """Records found by a walk, in traversal order, plus skipped entries."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    records: list[FileRecord] = Field(default_factory=list)
    ignored: list[IgnoredEntry] = Field(default_factory=list)


class TreeWalker:
    """Recursive directory traversal with symlink, hidden and file-type policies.

    Parameters
    ----------
    follow_symlinks:
        Descend into linked directories and hash linked files.  When
        False every symlink is recorded as ignored.
    include_hidden:
        Keep entries whose name starts with ``.``.  When False hidden
        files are skipped and hidden directories are not descended into.
    ignore_invalid_types:
        Record devices, FIFOs and sockets as ignored instead of failing
        the walk with :class:`InvalidFileTypeError`.
    """

    def __init__(
        self,
        follow_symlinks: bool = False,
        include_hidden: bool = False,
        ignore_invalid_types: bool = False,
    ) -> None:
        self.follow_symlinks = follow_symlinks
        self.include_hidden = include_hidden
        self.ignore_invalid_types = ignore_invalid_types

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def walk(self, root: str | Path) -> WalkResult:
        """Traverse *root* and return eligible records and ignored entries.

        The root itself is always walked, even when its own name is hidden.
        Raises :class:`TreeHashIOError` if *root* is missing, not a
        directory or any directory below it can't be listed.
        """
        root_path = Path(os.path.abspath(root))
        try:
            st = os.stat(root_path)
        except OSError as exc:
            raise TreeHashIOError.from_os_error(exc, root_path) from exc
        if not stat.S_ISDIR(st.st_mode):
            raise TreeHashIOError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(root_path))

        result = WalkResult()
        # Each pending directory carries the (dev, inode) keys of its ancestors.
        pending: list[tuple[Path, frozenset[tuple[int, int]]]] = [
            (root_path, frozenset({(st.st_dev, st.st_ino)})),
        ]
        while pending:
            directory, ancestors = pending.pop()
            subdirs = self._scan(directory, ancestors, result)
            pending.extend(reversed(subdirs))

        logger.info(
            "Walked %s: %d files, %d ignored",
            root_path, len(result.records), len(result.ignored),
        )
        return result

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _scan(
        self,
        directory: Path,
        ancestors: frozenset[tuple[int, int]],
        result: WalkResult,
    ) -> list[tuple[Path, frozenset[tuple[int, int]]]]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            raise TreeHashIOError.from_os_error(exc, directory) from exc

        subdirs: list[tuple[Path, frozenset[tuple[int, int]]]] = []
        for entry in entries:
            path = directory / entry.name

            if not self.include_hidden and entry.name.startswith("."):
                self._ignore(result, path, IgnoreReason.HIDDEN)
                continue

            try:
                is_link = entry.is_symlink()
                if is_link and not self.follow_symlinks:
                    self._ignore(result, path, IgnoreReason.SYMLINK)
                    continue
                st = entry.stat(follow_symlinks=True)
            except OSError as exc:
                if exc.errno == errno.ELOOP:
                    logger.warning("Symlink loop at %s, skipping", path)
                    self._ignore(result, path, IgnoreReason.SYMLINK)
                    continue
                raise TreeHashIOError.from_os_error(exc, path) from exc

            if stat.S_ISDIR(st.st_mode):
                key = (st.st_dev, st.st_ino)
                if key in ancestors:
                    logger.warning("Symlink loop at %s, skipping", path)
                    self._ignore(result, path, IgnoreReason.SYMLINK)
                    continue
                subdirs.append((path, ancestors | {key}))
                continue

            kind = file_kind(st.st_mode)
            if kind is None:
                result.records.append(FileRecord(path))
            elif self.ignore_invalid_types:
                self._ignore(result, path, IgnoreReason(kind.value))
            else:
                raise InvalidFileTypeError(kind, path)

        return subdirs

    @staticmethod
    def _ignore(result: WalkResult, path: Path, reason: IgnoreReason) -> None:
        logger.debug("Ignoring %s (%s)", path, reason.value)
        result.ignored.append(IgnoredEntry(path=path, reason=reason))
