"""Path rendering for table entries."""

from __future__ import annotations

import os
from pathlib import Path, PurePath

from treehash.config import RELATIVE_PREFIX
from treehash.engine.errors import RootMismatchError


def lossy_str(path: str | PurePath) -> str:
    """Render *path* as UTF-8 text, replacing undecodable bytes with U+FFFD."""
    return os.fsencode(path).decode("utf-8", errors="replace")


def normalize_path(path: str | Path, root: str | Path | None = None) -> str:
    """Return the table form of *path*.

    Without a *root* the path is rendered unchanged.  With a root the
    root components are stripped and the remainder is rendered as
    ``./<relative/posix/path>``.

    Raises :class:`RootMismatchError` when *path* does not start with
    every component of *root*.
    """
    p = PurePath(path)
    if root is None:
        return lossy_str(p)

    try:
        rel = p.relative_to(root)
    except ValueError as exc:
        raise RootMismatchError(p, root) from exc

    if not rel.parts:
        return RELATIVE_PREFIX
    return RELATIVE_PREFIX + lossy_str(rel.as_posix())
