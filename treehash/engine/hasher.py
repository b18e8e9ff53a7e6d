"""Content hashing utilities using stdlib hashlib (SHA-256)."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Any

from treehash.config import CHUNK_SIZE, HASH_ALGORITHM


class ContentHasher:
    """SHA-256 hashing for byte strings, text and files.

    All methods return the raw 32-byte digest; callers hex-encode when
    rendering.
    """

    @staticmethod
    def new() -> Any:
        """Return a fresh incremental hasher."""
        return hashlib.new(HASH_ALGORITHM)

    @staticmethod
    def hash_bytes(data: bytes) -> bytes:
        """Return the digest of *data*."""
        return hashlib.new(HASH_ALGORITHM, data).digest()

    @staticmethod
    def hash_string(text: str) -> bytes:
        """Return the digest of the UTF-8 encoding of *text*."""
        return ContentHasher.hash_bytes(text.encode("utf-8"))

    @staticmethod
    def hash_file(path: str | Path) -> bytes:
        """Return the digest of the file contents at *path*.

        Raises :class:`OSError` when the file can't be opened or read.
        """
        h = ContentHasher.new()
        p = Path(path)
        with p.open("rb") as f:
            while True:
                chunk = f.read(CHUNK_SIZE)
                if not chunk:
                    break
                h.update(chunk)
        return h.digest()
