"""TreeHash — the single entry point for hashing a directory tree.

Usage::

    from treehash import TreeHash

    th = TreeHash().with_files_from_dir("/path/to/build")
    th.compute_hash()
    print(th.hexdigest())
    print(th.hashtable(), end="")

The result equals ``find -type f -exec sha256sum {} + | LC_ALL=C sort |
sha256sum`` run from the root directory.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from treehash.engine.aggregate import digest_table
from treehash.engine.errors import TreeHashError
from treehash.engine.options import HashOptions
from treehash.engine.paths import normalize_path
from treehash.engine.records import DigestProvider
from treehash.engine.result import TreeHashResult
from treehash.engine.table import CanonicalEntry, CanonicalTable
from treehash.engine.walker import IgnoredEntry, TreeWalker

logger = logging.getLogger(__name__)


class TreeHash:
    """Builder-style façade: configure files and root, then compute.

    Configuration methods return ``self`` and may be chained in any
    order.  :meth:`compute_hash` may be called again to recompute; it is
    not safe to call concurrently on one instance.
    """

    def __init__(self) -> None:
        self._root: Path | None = None
        self._files: list[DigestProvider] = []
        self._ignored: list[IgnoredEntry] = []
        self._options = HashOptions()
        self._table: CanonicalTable | None = None
        self._digest: bytes | None = None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def with_root(self, root: str | Path | None) -> TreeHash:
        """Declare the directory output paths are made relative to."""
        self._root = Path(root) if root is not None else None
        return self

    def with_files(self, files: Iterable[DigestProvider]) -> TreeHash:
        """Use *files* as the records to hash, replacing any previous list."""
        self._files = list(files)
        return self

    def with_options(self, options: HashOptions) -> TreeHash:
        """Set the defaults used by :meth:`with_files_from_dir`."""
        self._options = options
        return self

    def with_files_from_dir(
        self,
        path: str | Path,
        set_root: bool | None = None,
        follow_symlinks: bool | None = None,
        include_hidden: bool | None = None,
        ignore_invalid_types: bool | None = None,
    ) -> TreeHash:
        """Walk *path* and use the files found as records.

        Arguments left as None fall back to the configured
        :class:`HashOptions`.  Raises :class:`TreeHashError` subclasses
        when the walk fails; the instance is left unchanged in that case.
        """
        opts = self._options
        walker = TreeWalker(
            follow_symlinks=_pick(follow_symlinks, opts.follow_symlinks),
            include_hidden=_pick(include_hidden, opts.include_hidden),
            ignore_invalid_types=_pick(ignore_invalid_types, opts.ignore_invalid_types),
        )
        root = Path(os.path.abspath(path))
        walked = walker.walk(root)

        self._files = list(walked.records)
        self._ignored = list(walked.ignored)
        if _pick(set_root, opts.set_root):
            self._root = root
        return self

    # ------------------------------------------------------------------
    # Computation
    # ------------------------------------------------------------------

    def compute_hash(self) -> TreeHashResult:
        """Hash every record, build the sorted table and its digest.

        Digests already stored on a record are reused.  On failure the
        table and digest stay unset and the error propagates.
        """
        self._table = None
        self._digest = None

        entries: list[CanonicalEntry] = []
        for record in self._files:
            record.ensure_digest()
            digest = record.digest
            if digest is None:
                raise TreeHashError(f"No digest available for {record.path}")
            entries.append(CanonicalEntry(digest, normalize_path(record.path, self._root)))

        table = CanonicalTable(entries)
        tree_digest = digest_table(table)

        self._table = table
        self._digest = tree_digest
        logger.info("Hashed %d files: %s", len(table), tree_digest.hex())
        return self.result()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def root(self) -> Path | None:
        return self._root

    def files(self) -> list[DigestProvider]:
        return list(self._files)

    def ignored(self) -> list[IgnoredEntry]:
        return list(self._ignored)

    def hash(self) -> bytes | None:
        """Return the raw tree digest, or None before a successful run."""
        return self._digest

    def hexdigest(self) -> str | None:
        return self._digest.hex() if self._digest is not None else None

    def table(self) -> CanonicalTable | None:
        return self._table

    def hashtable(self) -> str | None:
        """Return the rendered table text, or None before a successful run."""
        return self._table.render() if self._table is not None else None

    def result(self) -> TreeHashResult:
        """Return a snapshot of the current state."""
        return TreeHashResult(
            root=self._root,
            entries=list(self._table) if self._table is not None else [],
            digest=self._digest,
            ignored=list(self._ignored),
        )


def _pick(value: bool | None, default: bool) -> bool:
    return default if value is None else value
