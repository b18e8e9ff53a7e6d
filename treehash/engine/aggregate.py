"""Aggregate digest over the rendered canonical table."""

from __future__ import annotations

from collections.abc import Iterable

from treehash.engine.hasher import ContentHasher
from treehash.engine.table import CanonicalTable


def digest_of(table_text: str) -> bytes:
    """Hash the UTF-8 bytes of the whole table text in one call."""
    return ContentHasher.hash_string(table_text)


def digest_of_lines(lines: Iterable[str]) -> bytes:
    """Hash rendered lines one by one; same result as :func:`digest_of` on their join."""
    h = ContentHasher.new()
    for line in lines:
        h.update(line.encode("utf-8"))
    return h.digest()


def digest_table(table: CanonicalTable, streaming: bool = False) -> bytes:
    """Return the tree digest of *table*."""
    if streaming:
        return digest_of_lines(table.lines())
    return digest_of(table.render())
