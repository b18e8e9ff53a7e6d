"""CanonicalTable — sorted (digest, path) pairs in sha256sum text form.

Entries sort by the raw digest bytes, then by the UTF-8 bytes of the
path.  This is the order ``LC_ALL=C sort`` gives the rendered lines:
lowercase hex keeps the byte order of the digest, and every digest has
the same width, so the path only decides ties.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, field_serializer

from treehash.config import DIGEST_SIZE, LINE_SEPARATOR
from treehash.engine.errors import DigestLengthError


class CanonicalEntry(BaseModel):
    """One table line: a file digest and its normalized path."""

    model_config = ConfigDict(frozen=True)

    digest: bytes
    path: str

    def __init__(self, digest: bytes, path: str) -> None:
        if len(digest) != DIGEST_SIZE:
            raise DigestLengthError(
                f"Digest must be {DIGEST_SIZE} bytes, got {len(digest)}"
            )
        super().__init__(digest=bytes(digest), path=path)

    @field_serializer("digest")
    def _digest_hex(self, value: bytes) -> str:
        return value.hex()

    def sort_key(self) -> tuple[bytes, bytes]:
        return self.digest, self.path.encode("utf-8", errors="surrogatepass")

    def line(self) -> str:
        """Return ``<hex digest>  <path>\\n``."""
        return f"{self.digest.hex()}{LINE_SEPARATOR}{self.path}\n"


class CanonicalTable:
    """Immutable, sorted sequence of :class:`CanonicalEntry`."""

    def __init__(self, entries: Iterable[CanonicalEntry] = ()) -> None:
        self._entries: tuple[CanonicalEntry, ...] = tuple(
            sorted(entries, key=CanonicalEntry.sort_key)
        )

    @property
    def entries(self) -> tuple[CanonicalEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CanonicalEntry]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanonicalTable):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"CanonicalTable({len(self._entries)} entries)"

    def lines(self) -> Iterator[str]:
        """Yield the rendered lines in sorted order."""
        for entry in self._entries:
            yield entry.line()

    def render(self) -> str:
        """Return the full table text; empty for an empty table."""
        return "".join(self.lines())

    def __str__(self) -> str:
        return self.render()
