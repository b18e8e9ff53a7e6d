"""TreeHashResult model and report rendering."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from treehash.engine.table import CanonicalEntry, CanonicalTable
from treehash.engine.walker import IgnoredEntry


class TreeHashResult(BaseModel):
    """Outcome of one hashing run."""

    root: Path | None = None
    entries: list[CanonicalEntry] = Field(default_factory=list)
    digest: bytes | None = None
    ignored: list[IgnoredEntry] = Field(default_factory=list)

    @field_serializer("digest")
    def _digest_hex(self, value: bytes | None) -> str | None:
        return value.hex() if value is not None else None

    @property
    def hexdigest(self) -> str | None:
        return self.digest.hex() if self.digest is not None else None

    @property
    def table_text(self) -> str:
        return CanonicalTable(self.entries).render()

    def verify(self, expected_hex: str) -> bool:
        """Return True if the tree digest equals *expected_hex*."""
        if self.digest is None:
            return False
        return self.digest.hex() == expected_hex.strip().lower()

    def to_json(self) -> str:
        """Return structured JSON report."""
        return json.dumps(self.model_dump(mode="json"), indent=2)

    def to_markdown(self) -> str:
        """Generate a Markdown report."""
        lines = [
            "# Tree Hash Report",
            "",
            f"**Root:** {self.root if self.root is not None else '(absolute paths)'}",
            f"**Digest:** `{self.hexdigest or 'not computed'}`",
            f"**Files:** {len(self.entries)}",
            "",
        ]

        if self.entries:
            lines.append("## Table")
            lines.append("")
            lines.append("```")
            lines.append(self.table_text.rstrip("\n"))
            lines.append("```")
            lines.append("")

        if self.ignored:
            lines.append(f"## Ignored ({len(self.ignored)})")
            lines.append("")
            for entry in self.ignored:
                lines.append(f"- [{entry.reason.value}] `{entry.path}`")
            lines.append("")

        return "\n".join(lines)
