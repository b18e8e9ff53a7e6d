"""HashOptions — traversal and rendering policy for a run."""

from __future__ import annotations

from pydantic import BaseModel


class HashOptions(BaseModel):
    """Configurable policy for walking and rendering a tree.

    Defaults match ``fd -t f --exec sha256sum`` run from the root:
    hidden entries and symlinks are skipped and paths are ``./``-relative.
    """

    follow_symlinks: bool = False
    include_hidden: bool = False
    ignore_invalid_types: bool = False
    set_root: bool = True
