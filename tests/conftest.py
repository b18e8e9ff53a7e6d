"""Shared fixtures: numbered file trees and a tree with symlinks."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


def _create_numbered_files(directory: Path, n: int) -> None:
    for i in range(n):
        (directory / str(i)).write_bytes(b"")


def build_tree(
    root: Path,
    l1_files: int,
    l1_dirs: tuple[str, ...],
    l2_files: int,
    l2_dirs: tuple[str, ...],
    l3_files: int,
) -> Path:
    """Create numbered empty files on three levels below *root*.

    ``build_tree(root, 2, ("a", "b"), 1, ("x", "y"), 2)`` gives ``0``, ``1``,
    ``a/0``, ``a/x/0``, ``a/x/1``, ``a/y/0``, ``a/y/1`` and the same below ``b``.
    """
    root.mkdir(parents=True, exist_ok=True)
    _create_numbered_files(root, l1_files)
    for d1 in l1_dirs:
        level1 = root / d1
        level1.mkdir()
        _create_numbered_files(level1, l2_files)
        for d2 in l2_dirs:
            level2 = level1 / d2
            level2.mkdir()
            _create_numbered_files(level2, l3_files)
    return root


@pytest.fixture
def make_tree(tmp_path: Path):
    def _make(
        l1_files: int,
        l1_dirs: tuple[str, ...] = (),
        l2_files: int = 0,
        l2_dirs: tuple[str, ...] = (),
        l3_files: int = 0,
        name: str = "tree",
    ) -> Path:
        return build_tree(tmp_path / name, l1_files, l1_dirs, l2_files, l2_dirs, l3_files)

    return _make


@pytest.fixture
def linked_tree(tmp_path: Path) -> Path:
    """Tree with file and directory links pointing up- and downwards.

    .
    ├── 0
    ├── 1
    ├── a
    │   ├── 0, 1
    │   ├── downwards_dirlink -> b/x
    │   ├── x/0, x/1
    │   └── y/0, y/1
    ├── b
    │   ├── 0, 1
    │   ├── x/0, x/1, x/upwards_dirlink -> a/y
    │   └── y/0, y/1, y/upwards_link -> 1
    └── downwards_link -> a/0
    """
    root = build_tree(tmp_path / "linked", 2, ("a", "b"), 2, ("x", "y"), 2)

    (root / "a/0").write_text("a/0")
    (root / "1").write_text("1")
    (root / "b/x/0").write_text("b/x/0")
    (root / "b/x/1").write_text("b/x/1")
    (root / "a/y/0").write_text("a/y/0")
    (root / "a/y/1").write_text("a/y/1")

    os.symlink(root / "a/0", root / "downwards_link")
    os.symlink(root / "1", root / "b/y/upwards_link")
    os.symlink(root / "b/x", root / "a/downwards_dirlink")
    os.symlink(root / "a/y", root / "b/x/upwards_dirlink")
    return root
