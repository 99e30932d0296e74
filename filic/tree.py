"""Generic traversal over anything satisfying ``FileSystemEntity``.

Every step re-queries the filesystem; a tree that changes while it is walked
may raise or yield a mix of old and new state.
"""

from __future__ import annotations

import os
from collections.abc import Iterator

from .directory import Directory
from .entity import Entity, FileSystemEntity
from .file import File

TREE_BRANCH = "├─ "
TREE_LAST = "└─ "
TREE_PIPE = "│  "
TREE_SPACE = "   "


def resolve(entity: FileSystemEntity) -> Directory | File:
    """Return a typed handle for ``entity``; missing paths resolve to ``File``."""
    if isinstance(entity, (Directory, File)):
        base = entity.entity
    else:
        base = Entity(entity.path)
    if base.exists() and base.is_directory():
        return Directory(base)
    return File(base)


def _sorted_children(directory: Directory, show_hidden: bool) -> list[Directory | File]:
    """Directories first, then files, each case-insensitively by name."""
    children = [resolve(child) for child in directory.list_as_entities()]
    if not show_hidden:
        children = [child for child in children if not child.name.startswith(".")]
    children.sort(key=lambda child: (not isinstance(child, Directory), child.name.lower()))
    return children


def _descends(child: Directory | File) -> bool:
    """Only real directories are entered; symlinked ones are listed but not followed."""
    return isinstance(child, Directory) and not os.path.islink(child.path)


def walk(
    directory: Directory,
    *,
    show_hidden: bool = True,
    max_depth: int | None = None,
) -> Iterator[tuple[int, Directory | File]]:
    """Yield ``(depth, handle)`` depth-first in pre-order, excluding the root.

    Direct children have depth 1; entries deeper than ``max_depth`` are
    skipped, so ``max_depth=0`` yields nothing. Symlinks to directories are
    yielded as ``Directory`` but never descended into, which keeps link cycles
    finite.
    """

    def visit(current: Directory, depth: int) -> Iterator[tuple[int, Directory | File]]:
        if max_depth is not None and depth > max_depth:
            return
        for child in _sorted_children(current, show_hidden):
            yield depth, child
            if _descends(child):
                yield from visit(child, depth + 1)

    yield from visit(directory, 1)


def render_tree(
    directory: Directory,
    *,
    show_hidden: bool = True,
    max_depth: int | None = None,
) -> str:
    """Render ``directory`` as box-drawing tree text, one entry per line."""
    root_label = directory.path if directory.path.endswith(os.sep) else directory.path + os.sep
    lines = [root_label]

    def emit(current: Directory, prefix: str, depth: int) -> None:
        if max_depth is not None and depth > max_depth:
            return
        children = _sorted_children(current, show_hidden)
        for idx, child in enumerate(children):
            is_last = idx == len(children) - 1
            connector = TREE_LAST if is_last else TREE_BRANCH
            is_dir = isinstance(child, Directory)
            lines.append(f"{prefix}{connector}{child.name}{'/' if is_dir else ''}")
            if _descends(child):
                emit(child, prefix + (TREE_SPACE if is_last else TREE_PIPE), depth + 1)

    emit(directory, "", 1)
    return "\n".join(lines) + "\n"


__all__ = [
    "resolve",
    "walk",
    "render_tree",
]
