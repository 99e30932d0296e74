"""Path-backed entity handles and the shared filesystem-entity capability.

An ``Entity`` is a value wrapping one path string. It says nothing about
whether the path exists or what it denotes; every query goes to the live
filesystem and nothing is cached between calls.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .errors import NotFoundOrInaccessibleError

if TYPE_CHECKING:
    from .directory import Directory

PathLike = str | os.PathLike[str]


@runtime_checkable
class FileSystemEntity(Protocol):
    """Capability shared by entities, directories, and files."""

    @property
    def path(self) -> str: ...

    def exists(self) -> bool: ...

    def is_directory(self) -> bool: ...

    def join(self, name: str) -> str: ...

    def open_parent(self) -> Directory: ...


@dataclass(frozen=True)
class Entity:
    """Typeless handle over ``path``; equal paths are interchangeable."""

    path: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", os.fspath(self.path))

    @property
    def name(self) -> str:
        return os.path.basename(os.path.normpath(self.path))

    def exists(self) -> bool:
        """Return whether a stat on the path succeeds, folding every failure into ``False``."""
        try:
            os.stat(self.path)
        except (OSError, ValueError):
            return False
        return True

    def is_directory(self) -> bool:
        """Return whether the existing path denotes a directory.

        Raises ``NotFoundOrInaccessibleError`` when the stat fails. Absence is
        reported as the ``EntityNotFoundError`` subclass so callers that care
        can tell it apart from permission or other access failures.
        """
        try:
            info = os.stat(self.path)
        except OSError as exc:
            raise NotFoundOrInaccessibleError.from_os_error(self.path, exc) from exc
        return stat.S_ISDIR(info.st_mode)

    def join(self, name: str) -> str:
        """Return ``path`` joined with ``name`` using native separators; no I/O.

        Leading separators on ``name`` are dropped, so an absolute name still
        lands under ``path``.
        """
        relative = name.lstrip(os.sep + (os.altsep or ""))
        return os.path.normpath(os.path.join(self.path, relative))

    def open_parent(self) -> Directory:
        """Return a handle for the lexical parent, which may not exist."""
        from .directory import Directory

        parent = os.path.dirname(os.path.normpath(self.path))
        return Directory(Entity(parent or os.curdir))


def new_entity(path: PathLike) -> Entity:
    return Entity(os.fspath(path))


__all__ = [
    "FileSystemEntity",
    "Entity",
    "PathLike",
    "new_entity",
]
