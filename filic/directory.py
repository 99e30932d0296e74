"""Directory handles: idempotent creation, child type resolution, and listing.

Resolution and listing helpers are check-then-act sequences. The existence
query, the type query, and whatever the caller does next are separate
filesystem calls, so a concurrent mutation in between can leave the returned
handle describing a state that no longer holds. Callers that need stronger
guarantees must coordinate externally.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .entity import Entity, PathLike
from .errors import TypeMismatchError
from .file import File

logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o755


@dataclass(frozen=True)
class Directory:
    """Handle for a path that is, or will become, a directory."""

    entity: Entity

    @classmethod
    def at(cls, path: PathLike) -> "Directory":
        return cls(Entity(os.fspath(path)))

    @property
    def path(self) -> str:
        return self.entity.path

    @property
    def name(self) -> str:
        return self.entity.name

    def exists(self) -> bool:
        return self.entity.exists()

    def is_directory(self) -> bool:
        return self.entity.is_directory()

    def join(self, name: str) -> str:
        return self.entity.join(name)

    def open_parent(self) -> Directory:
        return self.entity.open_parent()

    def create(self) -> None:
        """Create the directory and missing ancestors; no-op if anything exists there."""
        if self.exists():
            return
        os.makedirs(self.path, mode=DIRECTORY_MODE, exist_ok=True)
        logger.debug("created directory %s", self.path)

    def open(self, name: str) -> Directory | File:
        """Resolve child ``name`` to a typed handle.

        Existing directories resolve to ``Directory``; anything else, including
        a path that does not exist yet, resolves to ``File``.
        """
        child = Entity(self.join(name))
        if child.exists() and child.is_directory():
            return Directory(child)
        return File(child)

    def open_dir(self, name: str) -> Directory:
        """Reserve or verify child ``name`` as a directory.

        Raises ``TypeMismatchError`` if the child exists and is not a directory.
        """
        child = Entity(self.join(name))
        if child.exists() and not child.is_directory():
            raise TypeMismatchError(child.path, expected="directory", actual="file")
        return Directory(child)

    def open_file(self, name: str) -> File:
        """Reserve or verify child ``name`` as a file.

        Raises ``TypeMismatchError`` if the child exists and is a directory.
        """
        child = Entity(self.join(name))
        if child.exists() and child.is_directory():
            raise TypeMismatchError(child.path, expected="file", actual="directory")
        return File(child)

    def list(self) -> list[str]:
        """Return immediate child names in OS enumeration order."""
        return os.listdir(self.path)

    def list_as_entities(self) -> list[Entity]:
        return [Entity(self.join(name)) for name in self.list()]

    def list_directories(self) -> list[Directory]:
        """Return child directories, re-checking each child's type live.

        The first failing type check aborts the whole call.
        """
        return [Directory(child) for child in self.list_as_entities() if child.is_directory()]

    def list_files(self) -> list[File]:
        """Return non-directory children, re-checking each child's type live.

        The first failing type check aborts the whole call.
        """
        return [File(child) for child in self.list_as_entities() if not child.is_directory()]


def new_directory(path: PathLike) -> Directory:
    return Directory.at(path)


__all__ = [
    "DIRECTORY_MODE",
    "Directory",
    "new_directory",
]
