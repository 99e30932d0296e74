"""Regular-file handles with whole-content read, write, and append."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .entity import Entity, PathLike

if TYPE_CHECKING:
    from .directory import Directory

logger = logging.getLogger(__name__)

FILE_MODE = 0o644


@dataclass(frozen=True)
class File:
    """Handle for a path that is, or will become, a regular file.

    The type is only checked when something touches the filesystem; a handle
    for a missing path is a valid reservation for later creation.
    """

    entity: Entity

    @classmethod
    def at(cls, path: PathLike) -> "File":
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
        """Create an empty file plus missing ancestors; no-op if anything exists there.

        The existence check and the write are separate steps, so a concurrent
        creator can slip in between; the write then truncates its content.
        """
        if self.exists():
            return
        self.open_parent().create()
        self.write(b"")
        logger.debug("created file %s", self.path)

    def write(self, data: bytes) -> None:
        """Replace the whole content with ``data``, creating the file if absent.

        Missing ancestors are not created; that raises ``FileNotFoundError``.
        """
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        logger.debug("wrote %d bytes to %s", len(data), self.path)

    def write_string(self, text: str, encoding: str = "utf-8") -> None:
        self.write(text.encode(encoding))

    def read(self) -> bytes:
        with open(self.path, "rb") as handle:
            return handle.read()

    def read_string(self, encoding: str = "utf-8") -> str:
        return self.read().decode(encoding)

    def append(self, data: bytes) -> None:
        """Append ``data`` to an existing file; never creates it.

        Raises ``FileNotFoundError`` when the file does not exist.
        """
        fd = os.open(self.path, os.O_WRONLY | os.O_APPEND)
        with os.fdopen(fd, "ab") as handle:
            handle.write(data)
        logger.debug("appended %d bytes to %s", len(data), self.path)


def new_file(path: PathLike) -> File:
    return File.at(path)


__all__ = [
    "FILE_MODE",
    "File",
    "new_file",
]
