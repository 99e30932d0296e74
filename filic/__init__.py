"""Typed handles over filesystem paths.

``Entity`` wraps a path of unknown type, ``Directory`` and ``File`` wrap an
``Entity`` and add containment or content operations. Every query goes to the
live filesystem; nothing is cached between calls.
"""

from __future__ import annotations

import logging

from .directory import DIRECTORY_MODE, Directory, new_directory
from .entity import Entity, FileSystemEntity, new_entity
from .errors import EntityNotFoundError, FilicError, NotFoundOrInaccessibleError, TypeMismatchError
from .file import FILE_MODE, File, new_file
from .tree import render_tree, resolve, walk

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "DIRECTORY_MODE",
    "FILE_MODE",
    "Directory",
    "Entity",
    "EntityNotFoundError",
    "File",
    "FileSystemEntity",
    "FilicError",
    "NotFoundOrInaccessibleError",
    "TypeMismatchError",
    "main",
    "new_directory",
    "new_entity",
    "new_file",
    "render_tree",
    "resolve",
    "walk",
]
