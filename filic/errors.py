"""Exception taxonomy for entity type queries and type resolution.

Content and listing primitives propagate builtin ``OSError`` subclasses
unchanged; only type queries and type checks raise the classes below.
"""

from __future__ import annotations


class FilicError(Exception):
    """Base class for errors raised by filic itself."""


class NotFoundOrInaccessibleError(FilicError, OSError):
    """A stat query on an entity path failed.

    Covers both absence and other access failures (permission denied, a
    non-directory path component, ...). The underlying ``OSError`` is chained
    as ``__cause__`` and its ``errno``/``strerror``/``filename`` are copied.
    """

    @classmethod
    def from_os_error(cls, path: str, exc: OSError) -> "NotFoundOrInaccessibleError":
        error_cls = EntityNotFoundError if isinstance(exc, FileNotFoundError) else cls
        return error_cls(exc.errno, exc.strerror or str(exc), path)

    def __str__(self) -> str:
        return f"cannot stat {self.filename}: {self.strerror}"


class EntityNotFoundError(NotFoundOrInaccessibleError):
    """Nothing exists at the queried path."""


class TypeMismatchError(FilicError, OSError):
    """An existing path has the wrong type for the requested handle."""

    def __init__(self, path: str, expected: str, actual: str) -> None:
        if expected == "directory":
            message = f"path {path} exists but is not a directory"
        else:
            message = f"path {path} exists but is a directory"
        super().__init__(message)
        self.path = path
        self.expected = expected
        self.actual = actual
        self.filename = path

    def __str__(self) -> str:
        return str(self.args[0])


__all__ = [
    "FilicError",
    "NotFoundOrInaccessibleError",
    "EntityNotFoundError",
    "TypeMismatchError",
]
