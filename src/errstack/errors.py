# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Base error helpers and the generic NotFound error."""
from typing import Optional, Protocol

from .util import quote

__all__ = [
    "NotFound",
    "Summarizer",
    "Unwrapper",
    "err",
    "is_not_found",
    "new",
    "quote",
    "summary",
]


class Unwrapper(Protocol):
    """An error that exposes its immediate cause."""

    def unwrap(self) -> Optional[BaseException]:
        ...


class Summarizer(Protocol):
    """An error that offers a condensed rendering besides its full message."""

    def summary(self) -> str:
        ...


def new(message: str) -> Exception:
    """Return an error that formats as the given text.

    Each call returns a distinct error even if the text is identical.
    """
    return Exception(message)


def err(error: BaseException) -> BaseException:
    """Return the cause error, stripping every wrapping Frame.

    Only Frames are stripped; other errors that expose ``unwrap()`` are
    returned as they are.
    """
    from .frame import Frame

    while isinstance(error, Frame):
        error = error.cause
    return error


def summary(error: BaseException) -> str:
    """Return the summary of an error, or its message if it has none."""
    method = getattr(error, "summary", None)
    if callable(method):
        return method()
    return str(error)


class NotFound(Exception):
    """A resource of some category does not exist."""

    def __init__(self, category: str):
        """Initialize NotFound.

        Args:
            category: What kind of resource is missing (e.g. "user", "bucket")
        """
        super().__init__(category)
        self.category = category

    def __str__(self) -> str:
        return self.category + " not found"

    def __repr__(self) -> str:
        return f"NotFound(category={self.category!r})"


def is_not_found(error: Optional[BaseException]) -> bool:
    """Unwrap error and check whether the innermost value is a NotFound."""
    while callable(getattr(error, "unwrap", None)):
        error = error.unwrap()
    return isinstance(error, NotFound)
