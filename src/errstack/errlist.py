# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Aggregate error collecting several independent failures."""
from typing import Iterable, Iterator, List, Optional

from .errors import summary
from .frame import format_error


class ErrorList(Exception):
    """An ordered list of errors that reports as a single error.

    Appending is not synchronized: callers that add from several threads
    must serialize the calls themselves.
    """

    def __init__(self, errors: Optional[Iterable[BaseException]] = None):
        """Initialize the list.

        Args:
            errors: Optional initial errors, in reporting order
        """
        super().__init__()
        self.errors: List[BaseException] = []
        for error in errors or ():
            self.add(error)

    def add(self, error: BaseException) -> None:
        """Append an error."""
        if not isinstance(error, BaseException):
            raise TypeError(f"ErrorList can only hold exceptions, got {type(error).__name__}")
        self.errors.append(error)

    def error(self) -> str:
        """Return the messages of all errors, one per line."""
        if len(self.errors) == 1:
            return str(self.errors[0])
        return "\n".join(str(e) for e in self.errors)

    def summary(self) -> str:
        """Return the summaries of all errors, one per line."""
        if len(self.errors) == 1:
            return summary(self.errors[0])
        return "\n".join(summary(e) for e in self.errors)

    def to_error(self) -> Optional[BaseException]:
        """Collapse the list into a single reportable error.

        Returns:
            None when empty, the only error when there is one, the list itself otherwise
        """
        if not self.errors:
            return None
        if len(self.errors) == 1:
            return self.errors[0]
        return self

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.errors)

    def __getitem__(self, index: int) -> BaseException:
        return self.errors[index]

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return f"ErrorList({self.errors!r})"

    def __format__(self, format_spec: str) -> str:
        return format_error(self, format_spec)
