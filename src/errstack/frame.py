# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Error frames: call-site context wrapped around a cause error."""
from typing import Any, List, Optional, Sequence

from .errors import quote, summary
from .util import caller_location, render_args

STACK_BANNER = "\n\n===> errors stack:\n"


class Frame(Exception):
    """A single wrap of call-site context around a cause error.

    Frames chain: the cause of a Frame may itself be a Frame. ``str(frame)``
    renders the full trace, innermost cause first and the outermost frame
    last; ``frame.summary()`` renders only the innermost message.
    """

    def __init__(
        self,
        cause: BaseException,
        func: str = "",
        call_args: Sequence[Any] = (),
        code: str = "",
        file: str = "",
        line: int = 0,
    ):
        """Initialize a frame.

        Args:
            cause: The error being wrapped (required)
            func: Name of the function the error surfaced in
            call_args: Arguments that function was called with
            code: Free-form diagnostic label (an expression, a status string, ...)
            file: Source file of the wrap site
            line: Source line of the wrap site
        """
        if not isinstance(cause, BaseException):
            raise TypeError(f"Frame cause must be an exception, got {type(cause).__name__}")
        super().__init__(cause)
        self.cause = cause
        self.func = func
        self.call_args = tuple(call_args)
        self.code = code
        self.file = file
        self.line = line
        self.__cause__ = cause

    def error(self) -> str:
        """Return the full detail text: cause message, banner, stack entries."""
        return "".join(_error_detail(self))

    def summary(self) -> str:
        """Return the summary of the cause, without any stack entries."""
        cause = self.cause
        # Plain frames add nothing; skip them without recursing
        while isinstance(cause, Frame) and type(cause).summary is Frame.summary:
            cause = cause.cause
        return summary(cause)

    def unwrap(self) -> Optional[BaseException]:
        """Return the immediate cause."""
        return self.cause

    def entry(self) -> str:
        """Return this frame's own stack entry."""
        return f"{self.func}({render_args(self.call_args)})\n\t{self.file}:{self.line} {self.code}\n"

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return f"Frame(func={self.func!r}, code={self.code!r}, file={self.file!r}, line={self.line})"

    def __format__(self, format_spec: str) -> str:
        return format_error(self, format_spec)


def _error_detail(frame: Frame) -> List[str]:
    # Walk down to the innermost frame, then emit entries back up in wrap order
    chain = [frame]
    while isinstance(chain[-1].cause, Frame):
        chain.append(chain[-1].cause)
    parts = [str(chain[-1].cause), STACK_BANNER]
    parts.extend(f.entry() for f in reversed(chain))
    return parts


def format_error(error: BaseException, format_spec: str) -> str:
    """Format an error for ``format()`` and f-strings.

    ``v`` (or an empty spec) gives the detail text, ``s`` the summary and
    ``q`` the detail text as a quoted literal. Other specs apply to the
    detail text as to any string.
    """
    if format_spec in ("", "v"):
        return str(error)
    if format_spec == "s":
        return summary(error)
    if format_spec == "q":
        return quote(str(error))
    return format(str(error), format_spec)


def new_with(cause: BaseException, code: str, n: int, func: str, *args: Any, depth: int = 0) -> Frame:
    """Create a frame located at the caller of new_with.

    Args:
        cause: The error being wrapped
        code: Diagnostic label
        n: Offset added to the captured line number
        func: Name of the failing function
        *args: Arguments the failing function was called with
        depth: Extra stack frames to skip above the caller

    Returns:
        The new Frame
    """
    file, line = caller_location(1 + depth)
    return Frame(cause, func=func, call_args=args, code=code, file=file, line=line + n)


def new_frame(cause: BaseException, code: str, file: str, line: int, func: str, *args: Any) -> Frame:
    """Create a frame at an explicitly given location."""
    return Frame(cause, func=func, call_args=args, code=code, file=file, line=line)
