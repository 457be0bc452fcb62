# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Decorator that wraps a function's failures in error frames."""
import logging
from functools import wraps
from types import TracebackType
from typing import Any, Callable, Optional, Tuple

from .frame import Frame
from .util import UNKNOWN_FILE

logger = logging.getLogger(__name__)


def _failure_location(func: Callable, tb: Optional[TracebackType]) -> Tuple[str, int]:
    """Find where the failure surfaced inside func.

    Falls back to the line of the ``def`` when func's own frame is not on the
    traceback (e.g. the error came from argument binding).
    """
    code = getattr(func, "__code__", None)
    if code is None:
        return UNKNOWN_FILE, 0
    line = code.co_firstlineno
    while tb is not None:
        if tb.tb_frame.f_code is code:
            line = tb.tb_lineno
            break
        tb = tb.tb_next
    return code.co_filename, line


def traced(code: str = "", name: Optional[str] = None) -> Callable:
    """Decorator factory that wraps exceptions raised by a function in a Frame.

    Each traced layer an error passes through adds one stack entry, so nested
    traced calls produce a full errors stack. Exceptions that are not
    ``Exception`` subclasses (KeyboardInterrupt, SystemExit) pass through
    untouched.

    Args:
        code: Diagnostic label recorded on every frame this decorator creates
        name: Optional function name for the frame (defaults to __qualname__)

    Returns:
        Decorator function
    """

    def decorator(func: Callable) -> Callable:
        func_name = name or getattr(func, "__qualname__", type(func).__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                file, line = _failure_location(func, e.__traceback__)
                frame = Frame(
                    e,
                    func=func_name,
                    call_args=args + tuple(kwargs.values()),
                    code=code,
                    file=file,
                    line=line,
                )
                logger.debug("Wrapping %s raised in %s at %s:%d", type(e).__name__, func_name, file, line)
                raise frame from e

        return wrapper

    return decorator
