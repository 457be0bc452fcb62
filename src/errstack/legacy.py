# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Backward compatibility names for code written against the older API.

Nothing here is re-exported from ``errstack``; import it explicitly.
New code should use :class:`errstack.Frame` and :func:`errstack.new_with`.
"""
import warnings
from typing import Any, List, Tuple

from .frame import Frame


def _deprecated(old: str, new: str) -> None:
    warnings.warn(f"{old} is deprecated, use {new} instead", DeprecationWarning, stacklevel=3)


class ErrorInfo(Frame):
    """Frame with the method names of the older API."""

    def __init__(self, *args: Any, **kwargs: Any):
        _deprecated("ErrorInfo", "Frame")
        super().__init__(*args, **kwargs)

    def detail(self, error: BaseException) -> "ErrorInfo":
        """Use the message of error as this frame's code."""
        self.code = str(error)
        return self

    def nested_object(self) -> BaseException:
        return self.cause

    def error_detail(self) -> str:
        return self.error()

    def append_error_detail(self, buf: List[str]) -> List[str]:
        buf.append(self.error())
        return buf

    def summary_err(self) -> BaseException:
        return self.cause


def _new_info(error: BaseException, cmd: Tuple[Any, ...]) -> ErrorInfo:
    # Bypass ErrorInfo.__init__ so callers see one warning, naming the function they used
    e = ErrorInfo.__new__(ErrorInfo, error)
    Frame.__init__(e, error, call_args=cmd)
    return e


def info(error: BaseException, *cmd: Any) -> ErrorInfo:
    """Wrap error with its command arguments, without location."""
    _deprecated("info", "new_with")
    return _new_info(error, cmd)


def info_ex(calldepth: int, error: BaseException, *cmd: Any) -> ErrorInfo:
    """Same as info; calldepth is accepted and ignored."""
    _deprecated("info_ex", "new_with")
    return _new_info(error, cmd)


def detail(error: BaseException) -> str:
    """Return the full message of error."""
    _deprecated("detail", "str(error)")
    return str(error)
