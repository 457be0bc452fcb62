# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Utility functions for errstack: value rendering and call-site capture."""
import dataclasses
import inspect
import json
from enum import Enum
from typing import Any, Callable, Iterable, Tuple

from pydantic import BaseModel

# Strings longer than this are shortened before quoting
MAX_STRING_LEN = 32
# Characters kept from each end of a shortened string
STRING_KEEP = 16

UNKNOWN_FILE = "???"

_NUMERIC_TYPES = (bool, int, float, complex)
# Fixed-size sequences; growable containers (list, dict, set, bytearray) render as addresses
_ARRAY_TYPES = (tuple, bytes, memoryview, range)


class Shape(Enum):
    """Rendering categories an argument value can fall into."""

    NIL = "nil"
    NUMBER = "number"
    TEXT = "text"
    ARRAY = "array"
    STRUCT = "struct"
    OTHER = "other"


def _is_record(cls: type) -> bool:
    if dataclasses.is_dataclass(cls):
        return True
    if issubclass(cls, tuple) and hasattr(cls, "_fields"):
        return True
    return issubclass(cls, BaseModel)


def classify(value: Any) -> Shape:
    """Return the rendering shape of a value.

    Only the value's type is inspected; the value itself is never asked to
    describe itself.
    """
    if value is None:
        return Shape.NIL
    cls = type(value)
    if issubclass(cls, _NUMERIC_TYPES):
        return Shape.NUMBER
    if issubclass(cls, str):
        return Shape.TEXT
    if _is_record(cls):
        return Shape.STRUCT
    if issubclass(cls, _ARRAY_TYPES):
        return Shape.ARRAY
    return Shape.OTHER


def quote(text: str) -> str:
    """Return text as a double-quoted literal with standard escaping."""
    return json.dumps(str.__str__(text), ensure_ascii=False)


def shorten(text: str) -> str:
    """Shorten long text to its head and tail joined by an ellipsis."""
    if len(text) > MAX_STRING_LEN:
        return text[:STRING_KEEP] + "..." + text[-STRING_KEEP:]
    return text


def render_value(value: Any) -> str:
    """Render an argument value as a short, safe token for a stack trace.

    - None renders as ``nil``
    - numbers and booleans use the builtin type's repr
    - strings are shortened and quoted
    - records (dataclasses, named tuples, models) render as ``Struct``
    - fixed-size sequences (tuple, bytes, range) render as ``Array``
    - anything else, including lists and dicts, renders as its identity address in hex
    """
    shape = classify(value)
    if shape is Shape.NIL:
        return "nil"
    if shape is Shape.NUMBER:
        base = next(t for t in _NUMERIC_TYPES if isinstance(value, t))
        return base.__repr__(value)
    if shape is Shape.TEXT:
        return quote(shorten(str.__str__(value)))
    if shape is Shape.ARRAY:
        return "Array"
    if shape is Shape.STRUCT:
        return "Struct"
    return hex(id(value))


def render_args(args: Iterable[Any]) -> str:
    """Render a sequence of argument values joined by commas."""
    return ", ".join(render_value(arg) for arg in args)


def call_detail(fn: Callable, *args: Any) -> str:
    """Describe a function call shortly, e.g. ``pkg.mod.load(42, "a")``.

    Callables without a qualified name (partials, most callable objects)
    produce an empty string.
    """
    qualname = getattr(fn, "__qualname__", None)
    if not isinstance(qualname, str):
        return ""
    module = getattr(fn, "__module__", None)
    name = f"{module}.{qualname}" if isinstance(module, str) else qualname
    return f"{name}({render_args(args)})"


def caller_location(depth: int = 0) -> Tuple[str, int]:
    """Return (file, line) of a frame on the current call stack.

    Args:
        depth: 0 is the function calling caller_location, 1 its caller, and so on

    Returns:
        Tuple of (file, line), or ("???", 0) when the stack is not that deep
    """
    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame is not None else None
        for _ in range(depth):
            if target is None:
                break
            target = target.f_back
        if target is None:
            return UNKNOWN_FILE, 0
        return target.f_code.co_filename, target.f_lineno
    finally:
        del frame
