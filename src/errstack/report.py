# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Structured error reports for embedding errors in structured logs."""
import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .errlist import ErrorList
from .errors import is_not_found, summary
from .frame import Frame
from .util import render_value


class FrameRecord(BaseModel):
    """One entry of an errors stack."""

    func: str = Field(..., description="Function the error surfaced in")
    args: List[str] = Field(default_factory=list, description="Rendered call arguments")
    file: str = Field(..., description="Source file of the wrap site")
    line: int = Field(..., description="Source line of the wrap site")
    code: str = Field("", description="Diagnostic label attached at the wrap site")

    @classmethod
    def from_frame(cls, frame: Frame) -> "FrameRecord":
        """Build a record from a single frame, ignoring its cause."""
        return cls(
            func=frame.func,
            args=[render_value(arg) for arg in frame.call_args],
            file=frame.file,
            line=frame.line,
            code=frame.code,
        )


class ErrorReport(BaseModel):
    """Structured description of an error chain."""

    type: str = Field(..., description="Class name of the innermost cause")
    message: str = Field(..., description="Summary text, without stack entries")
    detail: str = Field(..., description="Full detail text with the errors stack")
    code: Optional[str] = Field(None, description="Diagnostic label of the outermost frame")
    not_found: bool = Field(False, description="Whether the chain ends in a NotFound error")
    stack: List[FrameRecord] = Field(default_factory=list, description="Frames, innermost first")
    errors: List["ErrorReport"] = Field(default_factory=list, description="Members of an aggregate cause")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "type": "NotFound",
                "message": "bucket not found",
                "detail": "bucket not found\n\n===> errors stack:\nopen_bucket(\"logs\")\n\tstore.py:42 stat\n",
                "code": "stat",
                "not_found": True,
                "stack": [{"func": "open_bucket", "args": ["\"logs\""], "file": "store.py", "line": 42, "code": "stat"}],
            }
        }
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary."""
        return self.model_dump(exclude_none=True)

    def to_json(self) -> str:
        """Convert report to a single JSON line."""
        return json.dumps(self.model_dump(mode="json", exclude_none=True), ensure_ascii=False)


ErrorReport.model_rebuild()


def report(error: BaseException) -> ErrorReport:
    """Create a structured report from an error.

    Args:
        error: Any exception, possibly wrapped in frames or aggregated in an ErrorList

    Returns:
        ErrorReport describing the chain
    """
    frames: List[Frame] = []
    cause = error
    while isinstance(cause, Frame):
        frames.append(cause)
        cause = cause.cause

    members: List[ErrorReport] = []
    if isinstance(cause, ErrorList):
        members = [report(member) for member in cause]

    return ErrorReport(
        type=type(cause).__name__,
        message=summary(error),
        detail=str(error),
        code=frames[0].code if frames else None,
        not_found=is_not_found(error),
        stack=[FrameRecord.from_frame(frame) for frame in reversed(frames)],
        errors=members,
    )
