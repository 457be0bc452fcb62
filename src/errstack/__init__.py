# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""errstack: error frames, stack traces and aggregate errors."""
import logging

from .__about__ import __version__
from .errlist import ErrorList
from .errors import NotFound, Summarizer, Unwrapper, err, is_not_found, new, summary
from .frame import STACK_BANNER, Frame, new_frame, new_with
from .report import ErrorReport, FrameRecord, report
from .trace import traced
from .util import call_detail, render_value

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "STACK_BANNER",
    "ErrorList",
    "ErrorReport",
    "Frame",
    "FrameRecord",
    "NotFound",
    "Summarizer",
    "Unwrapper",
    "__version__",
    "call_detail",
    "err",
    "is_not_found",
    "new",
    "new_frame",
    "new_with",
    "render_value",
    "report",
    "summary",
    "traced",
]
