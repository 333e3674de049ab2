"""Stack dumps and names for Windows structured-exception codes."""

from __future__ import annotations

import sys
import threading
from types import FrameType
from typing import Optional

UNKNOWN = "UNKNOWN EXCEPTION"
MAX_FRAME_DUMP_SIZE = 64

_EXCEPTIONS_AS_TEXT = {
    0xC0000005: "EXCEPTION_ACCESS_VIOLATION",
    0xC000008C: "EXCEPTION_ARRAY_BOUNDS_EXCEEDED",
    0x80000002: "EXCEPTION_DATATYPE_MISALIGNMENT",
    0xC000008D: "EXCEPTION_FLT_DENORMAL_OPERAND",
    0xC000008E: "EXCEPTION_FLT_DIVIDE_BY_ZERO",
    0xC000008F: "EXCEPTION_FLT_INEXACT_RESULT",
    0xC0000090: "EXCEPTION_FLT_INVALID_OPERATION",
    0xC0000091: "EXCEPTION_FLT_OVERFLOW",
    0xC0000092: "EXCEPTION_FLT_STACK_CHECK",
    0xC0000093: "EXCEPTION_FLT_UNDERFLOW",
    0xC000001D: "EXCEPTION_ILLEGAL_INSTRUCTION",
    0xC0000006: "EXCEPTION_IN_PAGE_ERROR",
    0xC0000094: "EXCEPTION_INT_DIVIDE_BY_ZERO",
    0xC0000095: "EXCEPTION_INT_OVERFLOW",
    0xC0000026: "EXCEPTION_INVALID_DISPOSITION",
    0xC0000025: "EXCEPTION_NONCONTINUABLE_EXCEPTION",
    0xC0000096: "EXCEPTION_PRIV_INSTRUCTION",
    0xC00000FD: "EXCEPTION_STACK_OVERFLOW",
    0x80000003: "EXCEPTION_BREAKPOINT",
    0x80000004: "EXCEPTION_SINGLE_STEP",
}

RECURSIVE_CRASH_TEXT = (
    "\n\n\n***** Recursive crash detected, cannot continue stackdump traversal. *****\n\n\n"
)

_dump_lock = threading.Lock()
_thread_state = threading.local()


def exception_id_to_text(exception_id: int) -> str:
    """Return the name of an exception code, or ``UNKNOWN EXCEPTION:<id>``."""
    text = _EXCEPTIONS_AS_TEXT.get(exception_id)
    if text is None:
        return f"{UNKNOWN}:{exception_id}"
    return text


def is_known_exception(exception_id: int) -> bool:
    """Return whether *exception_id* is one of the known fatal exception codes."""
    return exception_id in _EXCEPTIONS_AS_TEXT


def _frame_text(index: int, frame: FrameType) -> str:
    code = frame.f_code
    return (
        f"stack dump [{index}]\t"
        f"\t{code.co_filename} L: {frame.f_lineno}"
        f" {code.co_name}"
    )


def stackdump(frame: Optional[FrameType] = None) -> str:
    """Return a text dump of at most 64 frames, innermost first.

    Without *frame* the dump starts at the caller. A dump requested while two
    dumps are already under way in the same thread is refused.
    """
    depth = getattr(_thread_state, "depth", 0)
    if depth >= 2:
        return RECURSIVE_CRASH_TEXT
    if frame is None:
        frame = sys._getframe(1)

    _thread_state.depth = depth + 1
    try:
        with _dump_lock:
            lines = []
            current: Optional[FrameType] = frame
            while current is not None and len(lines) < MAX_FRAME_DUMP_SIZE:
                lines.append(_frame_text(len(lines), current) + "\n")
                current = current.f_back
            return "".join(lines)
    finally:
        _thread_state.depth = depth