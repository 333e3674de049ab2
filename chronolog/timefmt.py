"""Thread-safe local-time formatting with sub-second fraction specifiers.

Timestamps are integer nanoseconds since the Unix epoch, as returned by
:func:`time.time_ns`.

Besides the usual :func:`time.strftime` directives, format strings may
contain:

* ``%f3``: milliseconds, 3 digits
* ``%f6``: microseconds, 6 digits
* ``%f9`` or ``%f``: nanoseconds, 9 digits
"""

from __future__ import annotations

import enum
import time

DATE_FORMATTED = "%Y/%m/%d"
TIME_FORMATTED = "%H:%M:%S %f6"
DEFAULT_TIME_FORMAT = f"{DATE_FORMATTED} {TIME_FORMATTED}"

_FRACTIONAL_IDENTIFIER = "%f"
_NS_PER_SECOND = 1_000_000_000


class Fractional(enum.Enum):
    """Precision of a ``%f`` fraction specifier."""

    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"
    NANOSECOND = "nanosecond"
    NANOSECOND_DEFAULT = "nanosecond_default"


_FRACTION_BY_DIGIT = {
    "3": Fractional.MILLISECOND,
    "6": Fractional.MICROSECOND,
    "9": Fractional.NANOSECOND,
}

# (digits shown, divisor applied to the nanosecond remainder)
_FRACTION_LAYOUT = {
    Fractional.MILLISECOND: (3, 1_000_000),
    Fractional.MICROSECOND: (6, 1_000),
    Fractional.NANOSECOND: (9, 1),
    Fractional.NANOSECOND_DEFAULT: (9, 1),
}


def get_fractional(format_buffer: str, pos: int) -> Fractional:
    """Return the precision of the ``%f`` specifier starting at *pos*."""
    marker_pos = pos + len(_FRACTIONAL_IDENTIFIER)
    marker = format_buffer[marker_pos] if len(format_buffer) > marker_pos else ""
    return _FRACTION_BY_DIGIT.get(marker, Fractional.NANOSECOND_DEFAULT)


def fraction_to_string(ts: int, fractional: Fractional) -> str:
    """Return the sub-second part of *ts* as a zero-padded digit string.

    1 ms gives ``"001"``, 1 us ``"000001"`` and 1 ns ``"000000001"``.
    """
    digits, divisor = _FRACTION_LAYOUT[fractional]
    nanoseconds = ts % _NS_PER_SECOND
    return str(nanoseconds // divisor).zfill(digits)


def localtime_formatted_fractions(ts: int, format_buffer: str) -> str:
    """Replace every ``%f``, ``%f3``, ``%f6`` and ``%f9`` in the format with *ts*'s fraction."""
    pos = format_buffer.find(_FRACTIONAL_IDENTIFIER)
    while pos != -1:
        kind = get_fractional(format_buffer, pos)
        value = fraction_to_string(ts, kind)
        width = len(_FRACTIONAL_IDENTIFIER)
        if kind is not Fractional.NANOSECOND_DEFAULT:
            width += 1
        format_buffer = format_buffer[:pos] + value + format_buffer[pos + width:]
        pos = format_buffer.find(_FRACTIONAL_IDENTIFIER, pos + len(_FRACTIONAL_IDENTIFIER))
    return format_buffer


def put_time(tm: time.struct_time, time_format: str) -> str:
    """Format *tm* with strftime; an unusable format is returned unchanged."""
    try:
        formatted = time.strftime(time_format, tm)
    except (ValueError, OverflowError):
        return time_format
    if not formatted:
        return time_format
    return formatted


def localtime(ts: int) -> time.struct_time:
    """Return the local broken-down time for *ts* seconds since the epoch."""
    return time.localtime(ts)


def localtime_formatted(ts: int, time_format: str) -> str:
    """Format nanosecond timestamp *ts* in local time, fractions included."""
    format_buffer = localtime_formatted_fractions(ts, time_format)
    return put_time(localtime(ts // _NS_PER_SECOND), format_buffer)


_HRS_NOW = time.perf_counter_ns()
_SYS_NOW = time.time_ns()


def to_system_time(ts: int) -> int:
    """Convert a :func:`time.perf_counter_ns` reading to nanoseconds since the epoch.

    Both clocks are sampled once at import; relative times keep the precision
    of the performance counter.
    """
    return _SYS_NOW + (ts - _HRS_NOW)