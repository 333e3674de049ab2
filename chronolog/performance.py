"""Helpers for measuring and reporting log-call latency.

Measurements are latencies in whole microseconds. They can be summarised
as a mean or grouped into millisecond buckets for a peak-latency report.
"""

from __future__ import annotations

import enum
import sys
from collections import Counter
from typing import Dict, Iterable, Sequence, Tuple

US_PER_MS = 1000

_MICROSECOND_SECTION = (
    "\n\n***** Microsecond bucket measurement for all measurements that went "
    "inside the '0 millisecond bucket' ****\n"
)
_MILLISECOND_SECTION = "\n\n***** Millisecond bucket measurement ****\n"
_SINGLE_BUCKET_FORMAT = (
    "Format:  bucket of us inside bucket0 for ms\n"
    "Format:bucket_of_ms, number_of_values_in_bucket\n\n\n\n"
)
_MULTI_BUCKET_FORMAT = "Format:bucket_of_ms, number_of_values_in_bucket\n\n\n"


class WriteMode(enum.Enum):
    """How :func:`write_text_to_file` opens its file."""

    APPEND = 0
    TRUNCATE = 1


def write_text_to_file(
    filename: str,
    msg: str,
    write_mode: WriteMode,
    push_out: bool = True,
) -> None:
    """Write *msg* to *filename*, appending or truncating per *write_mode*.

    With *push_out* the message is echoed to standard output first.
    Raises :class:`OSError` when the file cannot be opened.
    """
    if push_out:
        sys.stdout.write(msg)
        sys.stdout.flush()

    mode = "w" if write_mode is WriteMode.TRUNCATE else "a"
    with open(filename, mode, encoding="utf-8") as out:
        out.write(msg)


def mean(values: Sequence[int]) -> int:
    """Return the integer mean of *values*, rounded down.

    Raises :class:`ValueError` for an empty sequence.
    """
    if not values:
        raise ValueError("mean of an empty sequence")
    return sum(values) // len(values)


def bucket_measurements(
    measurements: Iterable[int],
) -> Tuple[Dict[int, int], Dict[int, int]]:
    """Group microsecond measurements into buckets.

    Returns ``(ms_buckets, us_buckets)``: the count of values per whole
    millisecond, and for values below one millisecond the count per exact
    microsecond value. Both mappings are ordered by key.
    """
    ms_counts: Counter[int] = Counter()
    us_counts: Counter[int] = Counter()
    for value in measurements:
        ms = value // US_PER_MS
        ms_counts[ms] += 1
        if ms == 0:
            us_counts[value] += 1
    return dict(sorted(ms_counts.items())), dict(sorted(us_counts.items()))


def format_bucket_report(measurements: Iterable[int], dump_path: str) -> str:
    """Return the bucket report text for *measurements*.

    When every value falls into a single millisecond bucket, the report also
    lists the sub-millisecond values per microsecond.
    """
    ms_buckets, us_buckets = bucket_measurements(measurements)
    single_bucket = len(ms_buckets) == 1

    parts = [
        "Number of values rounded to milliseconds and put to [millisecond bucket] "
        f"were dumped to file: {dump_path}\n",
        _SINGLE_BUCKET_FORMAT if single_bucket else _MULTI_BUCKET_FORMAT,
    ]
    if single_bucket:
        parts.append(_MICROSECOND_SECTION)
        parts.extend(f"{us}\t{count}\n" for us, count in us_buckets.items())
        parts.append(_MILLISECOND_SECTION)
    parts.extend(f"{ms}\t, {count}\n" for ms, count in ms_buckets.items())
    return "".join(parts)