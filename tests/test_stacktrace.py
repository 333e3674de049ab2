import sys

import pytest

from chronolog.stacktrace import (
    MAX_FRAME_DUMP_SIZE,
    exception_id_to_text,
    is_known_exception,
    stackdump,
)


def test_known_exception_text():
    assert exception_id_to_text(0xC0000005) == "EXCEPTION_ACCESS_VIOLATION"
    assert exception_id_to_text(0xC00000FD) == "EXCEPTION_STACK_OVERFLOW"


def test_unknown_exception_text():
    assert exception_id_to_text(42) == "UNKNOWN EXCEPTION:42"


@pytest.mark.parametrize("code, known", [(0x80000003, True), (0x80000004, True), (0, False), (42, False)])
def test_is_known_exception(code, known):
    assert is_known_exception(code) is known


def test_known_codes_never_produce_unknown_text():
    for code in (0xC0000094, 0xC0000095, 0xC000001D):
        assert is_known_exception(code)
        assert not exception_id_to_text(code).startswith("UNKNOWN")


def test_stackdump_starts_with_caller():
    dump = stackdump()
    first = dump.splitlines()[0]
    assert first.startswith("stack dump [0]\t")
    assert "test_stackdump_starts_with_caller" in first
    assert " L: " in first


def test_stackdump_indexes_are_sequential():
    lines = stackdump().splitlines()
    for index, line in enumerate(lines):
        assert line.startswith(f"stack dump [{index}]")


def test_stackdump_from_given_frame():
    def inner():
        return sys._getframe()

    frame = inner()
    dump = stackdump(frame)
    assert "inner" in dump.splitlines()[0]


def test_stackdump_is_limited_to_max_frames():
    def recurse(n):
        if n == 0:
            return stackdump()
        return recurse(n - 1)

    lines = recurse(MAX_FRAME_DUMP_SIZE + 20).splitlines()
    assert len(lines) == MAX_FRAME_DUMP_SIZE
    assert all("recurse" in line for line in lines)


def test_repeated_dumps_keep_working():
    for _ in range(5):
        assert stackdump().startswith("stack dump [0]")