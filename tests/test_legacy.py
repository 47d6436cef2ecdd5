"""Tests for the sentinel-returning compatibility getters (legacy.py).

A fresh default service with a :class:`RecordingSink` is installed for
every test so no diagnostics reach the real stderr.
"""

from __future__ import annotations

import io
import math
from collections.abc import Callable, Iterator

import pytest

from safeinput import legacy
from safeinput.core.input_service import InputService
from safeinput.core.models import CountedString, TerminatedString
from safeinput.exceptions import AllowSetError
from safeinput.factory import create_input_service
from safeinput.infra.diagnostic_sink import RecordingSink, StderrSink

Feed = Callable[[bytes], io.BytesIO]


@pytest.fixture(autouse=True)
def default_service(sink: RecordingSink) -> Iterator[InputService]:
    service = create_input_service(sink=sink)
    legacy.reset_default_service(service)
    yield service
    legacy.reset_default_service()


# ---------------------------------------------------------------------------
# Sentinels on end of input
# ---------------------------------------------------------------------------

class TestSentinels:
    @pytest.mark.parametrize(
        ("getter", "expected"),
        [
            (legacy.get_int, -(2**31)),
            (legacy.get_uint, 2**32 - 1),
            (legacy.get_long, -(2**63)),
            (legacy.get_ulong, 2**64 - 1),
            (legacy.get_long_long, -(2**63)),
            (legacy.get_ulong_long, 2**64 - 1),
            (legacy.get_char, legacy.EOF),
            (legacy.get_cstring, None),
            (legacy.get_string, None),
            (legacy.get_bool, False),
        ],
    )
    def test_end_of_input(
        self, feed_stdin: Feed, getter: Callable[[], object], expected: object,
    ) -> None:
        feed_stdin(b"")
        assert getter() == expected

    @pytest.mark.parametrize("getter", [legacy.get_float, legacy.get_double])
    def test_float_end_of_input_is_nan(
        self, feed_stdin: Feed, getter: Callable[[], float],
    ) -> None:
        feed_stdin(b"")
        assert math.isnan(getter())

    def test_filtered_char_end_of_input(self, feed_stdin: Feed) -> None:
        feed_stdin(b"")
        assert legacy.get_char_filtered("yn") == legacy.EOF

    def test_eof_marker_is_not_a_byte(self) -> None:
        assert legacy.EOF not in range(256)

    def test_bool_end_of_input_reports(self, feed_stdin: Feed, sink: RecordingSink) -> None:
        feed_stdin(b"")
        assert legacy.get_bool() is False
        assert sink.messages == ["EOF detected. Returning false by default."]


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

class TestValues:
    def test_int(self, feed_stdin: Feed) -> None:
        feed_stdin(b"42\n")
        assert legacy.get_int() == 42

    def test_char_is_byte_value(self, feed_stdin: Feed) -> None:
        feed_stdin(b"a\n")
        assert legacy.get_char() == 97

    def test_empty_line_char_is_newline(self, feed_stdin: Feed) -> None:
        feed_stdin(b"\n")
        assert legacy.get_char() == ord("\n")

    def test_filtered_char(self, feed_stdin: Feed) -> None:
        feed_stdin(b"d\nb\n")
        assert legacy.get_char_filtered("abc") == ord("b")

    def test_strings(self, feed_stdin: Feed) -> None:
        feed_stdin(b"one\ntwo\n")
        assert legacy.get_cstring() == TerminatedString(b"one\x00")
        assert legacy.get_string() == CountedString(b"two")

    def test_double(self, feed_stdin: Feed) -> None:
        feed_stdin(b"2.5\n")
        assert legacy.get_double() == 2.5

    def test_bool(self, feed_stdin: Feed) -> None:
        feed_stdin(b"Y\n")
        assert legacy.get_bool() is True

    @pytest.mark.parametrize("allowed", [None, ""])
    def test_bad_allow_set_raises(self, allowed: str | None) -> None:
        with pytest.raises(AllowSetError):
            legacy.get_char_filtered(allowed)


class TestDefaultService:
    def test_created_lazily_with_stderr_sink(self) -> None:
        legacy.reset_default_service()
        service = legacy._service()
        assert isinstance(service, InputService)
        assert isinstance(service._sink, StderrSink)
        assert legacy._service() is service
