"""Shared pytest fixtures and configuration for the safeinput test suite.

Guidelines
----------
* No real terminal interaction in any test.
* Standard input is replaced by an in-memory stream via ``feed_stdin``.
* Diagnostics are captured with :class:`RecordingSink` unless a test is
  about the stderr rendering itself.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable

import pytest

from safeinput.config import ReaderConfig
from safeinput.core.input_service import InputService
from safeinput.factory import create_input_service
from safeinput.infra.diagnostic_sink import RecordingSink


@pytest.fixture
def feed_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[bytes], io.BytesIO]:
    """Return a function that replaces ``sys.stdin`` with the given bytes.

    The returned :class:`io.BytesIO` lets a test check how far the
    stream has been consumed.
    """

    def _feed(data: bytes) -> io.BytesIO:
        raw = io.BytesIO(data)
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(raw, encoding="utf-8"))
        return raw

    return _feed


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def service(sink: RecordingSink) -> InputService:
    return create_input_service(sink=sink)


@pytest.fixture
def make_service(sink: RecordingSink) -> Callable[..., InputService]:
    """Return a factory for services with a custom :class:`ReaderConfig`."""

    def _make(**config: object) -> InputService:
        return create_input_service(sink=sink, config=ReaderConfig(**config))  # type: ignore[arg-type]

    return _make
