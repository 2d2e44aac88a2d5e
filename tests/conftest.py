"""Shared test fixtures for Streamfan."""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest


@pytest.fixture
def hello() -> bytes:
    """The payload used throughout the routing tests."""
    return b"Hello, world!"


@pytest.fixture
def make_buffers() -> Callable[[int], list[io.BytesIO]]:
    """Factory fixture: build *n* empty in-memory sinks."""

    def _factory(n: int = 3) -> list[io.BytesIO]:
        return [io.BytesIO() for _ in range(n)]

    return _factory


@pytest.fixture
def make_source() -> Callable[[bytes], io.BytesIO]:
    """Factory fixture: wrap bytes in a fresh readable source."""

    def _factory(data: bytes = b"") -> io.BytesIO:
        return io.BytesIO(data)

    return _factory
