"""Unit tests for MultiWriter and copy_many.

Covers fan-out to every sink, the zero-sink no-op, fail-fast ordering
for write and flush, and copying a whole source through the writer.
"""

from __future__ import annotations

import errno
import io

import pytest

from streamfan.routing.multi_writer import MultiWriter, copy_many
from streamfan.routing.sinks import Sink


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _RecordingSink:
    """Collects written bytes and counts flushes."""

    def __init__(self, limit: int | None = None) -> None:
        self._limit = limit
        self.data = bytearray()
        self.flushes = 0

    def write(self, data: bytes) -> int:
        taken = bytes(data if self._limit is None else data[: self._limit])
        self.data += taken
        return len(taken)

    def flush(self) -> None:
        self.flushes += 1


class _BrokenSink:
    """A sink whose write and flush always fail."""

    def __init__(self) -> None:
        self.flushes = 0

    def write(self, data: bytes) -> int:
        raise OSError(errno.ENOSPC, "No space left on device")

    def flush(self) -> None:
        self.flushes += 1
        raise OSError(errno.EPIPE, "Broken pipe")


# ---------------------------------------------------------------------------
# Test: write
# ---------------------------------------------------------------------------


class TestMultiWriterWrite:
    """Every write must reach every sink in full."""

    def test_fans_out_to_all_sinks(self, make_buffers, hello):
        buffers = make_buffers(3)
        writer = MultiWriter(buffers)

        assert writer.write(hello) == len(hello)
        for buffer in buffers:
            assert buffer.getvalue() == hello

    def test_successive_writes_accumulate_in_order(self, make_buffers):
        buffers = make_buffers(2)
        writer = MultiWriter(buffers)

        writer.write(b"one,")
        writer.write(b"two")

        assert [b.getvalue() for b in buffers] == [b"one,two", b"one,two"]

    def test_zero_sinks_is_a_no_op(self, hello):
        writer = MultiWriter()
        assert writer.write(hello) == len(hello)
        assert len(writer) == 0

    def test_reports_full_length_despite_partial_sink_writes(self, hello):
        slow = _RecordingSink(limit=2)
        writer = MultiWriter([slow, io.BytesIO()])

        assert writer.write(hello) == len(hello)
        assert bytes(slow.data) == hello

    def test_first_failure_stops_fan_out(self, hello):
        before = io.BytesIO()
        after = io.BytesIO()
        writer = MultiWriter([before, _BrokenSink(), after])

        with pytest.raises(OSError) as excinfo:
            writer.write(hello)

        assert excinfo.value.errno == errno.ENOSPC
        assert before.getvalue() == hello
        assert after.getvalue() == b""

    def test_of_builds_from_positional_sinks(self, hello):
        a, b = io.BytesIO(), io.BytesIO()
        writer = MultiWriter.of(a, b)

        writer.write(hello)
        assert writer.sinks == [a, b]
        assert b.getvalue() == hello

    def test_sinks_property_returns_copy(self, make_buffers):
        writer = MultiWriter(make_buffers(2))
        writer.sinks.clear()
        assert len(writer) == 2

    def test_nested_writers(self, hello):
        inner_a, inner_b, outer = io.BytesIO(), io.BytesIO(), io.BytesIO()
        writer = MultiWriter([MultiWriter([inner_a, inner_b]), outer])

        writer.write(hello)
        assert inner_a.getvalue() == inner_b.getvalue() == outer.getvalue() == hello

    def test_duck_typed_sinks_receive_bytes(self, hello):
        class _DecodingSink:
            def __init__(self) -> None:
                self.lines: list[str] = []

            def write(self, data: bytes) -> int:
                self.lines.append(data.decode("utf-8"))
                return len(data)

            def flush(self) -> None:
                pass

        first, second = _DecodingSink(), _DecodingSink()
        writer = MultiWriter([first, MultiWriter([second])])

        writer.write(hello)
        assert first.lines == second.lines == ["Hello, world!"]

    def test_protocol_compliance(self):
        assert isinstance(MultiWriter(), Sink)


# ---------------------------------------------------------------------------
# Test: flush
# ---------------------------------------------------------------------------


class TestMultiWriterFlush:
    """flush must visit sinks in order and stop at the first failure."""

    def test_flushes_every_sink(self):
        sinks = [_RecordingSink() for _ in range(3)]
        MultiWriter(sinks).flush()
        assert [s.flushes for s in sinks] == [1, 1, 1]

    def test_flush_stops_at_first_failure(self):
        first = _RecordingSink()
        broken = _BrokenSink()
        last = _RecordingSink()

        with pytest.raises(OSError) as excinfo:
            MultiWriter([first, broken, last]).flush()

        assert excinfo.value.errno == errno.EPIPE
        assert first.flushes == 1
        assert broken.flushes == 1
        assert last.flushes == 0

    def test_flush_with_no_sinks(self):
        MultiWriter().flush()


# ---------------------------------------------------------------------------
# Test: copy / copy_many
# ---------------------------------------------------------------------------


class TestMultiWriterCopy:
    """Copying a source must replicate it to every sink."""

    def test_copy_replicates_source(self, make_buffers, make_source):
        payload = b"abcdefghij" * 1000
        buffers = make_buffers(3)

        copied = MultiWriter(buffers).copy(make_source(payload), chunk_size=64)

        assert copied == len(payload)
        for buffer in buffers:
            assert buffer.getvalue() == payload

    def test_copy_empty_source(self, make_buffers, make_source):
        buffers = make_buffers(2)
        assert MultiWriter(buffers).copy(make_source(b"")) == 0
        assert all(b.getvalue() == b"" for b in buffers)

    def test_copy_many(self, make_buffers, make_source, hello):
        buffers = make_buffers(3)

        copied = copy_many(make_source(hello), buffers)

        assert copied == len(hello)
        assert [b.getvalue() for b in buffers] == [hello] * 3

    def test_copy_many_to_no_sinks_still_drains_source(self, make_source, hello):
        source = make_source(hello)
        assert copy_many(source, []) == len(hello)
        assert source.read() == b""
