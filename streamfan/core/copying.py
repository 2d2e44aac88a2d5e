"""Chunked copy helpers for byte streams.

Both routers are built on the two functions here:

- ``write_all`` pushes one buffer into one sink, looping over partial writes
  until every byte has been accepted.
- ``copy_stream`` drains a source into a sink chunk by chunk and reports the
  number of bytes moved.

Errors raised by sinks and sources are never wrapped or retried.
"""

from __future__ import annotations

import errno
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from streamfan.routing.sinks import Sink, Source

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 8 * 1024


class ShortWriteError(OSError):
    """Raised when a sink accepts zero bytes of a non-empty buffer."""

    def __init__(self, remaining: int) -> None:
        super().__init__(
            errno.EIO,
            f"failed to write whole buffer ({remaining} bytes left)",
        )
        self.remaining = remaining


def write_all(sink: Sink, data: bytes) -> int:
    """Write every byte of *data* to *sink*.

    ``write`` may accept fewer bytes than offered (raw file objects do), so
    the unwritten tail is re-offered as a fresh ``bytes`` object until
    nothing is left.  A ``None`` return is taken to mean the sink consumed
    the whole remainder, which is what buffered writers and most duck-typed
    sinks do.  Non-blocking raw streams, where ``None`` means nothing was
    written, are not supported.

    Returns
    -------
    int
        ``len(data)``.

    Raises
    ------
    ShortWriteError
        If the sink reports zero bytes written while data remains.
    OSError
        Whatever the sink raises, unmodified.
    """
    remaining = bytes(data)
    total = len(remaining)
    while remaining:
        written = sink.write(remaining)
        if written is None:
            break
        if written == 0:
            raise ShortWriteError(len(remaining))
        remaining = remaining[written:]
    return total


def copy_stream(
    source: Source, sink: Sink, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> int:
    """Copy *source* into *sink* until the source is exhausted.

    Reads at most *chunk_size* bytes at a time and writes each chunk in full
    before reading the next.  The first read or write error propagates and
    the sink keeps whatever prefix it already received.

    Returns the total number of bytes copied.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    copied = 0
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        write_all(sink, chunk)
        copied += len(chunk)

    logger.debug("copy_stream: copied %d bytes", copied)
    return copied
