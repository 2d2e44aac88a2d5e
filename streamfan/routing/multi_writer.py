"""MultiWriter — duplicates every write to ALL configured sinks.

Sinks are written strictly in registration order and each one receives the
complete buffer before the next is touched.  The first failure stops the
fan-out: earlier sinks keep the data, later sinks never see it, and the
caller gets the error the sink raised.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from streamfan.core.copying import DEFAULT_CHUNK_SIZE, copy_stream, write_all

if TYPE_CHECKING:
    from streamfan.routing.sinks import Sink, Source

logger = logging.getLogger(__name__)


class MultiWriter:
    """Presents many sinks as a single sink.

    A ``MultiWriter`` satisfies the ``Sink`` protocol itself, so writers can
    be nested.  With no sinks it behaves as a null device.

    Usage
    -----
    >>> import io
    >>> a, b = io.BytesIO(), io.BytesIO()
    >>> writer = MultiWriter([a, b])
    >>> writer.write(b"hi")
    2
    >>> a.getvalue(), b.getvalue()
    (b'hi', b'hi')
    """

    def __init__(self, sinks: Iterable[Sink] = ()) -> None:
        self._sinks: list[Sink] = list(sinks)

    @classmethod
    def of(cls, *sinks: Sink) -> MultiWriter:
        """Build a writer from sinks given as positional arguments."""
        return cls(sinks)

    @property
    def sinks(self) -> list[Sink]:
        """Return a copy of the sink list, in write order."""
        return list(self._sinks)

    def __len__(self) -> int:
        return len(self._sinks)

    def __repr__(self) -> str:
        return f"MultiWriter(sinks={len(self._sinks)})"

    # ------------------------------------------------------------------
    # Sink protocol
    # ------------------------------------------------------------------

    def write(self, data: bytes) -> int:
        """Write *data* in full to every sink, in order.

        Returns ``len(data)``; a partial count is never reported.  The first
        sink error is re-raised unmodified.
        """
        for index, sink in enumerate(self._sinks):
            try:
                write_all(sink, data)
            except OSError:
                logger.debug(
                    "MultiWriter: write failed at sink %d of %d",
                    index,
                    len(self._sinks),
                )
                raise
        return len(data)

    def flush(self) -> None:
        """Flush every sink in order, stopping at the first error."""
        for index, sink in enumerate(self._sinks):
            try:
                sink.flush()
            except OSError:
                logger.debug(
                    "MultiWriter: flush failed at sink %d of %d",
                    index,
                    len(self._sinks),
                )
                raise

    # ------------------------------------------------------------------
    # Copy
    # ------------------------------------------------------------------

    def copy(self, source: Source, chunk_size: int | None = None) -> int:
        """Copy *source* into every sink until it is exhausted.

        Returns the number of bytes read from *source*.
        """
        copied = copy_stream(
            source,
            self,
            DEFAULT_CHUNK_SIZE if chunk_size is None else chunk_size,
        )
        logger.debug(
            "MultiWriter: fanned out %d bytes to %d sinks", copied, len(self._sinks)
        )
        return copied


def copy_many(
    source: Source, sinks: Iterable[Sink], chunk_size: int | None = None
) -> int:
    """Copy *source* into each of *sinks* and return the byte count."""
    return MultiWriter(sinks).copy(source, chunk_size)
