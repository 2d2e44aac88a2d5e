"""RoundRobinCopier — deals whole copy sessions across a pool of sinks.

Each call to ``copy`` sends one complete source to exactly one sink.  The
next call goes to the next sink, wrapping around at the end of the pool.
This spreads successive messages over several outputs; it does not
replicate them (see ``MultiWriter`` for that).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from streamfan.core.copying import DEFAULT_CHUNK_SIZE, copy_stream

if TYPE_CHECKING:
    from streamfan.routing.sinks import Sink, Source

logger = logging.getLogger(__name__)


class EmptySinkPoolError(ValueError):
    """Raised when a RoundRobinCopier is built without any sinks."""


class RoundRobinCopier:
    """Copies each source to the next sink in rotation.

    The cursor advances on every call, including calls whose copy fails,
    so a broken sink is skipped by the following call rather than retried.

    Raises
    ------
    EmptySinkPoolError
        If *sinks* is empty.
    """

    def __init__(self, sinks: Iterable[Sink]) -> None:
        self._sinks: list[Sink] = list(sinks)
        if not self._sinks:
            raise EmptySinkPoolError("RoundRobinCopier requires at least one sink")
        self._current = 0

    @classmethod
    def of(cls, *sinks: Sink) -> RoundRobinCopier:
        """Build a copier from sinks given as positional arguments."""
        return cls(sinks)

    @property
    def current(self) -> int:
        """Index of the sink the next ``copy`` will target."""
        return self._current

    @property
    def sinks(self) -> list[Sink]:
        """Return a copy of the sink pool, in rotation order."""
        return list(self._sinks)

    def __len__(self) -> int:
        return len(self._sinks)

    def __repr__(self) -> str:
        return f"RoundRobinCopier(sinks={len(self._sinks)}, current={self._current})"

    def copy(self, source: Source, chunk_size: int | None = None) -> int:
        """Copy all of *source* into the current sink and advance the cursor.

        Returns the number of bytes copied.  Read and write errors propagate
        unmodified; the selected sink may hold a prefix of the source.
        """
        index = self._current
        self._current = (self._current + 1) % len(self._sinks)

        copied = copy_stream(
            source,
            self._sinks[index],
            DEFAULT_CHUNK_SIZE if chunk_size is None else chunk_size,
        )
        logger.debug("RoundRobinCopier: copied %d bytes to sink %d", copied, index)
        return copied
