"""Sink and source protocols for Streamfan routing.

A sink is anything with ``write(data)`` and ``flush()``; a source is
anything with ``read(size)``.  Binary file objects, ``io.BytesIO``,
``sys.stdout.buffer`` and a ``MultiWriter`` all qualify.  Routers borrow
these objects for the duration of a call and never close them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Protocol every Streamfan destination must implement.

    ``write`` returns the number of bytes accepted, which may be less than
    ``len(data)``; ``None`` means the whole buffer was taken.  Failures are
    reported by raising ``OSError``.

    Sinks must block until they accept at least one byte.  A non-blocking
    raw stream that returns ``None`` for "would block" has its data
    dropped, because ``None`` is read as a complete write.
    """

    def write(self, data: bytes) -> int | None:
        ...

    def flush(self) -> None:
        ...


@runtime_checkable
class Source(Protocol):
    """Protocol every Streamfan origin must implement.

    ``read`` returns up to *size* bytes; an empty result means the source
    is exhausted.
    """

    def read(self, size: int = -1) -> bytes:
        ...
