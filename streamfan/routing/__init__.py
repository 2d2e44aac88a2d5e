"""Streamfan routing — moves bytes from one source to many sinks.

Two routers are provided:

- ``MultiWriter`` replicates every write to all of its sinks (fan-out).
- ``RoundRobinCopier`` sends each whole copy to one sink, cycling through
  the pool (load distribution).

Both treat sinks as opaque ``Sink`` objects and never close them.
"""

from streamfan.routing.multi_writer import MultiWriter, copy_many
from streamfan.routing.round_robin import EmptySinkPoolError, RoundRobinCopier
from streamfan.routing.sinks import Sink, Source

__all__ = [
    "EmptySinkPoolError",
    "MultiWriter",
    "RoundRobinCopier",
    "Sink",
    "Source",
    "copy_many",
]
