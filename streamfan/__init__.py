"""Streamfan: I/O fan-out utilities.

  - MultiWriter: replicate every write to many sinks, fail-fast, in order
  - RoundRobinCopier: send each whole copy to the next sink in a pool
  - ``streamfan tee`` / ``streamfan split`` command-line tools
"""

__version__ = "0.1.0"
__description__ = "Fan one byte stream out to many writable sinks"

from streamfan.routing.multi_writer import MultiWriter, copy_many
from streamfan.routing.round_robin import EmptySinkPoolError, RoundRobinCopier
from streamfan.routing.sinks import Sink, Source
from streamfan.cli.app import app as cli

__all__ = [
    "EmptySinkPoolError",
    "MultiWriter",
    "RoundRobinCopier",
    "Sink",
    "Source",
    "cli",
    "copy_many",
    "__version__",
]
