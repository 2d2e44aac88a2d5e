"""Streamfan core — chunked copy primitives shared by every router."""

from streamfan.core.copying import (
    DEFAULT_CHUNK_SIZE,
    ShortWriteError,
    copy_stream,
    write_all,
)

__all__ = ["DEFAULT_CHUNK_SIZE", "ShortWriteError", "copy_stream", "write_all"]
