"""Output target and copy result models used by the CLI."""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import BinaryIO

from pydantic import BaseModel, ConfigDict, Field


class OutputFiles(BaseModel):
    """A set of files to open as sinks.

    Files are opened in binary mode, truncated unless ``append`` is set.
    Order is preserved so writes reach the files in the order given.
    """

    model_config = ConfigDict(frozen=True)

    paths: list[Path] = Field(default_factory=list)
    append: bool = False

    @property
    def mode(self) -> str:
        """The ``open()`` mode for every file in the set."""
        return "ab" if self.append else "wb"

    def open_all(self, stack: ExitStack) -> list[BinaryIO]:
        """Open every path and register it with *stack* for closing.

        The first path that cannot be opened raises ``OSError``; files
        opened before it are closed when *stack* unwinds.
        """
        return [stack.enter_context(open(path, self.mode)) for path in self.paths]


class CopyReport(BaseModel):
    """Summary of a completed routing session."""

    model_config = ConfigDict(frozen=True)

    bytes_copied: int = Field(ge=0)
    sink_count: int = Field(ge=0)
    copies: int = Field(default=1, ge=0)
