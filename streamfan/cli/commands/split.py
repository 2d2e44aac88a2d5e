"""``streamfan split FILE [FILE ...]`` — deal input lines across files.

Each line of standard input, newline included, goes to exactly one FILE:
the first line to the first file, the second to the second, wrapping
around when the files run out.
"""

from __future__ import annotations

import io
import logging
from contextlib import ExitStack
from pathlib import Path

import typer
from rich.markup import escape

from streamfan.cli._console import err_console
from streamfan.config import config
from streamfan.models.outputs import CopyReport, OutputFiles
from streamfan.routing.round_robin import RoundRobinCopier

logger = logging.getLogger(__name__)


def split_cmd(
    files: list[Path] = typer.Argument(
        ...,
        metavar="FILE...",
        help="Files that take turns receiving input lines.",
    ),
    append: bool = typer.Option(
        config.append,
        "--append",
        "-a",
        help="Append to the given files, do not overwrite.",
    ),
) -> None:
    """Distribute the lines of standard input round-robin across FILEs."""
    targets = OutputFiles(paths=files, append=append)
    stdin = typer.get_binary_stream("stdin")

    copied = 0
    lines = 0
    try:
        with ExitStack() as stack:
            copier = RoundRobinCopier(targets.open_all(stack))
            for line in stdin:
                copied += copier.copy(io.BytesIO(line), config.chunk_size)
                lines += 1
    except OSError as exc:
        err_console.print(f"[bold red]split:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    report = CopyReport(bytes_copied=copied, sink_count=len(copier), copies=lines)
    logger.info("split finished: %s", report.model_dump())
