"""``streamfan tee [FILE ...]`` — copy standard input to files and stdout.

Every chunk read from standard input is written to each FILE in the order
given and then to standard output.  Any open or write failure aborts the
command with exit status 1.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack
from pathlib import Path

import typer
from rich.markup import escape

from streamfan.cli._console import err_console
from streamfan.config import config
from streamfan.models.outputs import CopyReport, OutputFiles
from streamfan.routing.multi_writer import MultiWriter

logger = logging.getLogger(__name__)


def tee_cmd(
    files: list[Path] = typer.Argument(
        None,
        metavar="[FILE]...",
        help="Files to write alongside standard output.",
    ),
    append: bool = typer.Option(
        config.append,
        "--append",
        "-a",
        help="Append to the given files, do not overwrite.",
    ),
) -> None:
    """Copy standard input to each FILE and to standard output."""
    targets = OutputFiles(paths=files or [], append=append)
    stdin = typer.get_binary_stream("stdin")
    stdout = typer.get_binary_stream("stdout")

    try:
        with ExitStack() as stack:
            writer = MultiWriter([*targets.open_all(stack), stdout])
            copied = writer.copy(stdin, config.chunk_size)
            writer.flush()
    except OSError as exc:
        err_console.print(f"[bold red]tee:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    report = CopyReport(bytes_copied=copied, sink_count=len(writer))
    logger.info("tee finished: %s", report.model_dump())
