"""Main Typer application — imports and registers all CLI commands.

Entry point: ``streamfan`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import typer

from streamfan import __version__
from streamfan.cli._console import configure_logging, console
from streamfan.cli.commands.split import split_cmd
from streamfan.cli.commands.tee import tee_cmd
from streamfan.config import config

app = typer.Typer(
    name="streamfan",
    help="Streamfan: fan one input stream out to many outputs.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"streamfan {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Streamfan: fan one input stream out to many outputs."""
    configure_logging(config.log_level)


# Register subcommands
app.command(name="tee", help="Copy standard input to each FILE and standard output.")(
    tee_cmd
)
app.command(name="split", help="Deal standard input lines across FILEs.")(split_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
