"""Streamfan CLI — Typer-based command-line interface.

Provides the ``streamfan`` command with ``tee`` (replicate standard input)
and ``split`` (deal standard input lines across files) subcommands.

Standard output carries data, so diagnostics go to standard error via Rich.
"""
