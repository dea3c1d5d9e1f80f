"""Command-line entry point.

``fastdb --db <file> [verb [args...]]``.  Option parsing is bypassed so
that type and modifier flags (``--int``, ``--pk``...) and a bare ``--``
reach the handlers untouched.
"""

from __future__ import annotations

import sys

import click
import typer
from loguru import logger
from typer.core import TyperCommand

from fastdb.config import ConfigNode, load_config
from fastdb.driver import Database
from fastdb.errors import FastDBError, UsageError
from fastdb.handlers import dispatch
from fastdb.help import HELP_TEXT

app = typer.Typer(add_completion=False)


class RawArgsCommand(TyperCommand):
    """Command that hands the whole argument vector to ``ctx.args``."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return []


def configure_logging(config: ConfigNode) -> None:
    logger.remove()
    logger.add(sys.stderr, level=config.logging.level)


def run(argv: list[str], config: ConfigNode | None = None) -> None:
    """Open the database named by ``--db`` and run one verb against it.

    Raises
    ------
    FastDBError
        On any usage, translation or execution failure.  The database is
        closed before the exception propagates.
    """
    config = config or load_config()
    if len(argv) < 2 or argv[0] != "--db":
        raise UsageError("a database must be given with --db <file.db>")

    with Database.open(argv[1]) as db:
        rest = argv[2:]
        if not rest:
            typer.echo(HELP_TEXT)
            return
        verb, args = rest[0], rest[1:]
        logger.debug(f"Running {verb!r} on {db.path}")
        dispatch(db, verb, args, config)


def _fail(message: object) -> None:
    typer.echo(f"Error: {message}", err=True)
    typer.echo(HELP_TEXT)
    raise typer.Exit(code=1)


@app.command(cls=RawArgsCommand, add_help_option=False)
def main(ctx: typer.Context) -> None:
    """Translate flag-oriented commands into SQL and run them on SQLite."""
    try:
        config = load_config()
        configure_logging(config)
        run(list(ctx.args), config)
    except FastDBError as exc:
        _fail(exc)
    except Exception as exc:
        logger.opt(exception=exc).debug("Unexpected failure")
        _fail(exc)


if __name__ == "__main__":
    app()
