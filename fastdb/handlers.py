"""Command handlers, one per top-level verb.

Each handler checks its argument skeleton, builds the SQL through
:mod:`fastdb.builders`, runs it against the database it is handed and
reports the outcome on standard output.
"""

from __future__ import annotations

from typing import Callable

import typer
from loguru import logger

from fastdb import builders
from fastdb.config import ConfigNode
from fastdb.driver import Database
from fastdb.errors import ExecutionError, UsageError
from fastdb.printer import print_table

Handler = Callable[[Database, list[str], ConfigNode], None]

CREATE_USAGE = "create --table <name> fields <definitions>"
INSERT_USAGE = "insert --table <name> values <values>"
UPDATE_USAGE = "update --table <name> set <field=value> where <condition>"
DELETE_USAGE = "delete --table <name> where <condition>"
SELECT_USAGE = "select <*|fields> from <table> [join <t> on <cond>] [where <cond>]"


def handle_create(db: Database, args: list[str], config: ConfigNode) -> None:
    _expect(args, {0: "--table", 2: "fields"}, 4, CREATE_USAGE)
    table = args[1]
    sql = builders.create_sql(table, args[3:])
    _echo_sql(sql, config)
    _run(db, sql, "could not create table")
    typer.echo(f"Table '{table}' created successfully.")


def handle_insert(db: Database, args: list[str], config: ConfigNode) -> None:
    _expect(args, {0: "--table", 2: "values"}, 4, INSERT_USAGE)
    table = args[1]
    _run(db, builders.insert_sql(table, args[3]), "could not insert data")
    typer.echo(f"Rows inserted into '{table}'.")


def handle_update(db: Database, args: list[str], config: ConfigNode) -> None:
    _expect(args, {0: "--table", 2: "set", 4: "where"}, 6, UPDATE_USAGE)
    table = args[1]
    _run(db, builders.update_sql(table, args[3], args[5]), "could not update data")
    typer.echo(f"Rows updated in '{table}'.")


def handle_delete(db: Database, args: list[str], config: ConfigNode) -> None:
    _expect(args, {0: "--table", 2: "where"}, 4, DELETE_USAGE)
    table = args[1]
    _run(db, builders.delete_sql(table, args[3]), "could not delete data")
    typer.echo(f"Rows deleted from '{table}'.")


def handle_select(db: Database, args: list[str], config: ConfigNode) -> None:
    _expect(args, {1: "from"}, 3, SELECT_USAGE)
    sql = builders.select_sql(args[0], args[2], args[3:])
    _echo_sql(sql, config)
    print_table(db.query(sql), config)


def make_transaction_handler(verb: str) -> Handler:
    def handle_transaction(db: Database, args: list[str], config: ConfigNode) -> None:
        _run(db, builders.transaction_sql(verb), f"transaction {verb} failed")
        typer.echo(f"Transaction '{verb}' executed.")

    return handle_transaction


HANDLERS: dict[str, Handler] = {
    "create": handle_create,
    "insert": handle_insert,
    "update": handle_update,
    "delete": handle_delete,
    "select": handle_select,
    **{verb: make_transaction_handler(verb) for verb in builders.TRANSACTION_VERBS},
}


def dispatch(db: Database, verb: str, args: list[str], config: ConfigNode) -> None:
    """Run the handler registered for *verb*."""
    handler = HANDLERS.get(verb)
    if handler is None:
        raise UsageError(f"unrecognized command: {verb}")
    handler(db, args, config)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _expect(args: list[str], keywords: dict[int, str], min_len: int, usage: str) -> None:
    """Raise UsageError unless *args* has *min_len* items and the keywords in place."""
    if len(args) < min_len or any(args[i] != word for i, word in keywords.items()):
        raise UsageError(f"invalid syntax. Usage: {usage}")


def _echo_sql(sql: str, config: ConfigNode) -> None:
    if config.output.echo_sql:
        typer.echo(f"SQL:\n{sql}")


def _run(db: Database, sql: str, failure: str) -> None:
    result = db.execute(sql)
    if not result.success:
        logger.debug(f"Failed statement: {result.sql}")
        raise ExecutionError(f"{failure}: {result.error}")
