"""SQL assembly, one builder per verb.

Caller-supplied fragments are pasted verbatim; no value escaping happens
anywhere in this module.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from fastdb.schema import build_create_table_sql

TRANSACTION_VERBS = ("begin", "commit", "rollback")


def create_sql(table: str, field_tokens: list[str]) -> str:
    return build_create_table_sql(table, field_tokens)


def insert_sql(table: str, values: str) -> str:
    return f"INSERT INTO {table} VALUES ({values});"


def update_sql(table: str, set_clause: str, where: str) -> str:
    return f"UPDATE {table} SET {set_clause} WHERE {where};"


def delete_sql(table: str, where: str) -> str:
    return f"DELETE FROM {table} WHERE {where};"


def transaction_sql(verb: str) -> str:
    return f"{verb};"


@dataclass
class SelectQuery:
    """Pieces of a ``SELECT`` statement in emission order."""

    fields: str
    table: str
    joins: list[tuple[str, str]] = field(default_factory=list)
    where: str | None = None
    group_by: str | None = None
    order_by: str | None = None
    limit: str | None = None

    def to_sql(self) -> str:
        sql = f"SELECT {self.fields} FROM {self.table}"
        for table, condition in self.joins:
            sql += f" JOIN {table} ON {condition}"
        if self.where is not None:
            sql += f" WHERE {self.where}"
        if self.group_by is not None:
            sql += f" GROUP BY {self.group_by}"
        if self.order_by is not None:
            sql += f" ORDER BY {self.order_by}"
        if self.limit is not None:
            sql += f" LIMIT {self.limit}"
        return sql + ";"


def parse_select(fields: str, table: str, tail: list[str]) -> SelectQuery:
    """Read the optional ``join``/``where``/``group``/``order``/``limit`` tail.

    ``join`` takes exactly ``join T on COND``; the others take one operand.
    Tokens that fit none of these shapes are skipped.
    """
    query = SelectQuery(fields=fields, table=table)
    i = 0
    while i < len(tail):
        token = tail[i]
        if token == "join" and i + 3 < len(tail) and tail[i + 2] == "on":
            query.joins.append((tail[i + 1], tail[i + 3]))
            i += 4
        elif token in ("where", "group", "order", "limit") and i + 1 < len(tail):
            operand = tail[i + 1]
            if token == "where":
                query.where = operand
            elif token == "group":
                query.group_by = operand
            elif token == "order":
                query.order_by = operand
            else:
                query.limit = operand
            i += 2
        else:
            logger.warning(f"Ignoring unexpected select token {token!r}")
            i += 1
    return query


def select_sql(fields: str, table: str, tail: list[str]) -> str:
    return parse_select(fields, table, tail).to_sql()
