"""Schema-definition translator.

Reads an inline, flag-oriented column DSL and emits a single
``CREATE TABLE`` statement::

    --int id --pk --ai --string name --notnull
    --int customer_id --fk customers(id) --ondelete cascade

Each column is ``TYPE NAME modifier*``.  A type flag in modifier position
ends the current column and starts the next one.  Translation is all or
nothing: any error raises :class:`~fastdb.errors.TranslationError` before
a single line of SQL is returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from loguru import logger

from fastdb.errors import TranslationError

# Type flag -> SQLite affinity.
FIELD_TYPES: dict[str, str] = {
    "--int": "INTEGER",
    "--string": "TEXT",
    "--float": "REAL",
    "--bool": "INTEGER",
    "--date": "TEXT",
    "--blob": "TEXT",
    "--text": "TEXT",
}

FLAG_MODIFIERS = ("--pk", "--ai", "--notnull", "--unique")
OPERAND_MODIFIERS = ("--default", "--fk", "--ondelete", "--onupdate")
FIELD_MODIFIERS = FLAG_MODIFIERS + OPERAND_MODIFIERS

FK_ACTIONS = ("cascade", "restrict", "setnull", "setdefault", "noaction")

INVALID_FIELD_TYPE = "invalid field type"
MISSING_FIELD_NAME = "missing field name"
MISSING_OPERAND = "missing operand"
INVALID_FK_ACTION = "invalid FK action"
INVALID_FK_FORMAT = "invalid FK format"


class TokenCursor:
    """Forward-only cursor over an immutable token sequence."""

    def __init__(self, tokens: Sequence[str]) -> None:
        self._tokens = tuple(tokens)
        self._pos = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def peek(self) -> str | None:
        """Return the current token without consuming it, or ``None`` at the end."""
        return None if self.at_end() else self._tokens[self._pos]

    def advance(self) -> str:
        """Consume and return the current token."""
        if self.at_end():
            raise IndexError("token cursor exhausted")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def at_type(self) -> bool:
        """True when the current token is a type flag, i.e. starts a column."""
        return _is_type_flag(self.peek())


@dataclass(frozen=True)
class ForeignKey:
    """A reference to ``table(column)`` plus optional referential actions."""

    table: str
    column: str
    on_delete: str | None = None
    on_update: str | None = None

    def to_sql(self, column_name: str) -> str:
        sql = f"FOREIGN KEY({column_name}) REFERENCES {self.table}({self.column})"
        if self.on_delete:
            sql += f" ON DELETE {self.on_delete}"
        if self.on_update:
            sql += f" ON UPDATE {self.on_update}"
        return sql


@dataclass
class Modifiers:
    """Per-column modifier record, independent of the order flags were given."""

    primary_key: bool = False
    autoincrement: bool = False
    not_null: bool = False
    unique: bool = False
    default: str | None = None
    fk_target: tuple[str, str] | None = None
    on_delete: str | None = None
    on_update: str | None = None

    @property
    def foreign_key(self) -> ForeignKey | None:
        if self.fk_target is None:
            return None
        table, column = self.fk_target
        return ForeignKey(table, column, self.on_delete, self.on_update)

    def clauses(self) -> str:
        """Inline clauses in their fixed emission order."""
        parts = []
        if self.primary_key:
            parts.append(" PRIMARY KEY")
        if self.autoincrement:
            parts.append(" AUTOINCREMENT")
        if self.not_null:
            parts.append(" NOT NULL")
        if self.unique:
            parts.append(" UNIQUE")
        if self.default is not None:
            parts.append(f" DEFAULT {self.default}")
        return "".join(parts)


@dataclass
class ColumnDef:
    name: str
    type_flag: str
    modifiers: Modifiers = field(default_factory=Modifiers)

    @property
    def affinity(self) -> str:
        return FIELD_TYPES[self.type_flag]

    def to_sql(self) -> str:
        return f"{self.name} {self.affinity}{self.modifiers.clauses()}"

    def constraint_sql(self) -> str | None:
        fk = self.modifiers.foreign_key
        return fk.to_sql(self.name) if fk else None


@dataclass
class TableDef:
    name: str
    columns: list[ColumnDef] = field(default_factory=list)

    def to_sql(self) -> str:
        """Render the ``CREATE TABLE`` statement.

        Columns keep their declaration order; foreign-key constraints follow
        all columns, also in declaration order.
        """
        lines = [column.to_sql() for column in self.columns]
        lines.extend(
            constraint
            for constraint in (column.constraint_sql() for column in self.columns)
            if constraint
        )
        body = ",\n".join(f"  {line}" for line in lines)
        return f"CREATE TABLE {self.name} (\n{body}\n);"


def parse_fk_spec(spec: str) -> tuple[str, str]:
    """Split an FK spec into ``(table, column)``.

    Accepted forms: ``t(c)``, ``t.c``, ``t,c`` and ``t c``, optionally
    wrapped in outer parentheses.  Separators are searched in the order
    ``.``, ``(``, ``,``, space.
    """
    text = spec
    if len(text) >= 2 and text.startswith("(") and text.endswith(")"):
        text = text[1:-1]

    if "." in text:
        table, _, column = text.partition(".")
    elif "(" in text:
        table, _, column = text.partition("(")
        column = column.removesuffix(")")
    elif "," in text:
        table, _, column = text.partition(",")
    elif " " in text:
        table, _, column = text.partition(" ")
    else:
        raise TranslationError(
            INVALID_FK_FORMAT, f"{spec!r}; use table(column) or table.column"
        )

    table, column = table.strip(), column.strip()
    if not table or not column:
        raise TranslationError(
            INVALID_FK_FORMAT, f"{spec!r}; use table(column) or table.column"
        )
    return table, column


def parse_columns(tokens: Sequence[str]) -> list[ColumnDef]:
    """Parse the column DSL into an ordered list of :class:`ColumnDef`."""
    cursor = TokenCursor(tokens)
    if cursor.at_end():
        raise TranslationError(INVALID_FIELD_TYPE, "no field definitions given")

    columns: list[ColumnDef] = []
    while not cursor.at_end():
        columns.append(_parse_column(cursor))
    return columns


def translate(table_name: str, tokens: Sequence[str]) -> TableDef:
    """Build a :class:`TableDef` for *table_name* from the column tokens."""
    table = TableDef(name=table_name, columns=parse_columns(tokens))
    logger.debug(f"Translated table {table_name} with {len(table.columns)} column(s)")
    return table


def build_create_table_sql(table_name: str, tokens: Sequence[str]) -> str:
    """Return the ``CREATE TABLE`` statement for *table_name*."""
    return translate(table_name, tokens).to_sql()


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _is_type_flag(token: str | None) -> bool:
    return token is not None and token.startswith("--") and token in FIELD_TYPES


def _parse_column(cursor: TokenCursor) -> ColumnDef:
    if not cursor.at_type():
        raise TranslationError(
            INVALID_FIELD_TYPE,
            f"{cursor.peek()!r} (expected one of {', '.join(FIELD_TYPES)})",
        )
    type_flag = cursor.advance()

    name = cursor.peek()
    if name is None or name in FIELD_TYPES or name in FIELD_MODIFIERS:
        raise TranslationError(MISSING_FIELD_NAME, f"after {type_flag}")
    cursor.advance()

    column = ColumnDef(name=name, type_flag=type_flag)
    while cursor.peek() in FIELD_MODIFIERS:
        _apply_modifier(cursor, column.modifiers)
    logger.debug(f"Column {column.to_sql()}")
    return column


def _apply_modifier(cursor: TokenCursor, mods: Modifiers) -> None:
    flag = cursor.advance()
    if flag == "--pk":
        mods.primary_key = True
    elif flag == "--ai":
        mods.autoincrement = True
    elif flag == "--notnull":
        mods.not_null = True
    elif flag == "--unique":
        mods.unique = True
    else:
        operand = _operand(cursor, flag)
        if flag == "--default":
            mods.default = operand
        elif flag == "--fk":
            mods.fk_target = parse_fk_spec(operand)
        elif flag == "--ondelete":
            mods.on_delete = _action(operand)
        else:
            mods.on_update = _action(operand)


def _operand(cursor: TokenCursor, flag: str) -> str:
    if cursor.at_end():
        raise TranslationError(MISSING_OPERAND, f"after {flag}")
    return cursor.advance()


def _action(token: str) -> str:
    if token not in FK_ACTIONS:
        raise TranslationError(
            INVALID_FK_ACTION, f"{token!r} (expected one of {', '.join(FK_ACTIONS)})"
        )
    return token
