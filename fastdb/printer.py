"""Fixed-width tabular printer for query results."""

from __future__ import annotations

import typer

from fastdb.config import ConfigNode, load_config
from fastdb.driver import QueryResult


def format_table(result: QueryResult, config: ConfigNode | None = None) -> list[str]:
    """Return the header, rule and body lines for *result*.

    Each cell is left-justified in a ``column_width`` field followed by the
    separator.  The rule is always ``column_width + 2`` characters per
    column, whatever the separator; with the default `` | `` it stops one
    character short of the header.  Overlong cells are not truncated.
    """
    printer = (config or load_config()).printer
    width = printer.column_width

    def _line(cells: list[str]) -> str:
        return "".join(f"{cell:<{width}}{printer.separator}" for cell in cells)

    lines = [_line(result.columns)]
    lines.append(printer.rule_char * ((width + 2) * len(result.columns)))
    for row in result.rows:
        lines.append(_line([printer.null_text if v is None else v for v in row]))
    return lines


def print_table(result: QueryResult, config: ConfigNode | None = None) -> None:
    """Print *result* to standard output."""
    for line in format_table(result, config):
        typer.echo(line)
