"""Building and running the SQL statements held in the configuration."""

from __future__ import annotations

import json
import sqlite3
from typing import Any, Iterable

from .app_config import AppConfig


class StatementError(Exception):
    """A configured statement is missing, malformed or failed to run."""


def _json_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    return json.dumps(value)


def _json_int(value: Any) -> int:
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def statement_text(lines: Iterable[Any]) -> str:
    """Concatenate the lines of a configured statement into one string."""
    if not isinstance(lines, (list, tuple)):
        raise StatementError(f"statement must be a list of lines, not {lines!r}")
    return "".join(_json_string(line) for line in lines)


def init_db(connection: sqlite3.Connection, config: AppConfig) -> None:
    """Run every script listed under ``db/init/statements``."""
    statements = config.lookup("db", "init", "statements")
    if not isinstance(statements, list):
        raise StatementError("db/init/statements is missing")
    for lines in statements:
        try:
            connection.executescript(statement_text(lines))
        except sqlite3.Error as exc:
            raise StatementError(str(exc)) from exc


def init_table_statement(connection: sqlite3.Connection, spec: Any) -> None:
    """Insert each name/value pair whose condition query yields zero."""
    if not isinstance(spec, dict):
        raise StatementError("table statement must be an object")
    try:
        pairs = spec["name-value"]
        condition_lines = spec["condition"]
        run_lines = spec["statement"]
    except KeyError as exc:
        raise StatementError(f"table statement lacks {exc.args[0]!r}") from exc
    if not isinstance(pairs, list):
        raise StatementError("name-value must be a list")
    condition = statement_text(condition_lines)
    run = statement_text(run_lines)
    try:
        for pair in pairs:
            if not isinstance(pair, (list, tuple)) or len(pair) < 2:
                raise StatementError(f"bad name-value entry {pair!r}")
            name = _json_string(pair[0])
            row = connection.execute(condition, (name,)).fetchone()
            if row is None:
                raise StatementError(f"condition returned no row for {name!r}")
            if not _json_int(row[0]):
                connection.execute(run, (name, _json_int(pair[1])))
        connection.commit()
    except sqlite3.Error as exc:
        connection.rollback()
        raise StatementError(str(exc)) from exc


def init_tables(connection: sqlite3.Connection, config: AppConfig) -> None:
    """Run every table initialiser under ``db/init-tables/statements``."""
    statements = config.lookup("db", "init-tables", "statements")
    if not isinstance(statements, list):
        raise StatementError("db/init-tables/statements is missing")
    for spec in statements:
        init_table_statement(connection, spec)