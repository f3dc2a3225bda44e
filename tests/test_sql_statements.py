import sqlite3

import pytest

from oauthcred.app_config import AppConfig
from oauthcred.sql_statements import (
    StatementError,
    init_db,
    init_table_statement,
    init_tables,
    statement_text,
)


def _config(version=1, gc=5):
    return AppConfig(
        {
            "db": {
                "init": {
                    "statements": [
                        [
                            "CREATE TABLE IF NOT EXISTS settings(",
                            "name TEXT PRIMARY KEY, value INTEGER);",
                        ]
                    ]
                },
                "init-tables": {
                    "statements": [
                        {
                            "name-value": [["version", version], ["gc", gc]],
                            "condition": [
                                "SELECT COUNT(*) FROM settings ",
                                "WHERE name = ?",
                            ],
                            "statement": [
                                "INSERT INTO settings(name, value) ",
                                "VALUES (?, ?)",
                            ],
                        }
                    ]
                },
            }
        }
    )


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


def _settings(conn):
    return dict(conn.execute("SELECT name, value FROM settings").fetchall())


def test_statement_text_joins_lines():
    assert statement_text(["SELECT ", "1", ";"]) == "SELECT 1;"


def test_statement_text_empty_list():
    assert statement_text([]) == ""


def test_statement_text_rejects_non_list():
    with pytest.raises(StatementError):
        statement_text(None)


def test_init_db_creates_table(connection):
    init_db(connection, _config())
    names = [row[0] for row in connection.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table'")]
    assert names == ["settings"]


def test_init_tables_inserts_values(connection):
    config = _config(version=1, gc=5)
    init_db(connection, config)
    init_tables(connection, config)
    assert _settings(connection) == {"version": 1, "gc": 5}


def test_init_tables_keeps_existing_values(connection):
    init_db(connection, _config())
    init_tables(connection, _config(version=1, gc=5))
    init_tables(connection, _config(version=9, gc=7))
    assert _settings(connection) == {"version": 1, "gc": 5}


def test_init_table_statement_missing_key(connection):
    with pytest.raises(StatementError):
        init_table_statement(connection, {"name-value": [], "condition": []})


def test_init_table_statement_bad_pair(connection):
    init_db(connection, _config())
    spec = _config().lookup("db", "init-tables", "statements")[0]
    spec = dict(spec, **{"name-value": [["only-name"]]})
    with pytest.raises(StatementError):
        init_table_statement(connection, spec)


def test_init_db_missing_section(connection):
    with pytest.raises(StatementError):
        init_db(connection, AppConfig({"db": {}}))


def test_init_tables_missing_section(connection):
    with pytest.raises(StatementError):
        init_tables(connection, AppConfig({}))


def test_init_db_bad_sql(connection):
    config = AppConfig({"db": {"init": {"statements": [["CREATE NONSENSE"]]}}})
    with pytest.raises(StatementError):
        init_db(connection, config)


def test_init_tables_without_table_fails(connection):
    with pytest.raises(StatementError):
        init_tables(connection, _config())