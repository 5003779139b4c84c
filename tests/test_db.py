import sqlite3

from bank_api.app.core.db import MIGRATIONS, get_database_path, init_db


def test_init_db_creates_tables(database):
    conn = sqlite3.connect(database)
    try:
        names = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
    finally:
        conn.close()
    assert {"branches", "customers", "employees", "accounts", "migrations"} <= names


def test_init_db_is_idempotent(database):
    latest = MIGRATIONS[-1][0]
    assert init_db() == latest
    assert init_db() == latest
    conn = sqlite3.connect(database)
    try:
        versions = [row[0] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
    finally:
        conn.close()
    assert versions == [version for version, _ in MIGRATIONS]


def test_database_path_follows_settings(database):
    assert get_database_path() == str(database)
