import sqlite3

import run


def test_init_db_only_creates_schema_without_serving(database, monkeypatch):
    served = []
    monkeypatch.setattr(run, "serve", lambda host, port: served.append((host, port)))
    run.main(["--init-db-only"])
    assert served == []
    conn = sqlite3.connect(database)
    try:
        assert conn.execute("SELECT MAX(version) FROM migrations").fetchone()[0] == 2
    finally:
        conn.close()


def test_parse_args_defaults_to_settings():
    args = run.parse_args([])
    assert args.host == run.settings.host
    assert args.port == run.settings.port
    assert not args.init_db_only
