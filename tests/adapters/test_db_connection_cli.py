"""Tests for the test_db_connection and init_schema_cli adapters."""

from finance_tracker.adapters import init_schema_cli, test_db_connection


class _DummyConnection:
    def __init__(self) -> None:
        self.executed: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.executed.append(statement)


class _DummyEngine:
    def __init__(self, url: str) -> None:
        self.url = url
        self.connection = _DummyConnection()

    def connect(self):
        return self.connection

    def begin(self):
        return self.connection


class _Adapter:
    def __init__(self, engine: _DummyEngine) -> None:
        self._engine = engine

    def get_engine(self):
        return self._engine


class _Logger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def info(self, msg: str) -> None:
        self.messages.append(msg)


def test_main_logs_successful_check(monkeypatch):
    """The CLI should log the connection URL and execute SELECT 1."""
    engine = _DummyEngine("postgresql://finance")
    logger = _Logger()
    monkeypatch.setattr(
        test_db_connection,
        "build_database_adapter",
        lambda: _Adapter(engine),
    )
    monkeypatch.setattr(test_db_connection, "get_app_logger", lambda: logger)

    test_db_connection.main()

    assert "postgresql://finance" in logger.messages[0]
    assert engine.connection.executed == ["SELECT 1"]


def test_init_schema_creates_tables(monkeypatch):
    """init_schema_cli should issue the DDL statements in one transaction."""
    engine = _DummyEngine("sqlite:///finance.db")
    logger = _Logger()
    monkeypatch.setattr(
        init_schema_cli,
        "build_database_adapter",
        lambda: _Adapter(engine),
    )
    monkeypatch.setattr(init_schema_cli, "get_app_logger", lambda: logger)

    init_schema_cli.main()

    executed = engine.connection.executed
    assert any("CREATE TABLE IF NOT EXISTS accounts" in sql for sql in executed)
    assert any("account_snapshots" in sql for sql in executed)
    assert "sqlite:///finance.db" in logger.messages[-1]
