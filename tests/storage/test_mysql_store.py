from __future__ import annotations

import pytest

from edu_control.database.connection import DatabaseConnection, DBConfig
from edu_control.storage.gateway import PersistenceGateway
from edu_control.storage.mysql_store import MySQLKeyValueStore


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self._result = []

    def execute(self, sql, params=()):
        sql = " ".join(sql.split())
        table = self._conn.pending
        if sql.startswith("SELECT payload"):
            key = params[0]
            self._result = [{"payload": table[key]}] if key in table else []
        elif sql.startswith("SELECT store_key"):
            self._result = [{"store_key": k} for k in sorted(table)]
        elif sql.startswith("INSERT INTO kv_store"):
            if params[1] == "boom":
                raise RuntimeError("disk full")
            table[params[0]] = params[1]
        elif sql.startswith("DELETE"):
            table.pop(params[0], None)

    def fetchone(self):
        return self._result[0] if self._result else None

    def fetchall(self):
        return list(self._result)

    def close(self):
        pass


class FakeConnection:
    def __init__(self, server: dict):
        self._server = server
        self.pending = dict(server)

    def cursor(self, dictionary=True):
        return FakeCursor(self)

    def commit(self):
        self._server.clear()
        self._server.update(self.pending)

    def rollback(self):
        self.pending = dict(self._server)

    def close(self):
        pass


@pytest.fixture
def server(monkeypatch) -> dict:
    tables: dict = {}
    monkeypatch.setattr(DatabaseConnection, "connect", lambda self, with_database=True: FakeConnection(tables))
    return tables


@pytest.fixture
def db() -> DatabaseConnection:
    return DatabaseConnection(DBConfig.from_dict({"database": "edu_test"}))


def test_read_write_delete(server, db):
    store = MySQLKeyValueStore(db)

    assert store.read("edu_news") is None
    PersistenceGateway(store).save("edu_news", [{"id": "1"}])
    store.write("edu_groups", "[]")

    assert server == {"edu_news": '[{"id":"1"}]', "edu_groups": "[]"}
    assert store.keys() == ["edu_groups", "edu_news"]

    store.delete("edu_news")
    assert store.keys() == ["edu_groups"]


def test_failed_write_rolls_back(server, db):
    store = MySQLKeyValueStore(db)
    store.write("edu_news", "[]")

    with pytest.raises(RuntimeError):
        store.write("edu_news", "boom")

    assert store.read("edu_news") == "[]"


def test_one_instance_per_config():
    a = DBConfig.from_dict({"database": "one"})
    b = DBConfig.from_dict({"database": "two"})

    assert DatabaseConnection.get_instance(a) is DatabaseConnection.get_instance(DBConfig.from_dict({"database": "one"}))
    assert DatabaseConnection.get_instance(a) is not DatabaseConnection.get_instance(b)
