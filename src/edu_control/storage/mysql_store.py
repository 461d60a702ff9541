from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection

_UPSERT = (
    "INSERT INTO kv_store(store_key, payload) VALUES(%s, %s) "
    "ON DUPLICATE KEY UPDATE payload=VALUES(payload)"
)


class MySQLKeyValueStore:
    """Collections stored as rows of the ``kv_store`` table."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def read(self, key: str) -> Optional[str]:
        with self._db.cursor() as cur:
            cur.execute("SELECT payload FROM kv_store WHERE store_key=%s", (key,))
            row = cur.fetchone()
        return str(row["payload"]) if row else None

    def write(self, key: str, value: str) -> None:
        with self._db.cursor() as cur:
            cur.execute(_UPSERT, (key, value))

    def delete(self, key: str) -> None:
        with self._db.cursor() as cur:
            cur.execute("DELETE FROM kv_store WHERE store_key=%s", (key,))

    def keys(self) -> Sequence[str]:
        with self._db.cursor() as cur:
            cur.execute("SELECT store_key FROM kv_store ORDER BY store_key")
            rows = cur.fetchall() or []
        return [str(r["store_key"]) for r in rows]
