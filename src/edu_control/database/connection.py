from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import ClassVar, Dict, Iterator

import mysql.connector

from ..common.log import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "edu_control")),
        )


class DatabaseConnection:
    """Factory of short-lived MySQL connections, one shared instance per config.

    Every ``cursor()`` block runs on its own connection and transaction, so a
    collection write is committed or rolled back as a whole.
    """

    _instances: ClassVar[Dict[DBConfig, "DatabaseConnection"]] = {}

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        return cls._instances.setdefault(config, cls(config))

    def connect(self, *, with_database: bool = True):
        params = {
            "host": self._config.host,
            "port": self._config.port,
            "user": self._config.user,
            "password": self._config.password,
        }
        if with_database:
            params["database"] = self._config.database
        return mysql.connector.connect(**params)

    @contextmanager
    def cursor(self, *, dictionary: bool = True, with_database: bool = True) -> Iterator:
        conn = self.connect(with_database=with_database)
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield cur
            conn.commit()
        except Exception:
            log.warning("mysql transaction rolled back", exc_info=True)
            conn.rollback()
            raise
        finally:
            cur.close()
            conn.close()
