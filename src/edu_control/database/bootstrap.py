from __future__ import annotations

from typing import List

from ..common.log import get_logger
from ..core.constants import DEFAULT_GROUPS, DEFAULT_SCHEDULE, StorageKeys
from ..core.enums import Role
from ..storage.gateway import PersistenceGateway
from ..users.kv_user_repository import KVUserRepository
from ..users.service import DEMO_ROLES, build_demo_user
from .connection import DatabaseConnection, DBConfig

log = get_logger(__name__)

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS kv_store (
        store_key VARCHAR(64) NOT NULL PRIMARY KEY,
        payload LONGTEXT NOT NULL,
        updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
    ) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
    """,
)


def ensure_database_exists(db_config: dict) -> None:
    db = DatabaseConnection(DBConfig.from_dict(db_config))
    with db.cursor(dictionary=False, with_database=False) as cur:
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{db.config.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )


def apply_schema(db_config: dict) -> None:
    ensure_database_exists(db_config)
    with DatabaseConnection(DBConfig.from_dict(db_config)).cursor(dictionary=False) as cur:
        for stmt in SCHEMA:
            cur.execute(stmt)


def list_tables(db_config: dict) -> List[str]:
    with DatabaseConnection(DBConfig.from_dict(db_config)).cursor(dictionary=False) as cur:
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]


def seed_defaults(gateway: PersistenceGateway) -> List[str]:
    """Write default groups/schedule and demo users where missing.

    Returns the keys that were written. Existing collections are untouched.
    """
    written: List[str] = []
    for key, default in ((StorageKeys.GROUPS, DEFAULT_GROUPS), (StorageKeys.SCHEDULE, DEFAULT_SCHEDULE)):
        if not gateway.exists(key):
            gateway.save(key, [dict(d) for d in default])
            written.append(key)

    users = KVUserRepository(gateway)
    existing = users.list_all()
    missing: List[Role] = [r for r in DEMO_ROLES if not any(u.role == r and "demo" in u.email for u in existing)]
    for role in missing:
        users.add(build_demo_user(role))
    if missing:
        written.append(StorageKeys.USERS)

    if written:
        log.info("default data seeded", extra={"keys": written})
    return written
