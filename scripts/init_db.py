"""Create the MySQL database and the ``kv_store`` table.

Only needed with ``STORAGE_BACKEND=mysql``; the file and memory backends
need no schema.
"""

from __future__ import annotations

import importlib

from edu_control.config import get_settings_module
from edu_control.database.bootstrap import apply_schema, list_tables


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    tables = list_tables(db_config)
    print(
        "OK: kv_store ready -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
