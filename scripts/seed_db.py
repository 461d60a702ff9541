from __future__ import annotations

import importlib

from edu_control.config import get_settings_module
from edu_control.container import build_store
from edu_control.database.bootstrap import seed_defaults
from edu_control.storage.gateway import PersistenceGateway


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    gateway = PersistenceGateway(build_store(settings))

    written = seed_defaults(gateway)
    if written:
        print(f"OK: Seeded {', '.join(written)} ({settings.STORAGE_BACKEND})")
    else:
        print(f"OK: Nothing to seed ({settings.STORAGE_BACKEND})")


if __name__ == "__main__":
    main()
