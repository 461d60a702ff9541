"""Dump every stored collection to a JSON file under ``backups/``.

Works with any storage backend, so a file-backed install can be moved to
MySQL by restoring the dump with ``--restore``.
"""

from __future__ import annotations

import argparse
import importlib
import json
from datetime import datetime
from pathlib import Path

from edu_control.config import get_settings_module
from edu_control.container import build_store
from edu_control.storage.gateway import PersistenceGateway


def main() -> None:
    parser = argparse.ArgumentParser(description="Back up or restore stored collections")
    parser.add_argument("--restore", metavar="FILE", help="write the collections of a previous dump back")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    gateway = PersistenceGateway(build_store(settings))

    if args.restore:
        payload = json.loads(Path(args.restore).read_text(encoding="utf-8"))
        for key, value in payload.items():
            gateway.save(key, value)
        print(f"OK: Restored {len(payload)} collections from {args.restore}")
        return

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"edu_control_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"

    dump = {key: gateway.load(key, None) for key in gateway.store.keys()}
    out_file.write_text(json.dumps(dump, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(dump)} collections)")


if __name__ == "__main__":
    main()
