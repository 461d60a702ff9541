import os

from .base import *  # noqa: F401,F403

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# MySQL only: create kv_store on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Write default groups/schedule and demo users when missing
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
