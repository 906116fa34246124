#!/usr/bin/env python3
"""
Drop and recreate the selector tables of the configured database.
"""
import logging

from gateway_admin.config import settings
from gateway_admin.db.database import engine
from gateway_admin.db.init_db import ensure_sqlite_directory, reset_database

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    print(f"Resetting selector tables in {settings.DATABASE_URL}")
    ensure_sqlite_directory(settings.DATABASE_URL)
    reset_database(engine)
    print("Done.")
