#!/usr/bin/env python3
"""
Maintenance commands for the pets SQLite database.

Every command goes through the pets content provider, so inserts are
validated exactly as they are for the API.

Usage:
    python pets_admin.py --db ./pets.db init
    python pets_admin.py --db ./pets.db list
    python pets_admin.py --db ./pets.db insert-dummy
    python pets_admin.py --db ./pets.db delete-all

If --db is omitted, the DATABASE_URL setting is used.
"""

import argparse
import os
import sys

from pets_api.app.core import contract
from pets_api.app.core.config import settings
from pets_api.app.core.db import init_db
from pets_api.app.core.errors import Failure
from pets_api.app.services import catalog_service
from pets_api.app.services.pet_provider import PetProvider


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Manage the pets database (SQLite).")
    ap.add_argument("--db", help="Path to SQLite DB file (defaults to DATABASE_URL)")
    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("init", help="Create the database and apply migrations")
    sub.add_parser("list", help="Print id, name and breed of every pet")
    sub.add_parser("insert-dummy", help="Insert the sample pet Toto")
    sub.add_parser("delete-all", help="Delete every pet")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.db:
        settings.database_url = os.path.abspath(args.db)

    init_db()
    if args.command == "init":
        print("[+] Database ready")
        return 0

    provider = PetProvider()
    if args.command == "list":
        result = catalog_service.list_catalog(provider)
    elif args.command == "insert-dummy":
        result = catalog_service.insert_dummy_pet(provider)
    else:
        result = catalog_service.delete_all_pets(provider)

    if isinstance(result, Failure):
        print(f"[!] {result.message}", file=sys.stderr)
        return 1

    if args.command == "list":
        for row in result:
            breed = row[contract.COLUMN_PET_BREED] or ""
            print(f"{row[contract.COLUMN_ID]}\t{row[contract.COLUMN_PET_NAME]}\t{breed}")
    elif args.command == "insert-dummy":
        print(f"[+] Inserted {result}")
    else:
        print(f"[+] Deleted {result} pet(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
