# File: shootboard/tools/migrate.py
# Usage examples:
#   python -m shootboard.tools.migrate up
#   python -m shootboard.tools.migrate up --seed
#   python -m shootboard.tools.migrate status --db /path/to/shootboard.db
#
# Notes:
# - DB path defaults to env SHOOTBOARD_DB or $XDG_DATA_HOME/shootboard/shootboard.db
# - Applies shootboard/data/migrations/*.sql in lexicographic order
# - --seed inserts a small demo roster through the gateway (only into an empty DB)

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from shootboard.repositories.db import Database
from shootboard.repositories.sqlite_gateway import SQLiteGateway
from shootboard.services import field_rules
from shootboard.utils.logging_setup import setup_logging
from shootboard.utils.paths import DB_PATH, MIGRATIONS_DIR

log = logging.getLogger(__name__)

DEMO_DIRECTORS = [{"name": "Aoi", "email": "aoi@example.com", "note": ""}]
DEMO_CREATORS = [{"name": "Ken", "email": "ken@example.com", "note": "編集担当"}]
DEMO_PROJECT = {
    "client": "Demo Cafe",
    "director": "Aoi",
    "assigned_creator": "Ken",
    "contract_month": "2024-04",
    "start_month": "2024-05",
    "expiry_month": "2025-04",
    "memo": "",
}
DEMO_TASKS = [
    ("PRE_SHOOT", "ヒアリングシート回収", ""),
    ("OP_EXEC", "店舗紹介ショート", "1"),
    ("OP_PREP", "ロケ地の撮影許可", ""),
]


def seed(gateway: SQLiteGateway) -> bool:
    existing = gateway.list("projects")
    if not existing.ok:
        raise RuntimeError(existing.error)
    if existing.data:
        return False
    for rec in DEMO_DIRECTORS:
        gateway.insert("directors", rec)
    for rec in DEMO_CREATORS:
        gateway.insert("creators", rec)
    project = gateway.insert("projects", DEMO_PROJECT).data[0]
    for category, title, label in DEMO_TASKS:
        gateway.insert("tasks", field_rules.new_task_record(project, category, title, label))
    log.info("Seeded demo project %s", project["id"])
    return True


def cmd_status(db: Path, migrations_dir: Path) -> int:
    database = Database(db)
    try:
        applied = database.applied()
        pending = database.pending(migrations_dir)
        print(f"DB: {db}")
        print(f"Migrations dir: {migrations_dir}")
        print(f"Applied count: {len(applied)}")
        for name, when in applied.items():
            print(f"  ✔ {name}  ({when})")
        print(f"Pending count: {len(pending)}")
        for name in pending:
            print(f"  ⧗ {name}")
        return 0
    finally:
        database.close()


def cmd_up(db: Path, migrations_dir: Path, with_seed: bool) -> int:
    database = Database(db)
    try:
        applied = database.run_migrations(migrations_dir)
        if applied:
            print(f"✓ Applied: {', '.join(applied)}")
        else:
            print("✓ No changes. Database already up to date.")
        if with_seed:
            if seed(SQLiteGateway(database)):
                print("✓ Seeded demo data.")
            else:
                print("ℹ️  Seed skipped: database already has projects.")
        return 0
    finally:
        database.close()


def parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="shootboard-migrate", description="SQLite migration runner for shootboard")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp: argparse.ArgumentParser):
        sp.add_argument("--db", type=Path, default=DB_PATH, help=f"Path to SQLite DB (default: {DB_PATH})")
        sp.add_argument("--migrations-dir", type=Path, default=MIGRATIONS_DIR, help=f"Migrations directory (default: {MIGRATIONS_DIR})")

    s_up = sub.add_parser("up", help="Run pending migrations")
    add_common(s_up)
    s_up.add_argument("--seed", action="store_true", help="Seed demo data after applying")

    s_status = sub.add_parser("status", help="Show applied and pending migrations")
    add_common(s_status)

    return p.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    ns = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging()
    if ns.cmd == "status":
        return cmd_status(ns.db, ns.migrations_dir)
    if ns.cmd == "up":
        return cmd_up(ns.db, ns.migrations_dir, ns.seed)
    raise SystemExit(1)


if __name__ == "__main__":
    raise SystemExit(main())
