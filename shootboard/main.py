# Rev 0.1.0

# shootboard/main.py  (Rev 0.1.0)
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QCoreApplication

from shootboard.app_context import AppContext
from shootboard.utils.logging_setup import get_logger, setup_logging


def parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="shootboard", description="Load the shootboard store and print the dashboard")
    p.add_argument("--db", type=Path, default=None, help="Path to SQLite DB (default: settings or XDG data dir)")
    return p.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    ns = parse_args(sys.argv[1:] if argv is None else argv)
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    QCoreApplication.setApplicationName("shootboard")

    logfile = setup_logging("shootboard")
    print(f"[logging] Writing to: {logfile}")

    # --- DI wiring ---
    ctx = AppContext.create(ns.db)
    try:
        if not ctx.start():
            get_logger("main").error("initial load failed")
            return 1
        for creator, projects in ctx.projects.groups():
            print(f"{creator['name']}: {', '.join(p['client'] for p in projects)}")
        app.processEvents()
        return 0
    finally:
        ctx.close()


if __name__ == "__main__":
    sys.exit(main())
