# tests/test_migrate.py
from __future__ import annotations

from shootboard.repositories.db import Database
from shootboard.repositories.sqlite_gateway import SQLiteGateway
from shootboard.tools import migrate


def test_up_with_seed_then_status(tmp_path, capsys):
    db_path = tmp_path / "cli.db"
    assert migrate.cmd_up(db_path, migrate.MIGRATIONS_DIR, with_seed=True) == 0
    assert "Seeded demo data" in capsys.readouterr().out

    assert migrate.cmd_up(db_path, migrate.MIGRATIONS_DIR, with_seed=True) == 0
    out = capsys.readouterr().out
    assert "already up to date" in out and "Seed skipped" in out

    assert migrate.cmd_status(db_path, migrate.MIGRATIONS_DIR) == 0
    assert "Pending count: 0" in capsys.readouterr().out


def test_seed_builds_consistent_demo_data(db):
    gw = SQLiteGateway(db)
    assert migrate.seed(gw) is True
    project = gw.list("projects").data[0]
    tasks = gw.list("tasks").data
    assert project["director"] == "Aoi" and project["assigned_creator"] == "Ken"
    assert {t["category"] for t in tasks} == {"PRE_SHOOT", "OP_EXEC", "OP_PREP"}
    assert all(t["project_id"] == project["id"] and t["assignee"] == "Aoi" for t in tasks)


def test_parse_args_requires_command():
    ns = migrate.parse_args(["up", "--seed"])
    assert ns.cmd == "up" and ns.seed is True
