# tests/test_logging_setup.py
from __future__ import annotations

import logging
import sys

import pytest

from shootboard import main as app_main
from shootboard.tools import migrate
from shootboard.utils import logging_setup


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    handlers, level, hook = list(root.handlers), root.level, sys.excepthook
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    sys.excepthook = hook
    logging_setup._configured_file = None
    logging_setup.qInstallMessageHandler(None)


def test_setup_logging_writes_rotating_file(restore_logging):
    logfile = logging_setup.setup_logging("shootboard-test")
    assert logfile.name == "shootboard-test.log"
    assert logging_setup.setup_logging("shootboard-test") == logfile

    logging_setup.get_logger("tests").warning("hello from tests")
    for h in logging.getLogger().handlers:
        h.flush()
    text = logfile.read_text(encoding="utf-8")
    assert "| WARNING | shootboard.tests | hello from tests" in text


def test_cli_main_runs_status(restore_logging, tmp_path, capsys):
    assert migrate.main(["status", "--db", str(tmp_path / "cli.db")]) == 0
    assert "Pending count: 1" in capsys.readouterr().out


def test_app_main_configures_logging_and_prints_dashboard(restore_logging, tmp_path, capsys):
    db = str(tmp_path / "app.db")
    assert migrate.main(["up", "--seed", "--db", db]) == 0
    capsys.readouterr()

    assert app_main.main(["--db", db]) == 0
    out = capsys.readouterr().out
    assert "[logging] Writing to:" in out
    assert "Ken: Demo Cafe" in out
    assert logging_setup._configured_file is not None
