# tests/test_referential_guard.py
from __future__ import annotations

import pytest

from shootboard.services.referential_guard import can_delete

PROJECTS = [
    {"id": "p1", "client": "Cafe Aoi", "director": "Aoi", "assigned_creator": "Ken"},
    {"id": "p2", "client": "Bakery", "director": "Mio", "assigned_creator": "Ken"},
    {"id": "p3", "client": "Gym", "director": "Aoi", "assigned_creator": ""},
]


@pytest.mark.parametrize(
    "kind,name,blocking_ids",
    [
        ("directors", "Aoi", ["p1", "p3"]),
        ("directors", "Mio", ["p2"]),
        ("directors", "Ken", []),       # Ken is only ever a creator
        ("creators", "Ken", ["p1", "p2"]),
        ("creators", "Aoi", []),
        ("creators", "Nobody", []),
    ],
)
def test_blocks_iff_name_is_referenced(kind, name, blocking_ids):
    res = can_delete({"id": "x", "name": name}, kind, PROJECTS)
    assert [p["id"] for p in res.blocking] == blocking_ids
    assert res.ok is (not blocking_ids)
    assert (res.message is None) is res.ok


def test_message_lists_blocking_clients():
    res = can_delete({"id": "d1", "name": "Aoi"}, "directors", PROJECTS)
    assert res.message == "Aoiさんは案件（Cafe Aoi、Gym）にアサインされているため削除できません。"


def test_empty_project_set_never_blocks():
    assert can_delete({"id": "c1", "name": "Ken"}, "creators", []).ok
