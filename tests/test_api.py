"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from classgroups.api import app

client = TestClient(app)

ROSTER = ["A", "B", "C", "D", "E"]


def test_health_check():
    assert client.get("/").json()["status"] == "ok"


def test_groups_by_count():
    payload = {
        "roster": ROSTER,
        "conflicts": [{"student_id_1": "A", "student_id_2": "B"}],
        "group_count": 2,
        "params": {"seed": 3},
    }
    res = client.post("/groups", json=payload)
    assert res.status_code == 200
    body = res.json()
    assert len(body["groups"]) == 2
    assert sorted(s for g in body["groups"] for s in g["student_ids"]) == ROSTER
    assert body["has_unavoidable_violation"] is False

    again = client.post("/groups", json=payload).json()
    assert again["groups"] == body["groups"]


def test_groups_by_size_skips_absent():
    payload = {"roster": ROSTER, "attendance": {"E": False}, "group_size": 2}
    body = client.post("/groups", json=payload).json()
    assert len(body["groups"]) == 2
    assert "E" not in [s for g in body["groups"] for s in g["student_ids"]]


@pytest.mark.parametrize("extra", [{}, {"group_count": 2, "group_size": 2}])
def test_groups_needs_exactly_one_mode(extra):
    res = client.post("/groups", json={"roster": ROSTER, **extra})
    assert res.status_code == 400


def test_self_conflict_is_rejected():
    payload = {
        "roster": ROSTER,
        "conflicts": [{"student_id_1": "A", "student_id_2": "A"}],
        "group_count": 2,
    }
    assert client.post("/groups", json=payload).status_code == 400


def test_no_present_students():
    payload = {"roster": ["A"], "attendance": {"A": False}, "group_count": 2}
    res = client.post("/groups", json=payload)
    assert res.status_code == 400


def test_pairs():
    body = client.post("/pairs", json={"roster": ROSTER}).json()
    assert sorted(len(s["student_ids"]) for s in body["seats"]) == [1, 2, 2]


def test_seating():
    payload = {
        "roster": ROSTER,
        "classroom": {"columns": 2, "desks_per_column": [2, 1]},
        "mode": "pairs",
        "conflicts": [{"student_id_1": "A", "student_id_2": "B"}],
    }
    body = client.post("/seating", json=payload).json()
    assert len(body["desks"]) == 3
    assert sorted(s for d in body["desks"] for s in d["student_ids"]) == ROSTER


def test_seating_over_capacity():
    payload = {"roster": ROSTER, "classroom": {"columns": 2, "desks_per_column": [2, 1]}, "mode": "single"}
    assert client.post("/seating", json=payload).status_code == 400


def test_seating_column_mismatch():
    payload = {"roster": ROSTER, "classroom": {"columns": 3, "desks_per_column": [2, 1]}}
    assert client.post("/seating", json=payload).status_code == 400


def test_pick():
    body = client.post("/pick", json={"candidates": ROSTER, "count": 2, "exclude": ["A"], "seed": 1}).json()
    assert len(set(body["picked"])) == 2
    assert "A" not in body["picked"]
    assert client.post("/pick", json={"candidates": ["A"], "count": 2}).status_code == 400
