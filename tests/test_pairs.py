"""Tests for two-per-seat allocation."""

import pytest

from classgroups.solver.auditor import has_unavoidable_violation
from classgroups.solver.conflicts import ConflictRelation
from classgroups.solver.pairs import build_pairs, seat_count
from classgroups.solver.randomness import FixedRandomSource, SystemRandomSource
from classgroups.solver.units import Seat


def test_five_students_make_three_seats():
    for seed in range(10):
        seats = build_pairs(["A", "B", "C", "D", "E"], ConflictRelation(), SystemRandomSource(seed))
        assert len(seats) == 3
        assert sorted(len(s.student_ids) for s in seats) == [1, 2, 2]
        assert [s.index for s in seats] == [0, 1, 2]


def test_seats_hold_one_or_two():
    roster = [f"S{i}" for i in range(17)]
    conflicts = ConflictRelation.from_pairs([("S0", "S1"), ("S1", "S2"), ("S3", "S4")])
    for seed in range(20):
        seats = build_pairs(roster, conflicts, SystemRandomSource(seed))
        assert all(1 <= len(s.student_ids) <= 2 for s in seats)
        assert sorted(x for s in seats for x in s.student_ids) == sorted(roster)


def test_pair_conflict_avoided():
    conflicts = ConflictRelation.from_pairs([("A", "D")])
    seats = build_pairs(["A", "B", "C", "D", "E"], conflicts, FixedRandomSource())
    assert [s.student_ids for s in seats] == [["A", "E"], ["B", "D"], ["C"]]
    assert not has_unavoidable_violation(seats, conflicts)


def test_seat_count():
    assert seat_count(0) == 0
    assert seat_count(1) == 1
    assert seat_count(6) == 3
    assert seat_count(7) == 4


def test_seat_rejects_three_students():
    with pytest.raises(ValueError):
        Seat(index=0, student_ids=["A", "B", "C"])


def test_seat_never_exceeds_two_when_conflicts_skew_order():
    conflicts = ConflictRelation.from_pairs([("A", "B")])
    seats = build_pairs(["A", "B", "C", "D"], conflicts, FixedRandomSource(order=["C", "A", "D", "B"]))
    assert [len(s.student_ids) for s in seats] == [2, 2]
