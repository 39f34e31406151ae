"""Tests for the unordered conflict-pair relation."""

import pytest

from classgroups.solver.conflicts import ConflictRelation, ConflictValidationError


def test_add_is_idempotent_for_both_orders():
    relation = ConflictRelation()
    relation.add("A", "B")
    relation.add("A", "B")
    relation.add("B", "A")
    assert len(relation) == 1
    assert relation.contains("A", "B")
    assert relation.contains("B", "A")


def test_self_pair_is_rejected():
    relation = ConflictRelation()
    with pytest.raises(ConflictValidationError):
        relation.add("A", "A")
    assert len(relation) == 0


def test_self_pair_is_a_value_error():
    with pytest.raises(ValueError):
        ConflictRelation.from_pairs([("A", "B"), ("C", "C")])


def test_remove_either_order_and_missing_pair():
    relation = ConflictRelation.from_pairs([("A", "B"), ("B", "C")])
    relation.remove("B", "A")
    relation.remove("X", "Y")
    assert not relation.contains("A", "B")
    assert relation.contains("C", "B")
    assert len(relation) == 1


def test_contains_unknown_students():
    relation = ConflictRelation.from_pairs([("A", "B")])
    assert not relation.contains("A", "Z")
    assert not relation.contains("Y", "Z")
    assert not relation.contains("A", "A")


def test_pairs_of():
    relation = ConflictRelation.from_pairs([("A", "B"), ("C", "A")])
    assert sorted(relation.pairs_of("A")) == ["B", "C"]
    assert relation.pairs_of("Z") == []


def test_snapshot_is_read_only_and_isolated():
    relation = ConflictRelation.from_pairs([("A", "B")])
    snapshot = relation.snapshot()
    assert snapshot.frozen
    assert not relation.frozen

    with pytest.raises(ConflictValidationError):
        snapshot.add("C", "D")
    with pytest.raises(ConflictValidationError):
        snapshot.remove("A", "B")

    relation.add("C", "D")
    relation.remove("A", "B")
    assert snapshot.contains("A", "B")
    assert not snapshot.contains("C", "D")
