import time
from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from classgroups.solver.auditor import find_violations, has_unavoidable_violation, min_units_hint
from classgroups.solver.conflicts import ConflictRelation
from classgroups.solver.desks import arrange_desks as place_on_desks
from classgroups.solver.engine import partition, unit_count_for_size
from classgroups.solver.pairs import build_pairs
from classgroups.solver.randomness import RandomSource, SystemRandomSource


class EmptyRosterError(ValueError):
    pass


def present_roster(roster: Iterable[str], attendance: Optional[Mapping[str, bool]] = None) -> List[str]:
    """Students marked present; anyone missing from `attendance` counts as present."""
    attendance = attendance or {}
    seen = set()
    present = []
    for student in roster:
        if student in seen or not attendance.get(student, True):
            continue
        seen.add(student)
        present.append(student)
    return present


def _prepare(roster: Sequence[str], conflicts: ConflictRelation, rng: Optional[RandomSource]):
    if not roster:
        raise EmptyRosterError("No present students to distribute")
    return conflicts.snapshot(), rng or SystemRandomSource()


def _result(units: List[Any], roster: Sequence[str], conflicts: ConflictRelation,
            start_time: float) -> Dict[str, Any]:
    violations = find_violations(units, conflicts)
    return {
        "units": [asdict(u) for u in units],
        "has_unavoidable_violation": has_unavoidable_violation(units, conflicts),
        "violations": len(violations),
        "min_units_hint": min_units_hint(roster, conflicts),
        "time_seconds": time.time() - start_time,
    }


def divide_by_group_count(
    roster: Sequence[str],
    group_count: int,
    conflicts: ConflictRelation,
    rng: Optional[RandomSource] = None
) -> Dict[str, Any]:
    start_time = time.time()
    snapshot, rng = _prepare(roster, conflicts, rng)
    print(f"Dividing {len(roster)} students into {group_count} groups ({len(snapshot)} conflicts)")
    groups = partition(roster, group_count, snapshot, rng)
    return _result(groups, roster, snapshot, start_time)


def divide_by_group_size(
    roster: Sequence[str],
    group_size: int,
    conflicts: ConflictRelation,
    rng: Optional[RandomSource] = None
) -> Dict[str, Any]:
    group_count = unit_count_for_size(len(roster), group_size)
    return divide_by_group_count(roster, group_count, conflicts, rng)


def divide_into_pairs(
    roster: Sequence[str],
    conflicts: ConflictRelation,
    rng: Optional[RandomSource] = None
) -> Dict[str, Any]:
    start_time = time.time()
    snapshot, rng = _prepare(roster, conflicts, rng)
    print(f"Pairing {len(roster)} students ({len(snapshot)} conflicts)")
    seats = build_pairs(roster, snapshot, rng)
    return _result(seats, roster, snapshot, start_time)


def arrange_desks(
    roster: Sequence[str],
    desks_per_column: Sequence[int],
    mode: str,
    conflicts: ConflictRelation,
    rng: Optional[RandomSource] = None
) -> Dict[str, Any]:
    start_time = time.time()
    snapshot, rng = _prepare(roster, conflicts, rng)
    # Single desks never hold two students, so conflicts do not apply
    if mode == "single":
        snapshot = ConflictRelation().snapshot()
    print(f"Seating {len(roster)} students at {sum(desks_per_column)} desks, mode={mode}")
    desks = place_on_desks(roster, desks_per_column, mode, snapshot, rng)
    return _result(desks, roster, snapshot, start_time)

