import math
from typing import List, Optional, Sequence

from classgroups.solver.conflicts import ConflictRelation
from classgroups.solver.randomness import RandomSource
from classgroups.solver.units import Group


def clamp_unit_count(unit_count: int, roster_size: int) -> int:
    if roster_size == 0:
        return 0
    return max(1, min(unit_count, roster_size))


def unit_count_for_size(roster_size: int, unit_size: int) -> int:
    if unit_size < 1:
        raise ValueError("Group size must be at least 1")
    return max(1, math.ceil(roster_size / unit_size))


def _conflicts_with_unit(student: str, unit: Group, conflicts: ConflictRelation) -> bool:
    return any(conflicts.contains(student, member) for member in unit.student_ids)


def _smallest(units: List[Group]) -> Group:
    # min() keeps the first of equally small units
    return min(units, key=lambda u: len(u.student_ids))


def partition(
    roster: Sequence[str],
    unit_count: int,
    conflicts: ConflictRelation,
    rng: RandomSource,
    capacity: Optional[int] = None
) -> List[Group]:
    """
    Balanced greedy assignment of a roster into `unit_count` groups.

    Students are visited in shuffled order. Each goes to the smallest group
    holding none of its conflicts; when every group holds one, it goes to
    the smallest group overall. No backtracking, so a conflict-free
    partition may exist that this walk does not find.

    `capacity` caps every group; groups that are full are skipped in both
    steps. The caller must ask for enough groups to hold the roster.
    """
    count = clamp_unit_count(unit_count, len(roster))
    units = [Group(id=i + 1) for i in range(count)]
    if not units:
        return units
    if capacity is not None and count * capacity < len(roster):
        raise ValueError(f"{count} groups of {capacity} cannot hold {len(roster)} students")

    for student in rng.shuffle(roster):
        open_units = units
        if capacity is not None:
            open_units = [u for u in units if len(u.student_ids) < capacity]
        safe_units = [u for u in open_units if not _conflicts_with_unit(student, u, conflicts)]
        if safe_units:
            target = _smallest(safe_units)
        else:
            # Fallback: unavoidable conflict
            target = _smallest(open_units)
        target.student_ids.append(student)

    return units
