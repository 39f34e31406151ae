from dataclasses import dataclass, field
from typing import List, Sequence

from classgroups.solver.conflicts import ConflictRelation
from classgroups.solver.pairs import build_pairs
from classgroups.solver.randomness import RandomSource
from classgroups.solver.units import SEAT_CAPACITY

SEATING_MODES = ("single", "pairs")


class SeatingCapacityError(ValueError):
    pass


@dataclass
class Desk:
    column: int
    position: int
    student_ids: List[str] = field(default_factory=list)


def build_desks(desks_per_column: Sequence[int]) -> List[Desk]:
    """Empty desks in fill order: front row first, left to right."""
    if any(count < 0 for count in desks_per_column):
        raise ValueError("Desk counts cannot be negative")
    rows = max(desks_per_column, default=0)
    desks = []
    for position in range(rows):
        for column, count in enumerate(desks_per_column):
            if position < count:
                desks.append(Desk(column=column, position=position))
    return desks


def arrange_desks(
    roster: Sequence[str],
    desks_per_column: Sequence[int],
    mode: str,
    conflicts: ConflictRelation,
    rng: RandomSource
) -> List[Desk]:
    if mode not in SEATING_MODES:
        raise ValueError(f"Unknown seating mode: {mode}")

    desks = build_desks(desks_per_column)
    per_desk = 1 if mode == "single" else SEAT_CAPACITY
    capacity = len(desks) * per_desk
    if len(roster) > capacity:
        raise SeatingCapacityError(
            f"Too many students: {len(roster)}, seats available: {capacity} "
            f"({len(desks)} desks x {per_desk})"
        )

    if mode == "single":
        occupants = [[s] for s in rng.shuffle(roster)]
    else:
        occupants = [seat.student_ids for seat in build_pairs(roster, conflicts, rng)]

    for desk, students in zip(desks, occupants):
        desk.student_ids = list(students)
    return desks
