import math
from typing import List, Sequence

from classgroups.solver.conflicts import ConflictRelation
from classgroups.solver.engine import partition
from classgroups.solver.randomness import RandomSource
from classgroups.solver.units import Seat, SEAT_CAPACITY


def seat_count(roster_size: int) -> int:
    return math.ceil(roster_size / SEAT_CAPACITY)


def build_pairs(
    roster: Sequence[str],
    conflicts: ConflictRelation,
    rng: RandomSource
) -> List[Seat]:
    """
    Two-per-seat partition over ceil(n / 2) seats.
    Without conflicts balance alone keeps seats at one or two students;
    the capacity cap holds that when conflicts skew the greedy walk.
    """
    groups = partition(roster, seat_count(len(roster)), conflicts, rng, capacity=SEAT_CAPACITY)
    return [Seat(index=i, student_ids=g.student_ids) for i, g in enumerate(groups)]
