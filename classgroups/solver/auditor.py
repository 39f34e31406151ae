import networkx as nx
from itertools import combinations
from typing import Iterable, Iterator, List, Sequence, Tuple

from classgroups.solver.conflicts import ConflictRelation
from classgroups.solver.units import Unit


def _conflicting_pairs(unit: Unit, conflicts: ConflictRelation) -> Iterator[Tuple[str, str]]:
    for a, b in combinations(unit.student_ids, 2):
        if conflicts.contains(a, b):
            yield a, b


def has_unavoidable_violation(units: Iterable[Unit], conflicts: ConflictRelation) -> bool:
    for unit in units:
        for _ in _conflicting_pairs(unit, conflicts):
            return True
    return False


def find_violations(units: Iterable[Unit], conflicts: ConflictRelation) -> List[Tuple[str, str]]:
    violations = []
    for unit in units:
        violations.extend(_conflicting_pairs(unit, conflicts))
    return violations


def size_spread(units: Sequence[Unit]) -> int:
    """Largest minus smallest unit size."""
    if not units:
        return 0
    sizes = [len(u.student_ids) for u in units]
    return max(sizes) - min(sizes)


def min_units_hint(roster: Sequence[str], conflicts: ConflictRelation) -> int:
    """
    Size of the largest group of students who all conflict with each other.
    Any partition into fewer units than this must co-locate a conflict.
    """
    if not roster:
        return 0
    present = conflicts.graph.subgraph(roster)
    if present.number_of_edges() == 0:
        return 1
    return max(len(clique) for clique in nx.find_cliques(present))
