from typing import Iterable, List, Sequence

from classgroups.solver.randomness import RandomSource

MAX_PICK = 2


def pick_students(
    candidates: Sequence[str],
    count: int,
    rng: RandomSource,
    exclude: Iterable[str] = ()
) -> List[str]:
    """Pick one or two distinct students, skipping those already picked."""
    if count < 1 or count > MAX_PICK:
        raise ValueError(f"Can pick 1 to {MAX_PICK} students, got {count}")
    excluded = set(exclude)
    available = [s for s in candidates if s not in excluded]
    if len(available) < count:
        raise ValueError(f"Only {len(available)} students available, need {count}")
    return rng.sample(available, count)
