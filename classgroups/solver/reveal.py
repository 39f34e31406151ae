from typing import List, Sequence

from classgroups.solver.units import Unit

REVEAL_STEP_SECONDS = 0.5

Frame = List[List[str]]


def reveal_frames(units: Sequence[Unit]) -> List[Frame]:
    """
    Staged disclosure of a finished partition for display.
    Frame 0 shows every unit empty; each next frame adds one student,
    unit by unit. The last frame equals the partition.
    """
    current: Frame = [[] for _ in units]
    frames = [[list(members) for members in current]]
    for index, unit in enumerate(units):
        for student in unit.student_ids:
            current[index].append(student)
            frames.append([list(members) for members in current])
    return frames
