from dataclasses import dataclass, field
from typing import List, Union

SEAT_CAPACITY = 2
GROUP_NAME_TEMPLATE = "Group {id}"


@dataclass
class Group:
    id: int
    name: str = ""
    student_ids: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.name:
            self.name = GROUP_NAME_TEMPLATE.format(id=self.id)


@dataclass
class Seat:
    index: int
    student_ids: List[str] = field(default_factory=list)

    def __post_init__(self):
        if len(self.student_ids) > SEAT_CAPACITY:
            raise ValueError(
                f"Seat {self.index} holds {len(self.student_ids)} students, max is {SEAT_CAPACITY}"
            )


Unit = Union[Group, Seat]
