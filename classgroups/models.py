from pydantic import BaseModel, Field
from typing import List, Dict, Optional

# --- Request models ---

class ConflictPair(BaseModel):
    student_id_1: str
    student_id_2: str

class PartitionParams(BaseModel):
    seed: Optional[int] = None

class RosterRequest(BaseModel):
    roster: List[str]
    attendance: Dict[str, bool] = Field(default_factory=dict)  # missing = present
    conflicts: List[ConflictPair] = Field(default_factory=list)
    params: Optional[PartitionParams] = None

class GroupsRequest(RosterRequest):
    # exactly one of the two
    group_count: Optional[int] = Field(default=None, ge=1)
    group_size: Optional[int] = Field(default=None, ge=1)

class Classroom(BaseModel):
    columns: int = Field(ge=1)
    desks_per_column: List[int]

class SeatingRequest(RosterRequest):
    classroom: Classroom
    mode: str = "pairs"  # "single" | "pairs"

class PickRequest(BaseModel):
    candidates: List[str]
    count: int = 1
    exclude: List[str] = Field(default_factory=list)
    seed: Optional[int] = None

# --- Response models ---

class GroupOut(BaseModel):
    id: int
    name: str
    student_ids: List[str]

class SeatOut(BaseModel):
    index: int
    student_ids: List[str]

class DeskOut(BaseModel):
    column: int
    position: int
    student_ids: List[str]

class PartitionResponse(BaseModel):
    has_unavoidable_violation: bool
    violations: int
    min_units_hint: int
    time_seconds: float

class GroupsResponse(PartitionResponse):
    groups: List[GroupOut]

class PairsResponse(PartitionResponse):
    seats: List[SeatOut]

class SeatingResponse(PartitionResponse):
    desks: List[DeskOut]

class PickResponse(BaseModel):
    picked: List[str]
