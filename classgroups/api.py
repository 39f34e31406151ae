import os
import traceback
from fastapi import FastAPI, HTTPException

from classgroups.models import (
    GroupsRequest, GroupsResponse, PairsResponse, PickRequest, PickResponse,
    RosterRequest, SeatingRequest, SeatingResponse
)
from classgroups.solver import core
from classgroups.solver.conflicts import ConflictRelation
from classgroups.solver.picker import pick_students
from classgroups.solver.randomness import SystemRandomSource

app = FastAPI(title="Class Groups API")


def _env_seed():
    value = os.getenv("CLASSGROUPS_SEED")
    return int(value) if value else None


def random_source(seed=None) -> SystemRandomSource:
    return SystemRandomSource(seed if seed is not None else _env_seed())


def build_conflicts(request: RosterRequest) -> ConflictRelation:
    return ConflictRelation.from_pairs(
        (c.student_id_1, c.student_id_2) for c in request.conflicts
    )


def _seed_of(request: RosterRequest):
    return request.params.seed if request.params else None


def _rename_units(result, key):
    result[key] = result.pop("units")
    return result


def _run(func, *args):
    try:
        return func(*args)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        traceback.print_exc()
        raise HTTPException(status_code=500, detail=f"Internal Server Error: {str(e)}")


@app.get("/")
def health_check():
    return {"status": "ok", "message": "Class Groups API is running"}


@app.post("/groups", response_model=GroupsResponse)
def groups_endpoint(request: GroupsRequest):
    def divide():
        if (request.group_count is None) == (request.group_size is None):
            raise ValueError("Provide exactly one of group_count or group_size")
        roster = core.present_roster(request.roster, request.attendance)
        conflicts = build_conflicts(request)
        rng = random_source(_seed_of(request))
        if request.group_count is not None:
            result = core.divide_by_group_count(roster, request.group_count, conflicts, rng)
        else:
            result = core.divide_by_group_size(roster, request.group_size, conflicts, rng)
        return _rename_units(result, "groups")

    return _run(divide)


@app.post("/pairs", response_model=PairsResponse)
def pairs_endpoint(request: RosterRequest):
    def pair():
        roster = core.present_roster(request.roster, request.attendance)
        result = core.divide_into_pairs(roster, build_conflicts(request), random_source(_seed_of(request)))
        return _rename_units(result, "seats")

    return _run(pair)


@app.post("/seating", response_model=SeatingResponse)
def seating_endpoint(request: SeatingRequest):
    def seat():
        classroom = request.classroom
        if len(classroom.desks_per_column) != classroom.columns:
            raise ValueError("desks_per_column must list one count per column")
        roster = core.present_roster(request.roster, request.attendance)
        result = core.arrange_desks(
            roster, classroom.desks_per_column, request.mode,
            build_conflicts(request), random_source(_seed_of(request))
        )
        return _rename_units(result, "desks")

    return _run(seat)


@app.post("/pick", response_model=PickResponse)
def pick_endpoint(request: PickRequest):
    def pick():
        picked = pick_students(request.candidates, request.count, random_source(request.seed), request.exclude)
        return {"picked": picked}

    return _run(pick)
