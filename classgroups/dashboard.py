import os
import time
import streamlit as st
import requests
import pandas as pd
import plotly.graph_objects as go

from classgroups.solver.reveal import reveal_frames, REVEAL_STEP_SECONDS
from classgroups.solver.units import Group, Seat

# API address
API_URL = os.getenv("API_URL", "http://127.0.0.1:8000")

st.set_page_config(page_title="Class Groups", layout="wide")

st.title("🎓 Class Groups")
st.markdown("Groups, pairs and desk seating that keep **conflicting** students apart.")


# --- 1. INPUT PARSING ---
def parse_roster(text):
    return [line.strip() for line in text.splitlines() if line.strip()]

def parse_conflicts(text):
    pairs = []
    for line in text.splitlines():
        parts = [p.strip() for p in line.split(",")]
        if len(parts) == 2 and all(parts):
            pairs.append({"student_id_1": parts[0], "student_id_2": parts[1]})
    return pairs


# --- 2. DESK GRID ---
def draw_desks(desks):
    fig = go.Figure()
    spacing_x, spacing_y = 3, 2
    for desk in desks:
        x, y = desk["column"] * spacing_x, -desk["position"] * spacing_y
        occupied = bool(desk["student_ids"])
        fig.add_shape(type="rect", x0=x - 1.2, y0=y - 0.6, x1=x + 1.2, y1=y + 0.6,
                      fillcolor="lightblue" if occupied else "white", line_color="gray")
        fig.add_annotation(x=x, y=y, text="<br>".join(desk["student_ids"]) or "—", showarrow=False)
    fig.update_layout(height=600, plot_bgcolor="white", xaxis=dict(visible=False), yaxis=dict(visible=False))
    return fig


# --- 3. REVEAL REPLAY ---
def replay(units, labels):
    placeholder = st.empty()
    for frame in reveal_frames(units):
        table = pd.DataFrame({label: pd.Series(members, dtype=object) for label, members in zip(labels, frame)})
        placeholder.dataframe(table.fillna(""), use_container_width=True)
        time.sleep(REVEAL_STEP_SECONDS)


def report(res, unit_word):
    c1, c2, c3 = st.columns(3)
    c1.metric("Conflicts placed together", res["violations"])
    c2.metric(f"Min. {unit_word} to avoid conflicts", res["min_units_hint"])
    c3.metric("Time", f"{res['time_seconds']:.3f}s")
    if res["has_unavoidable_violation"]:
        st.warning(f"Not every conflict could be avoided. Try more {unit_word}.")


def post(path, payload):
    response = requests.post(f"{API_URL}{path}", json=payload)
    body = response.json()
    if response.status_code != 200:
        raise RuntimeError(body.get("detail", response.text))
    return body


# --- SIDEBAR ---
with st.sidebar:
    st.header("🎛️ Class")
    roster_text = st.text_area("Present students (one per line)", "Alice\nBob\nCarol\nDan\nEve")
    conflicts_text = st.text_area("Conflicts (a, b per line)", "Alice, Bob")
    seed = st.number_input("Seed (0 = random)", 0, 10_000, 0)
    animate = st.checkbox("Animate reveal", value=True)

roster = parse_roster(roster_text)
base = {
    "roster": roster,
    "conflicts": parse_conflicts(conflicts_text),
    "params": {"seed": int(seed) if seed else None},
}

tab_groups, tab_pairs, tab_seating, tab_pick = st.tabs(["👥 Groups", "🪑 Pairs", "🏫 Seating", "🎲 Pick"])

with tab_groups:
    by = st.radio("Divide by", ["Group count", "Group size"], horizontal=True)
    value = st.number_input("Value", 1, 50, 3)
    if st.button("Divide"):
        key = "group_count" if by == "Group count" else "group_size"
        try:
            res = post("/groups", {**base, key: int(value)})
            groups = [Group(**g) for g in res["groups"]]
            if animate:
                replay(groups, [g.name for g in groups])
            else:
                st.dataframe(pd.DataFrame([{"Group": g.name, "Students": ", ".join(g.student_ids)} for g in groups]))
            report(res, "groups")
        except Exception as e:
            st.error(str(e))

with tab_pairs:
    if st.button("Make pairs"):
        try:
            res = post("/pairs", base)
            seats = [Seat(**s) for s in res["seats"]]
            if animate:
                replay(seats, [f"Seat {s.index + 1}" for s in seats])
            else:
                st.dataframe(pd.DataFrame([{"Seat": s.index + 1, "Students": ", ".join(s.student_ids)} for s in seats]))
            report(res, "seats")
        except Exception as e:
            st.error(str(e))

with tab_seating:
    columns = st.number_input("Columns", 1, 10, 3)
    desks_per_column = [
        st.number_input(f"Desks in column {c + 1}", 0, 20, 4, key=f"desks_{c}") for c in range(int(columns))
    ]
    mode = st.radio("Mode", ["pairs", "single"], horizontal=True)
    if st.button("Seat class"):
        try:
            res = post("/seating", {**base, "classroom": {"columns": int(columns), "desks_per_column": [int(d) for d in desks_per_column]}, "mode": mode})
            st.plotly_chart(draw_desks(res["desks"]), use_container_width=True)
            report(res, "desks")
        except Exception as e:
            st.error(str(e))

with tab_pick:
    if "picked" not in st.session_state:
        st.session_state["picked"] = []
    count = st.radio("How many", [1, 2], horizontal=True)
    remove_after_pick = st.checkbox("Skip already picked", value=True)
    if st.button("Pick"):
        try:
            exclude = st.session_state["picked"] if remove_after_pick else []
            res = post("/pick", {"candidates": roster, "count": count, "exclude": exclude, "seed": base["params"]["seed"]})
            st.session_state["picked"] = exclude + res["picked"]
            st.success("Picked: " + ", ".join(res["picked"]))
        except Exception as e:
            st.error(str(e))
    if st.session_state["picked"]:
        st.write("Already picked: " + ", ".join(st.session_state["picked"]))
        if st.button("Reset picks"):
            st.session_state["picked"] = []
