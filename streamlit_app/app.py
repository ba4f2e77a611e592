"""Day Planner — Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

from datetime import date

import streamlit as st

from day_planner.engine import PlanRequest, ScheduleGenerator
from day_planner.exceptions import DuplicateTask, InvalidInput
from day_planner.models.enums import (
    DEFAULT_HOURS_AVAILABLE,
    MAX_HOURS_AVAILABLE,
    MIN_HOURS_AVAILABLE,
    Intensity,
    ScheduleWindow,
)
from day_planner.models.profile import get_profile
from day_planner.planner.timestamps import anchor_for_window
from day_planner.serialization import to_plan_json_string
from day_planner.stats import all_work_completed, mark_completed, summarize
from day_planner.tasks import TaskList

from helpers import (
    BREAK_COLOR,
    INTENSITY_LABELS,
    WINDOW_LABELS,
    clear_plan,
    completion_key,
    format_block_range,
    format_duration,
    load_plan,
    minutes_by_task,
    save_plan,
    task_color,
    timeline_frame,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Day Planner",
    page_icon="📅",
    layout="wide",
)


@st.cache_resource
def get_generator() -> ScheduleGenerator:
    return ScheduleGenerator()


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------

if "task_list" not in st.session_state:
    st.session_state["task_list"] = TaskList()
if "schedule" not in st.session_state:
    st.session_state["schedule"] = load_plan()
if "plan_generation" not in st.session_state:
    st.session_state["plan_generation"] = 0

task_list: TaskList = st.session_state["task_list"]


def _set_schedule(schedule, replaced: bool = True) -> None:
    st.session_state["schedule"] = schedule
    # Block ids restart at 0 in every plan, so checkbox keys must not carry over
    if replaced:
        st.session_state["plan_generation"] += 1
    if schedule is None:
        clear_plan()
    else:
        save_plan(schedule)


def _add_task() -> None:
    name = st.session_state.get("new_task", "")
    try:
        task_list.add(name)
    except DuplicateTask:
        st.session_state["task_error"] = "Task already exists!"
        return
    except InvalidInput:
        return
    st.session_state["new_task"] = ""


def _toggle_block(block_id: int) -> None:
    schedule = st.session_state.get("schedule")
    if schedule is None:
        return
    key = completion_key(st.session_state["plan_generation"], block_id)
    done = st.session_state.get(key, False)
    updated = mark_completed(schedule, block_id, done)
    _set_schedule(updated, replaced=False)
    if all_work_completed(updated):
        st.session_state["celebrate"] = True


# ---------------------------------------------------------------------------
# Sidebar: tasks and settings
# ---------------------------------------------------------------------------

st.sidebar.title("Plan Settings")

with st.sidebar.expander("Tasks", expanded=True):
    st.text_input("Add a task", key="new_task", on_change=_add_task)
    error = st.session_state.pop("task_error", None)
    if error:
        st.warning(error)
    if len(task_list) == 0:
        st.caption("No tasks added yet.")
    for i, name in enumerate(task_list):
        name_col, rm_col = st.columns([4, 1])
        name_col.markdown(
            f'<span style="color:{task_color(name, task_list.names)};'
            f'font-weight:600;">● {name}</span>',
            unsafe_allow_html=True,
        )
        if rm_col.button("×", key=f"rm_{i}"):
            task_list.remove(i)
            # Task data changed, the old plan no longer applies
            _set_schedule(None)
            st.rerun()

hours = st.sidebar.slider(
    "Hours available",
    min_value=MIN_HOURS_AVAILABLE,
    max_value=MAX_HOURS_AVAILABLE,
    value=DEFAULT_HOURS_AVAILABLE,
)
window = st.sidebar.selectbox(
    "Start window",
    options=list(ScheduleWindow),
    format_func=lambda w: WINDOW_LABELS[w],
)
intensity = st.sidebar.radio(
    "Intensity",
    options=list(Intensity),
    index=list(Intensity).index(Intensity.NORMAL),
    format_func=lambda i: f"{get_profile(i).emoji} {INTENSITY_LABELS[i]}",
)
st.sidebar.info(get_profile(intensity).strategy_tip())

# ---------------------------------------------------------------------------
# Main content
# ---------------------------------------------------------------------------

st.title("Day Planner")
st.caption("Randomized work sessions with proportional breaks")

gen_col, clear_col = st.columns(2)
with gen_col:
    if st.button("Generate Plan", type="primary"):
        request = PlanRequest(
            tasks=task_list.names,
            total_minutes=hours * 60,
            start=anchor_for_window(window, date.today()),
            intensity=intensity,
        )
        try:
            _set_schedule(get_generator().generate(request))
            st.session_state["celebrate"] = False
        except InvalidInput as e:
            st.error(str(e))
with clear_col:
    if st.button("Clear Plan"):
        _set_schedule(None)
        st.rerun()

schedule = st.session_state.get("schedule")

if schedule is None:
    st.info("Add some tasks and click **Generate Plan** to get started.")
else:
    stats = summarize(schedule)
    profile = schedule.profile

    st.header(f"{profile.emoji} Your Plan")
    st.progress(stats.progress_pct / 100, text=f"Progress {stats.progress_pct}%")

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Productive", format_duration(stats.work_min))
    c2.metric("Breaks", format_duration(stats.break_min))
    c3.metric("Completed", f"{stats.completed}/{stats.total}")
    c4.metric("Score", f"{stats.progress_pct}%")

    st.subheader("📅 Timeline")
    for block in schedule.blocks:
        if block.is_work:
            color = task_color(block.name, schedule.tasks)
            info_col, done_col = st.columns([6, 1])
            label = f"~~{block.name}~~" if block.completed else f"**{block.name}**"
            info_col.markdown(
                f'<div style="border-left:6px solid {color};padding:6px 12px;">'
                f"{block.duration_min} min</div>",
                unsafe_allow_html=True,
            )
            info_col.markdown(f"{label} — {format_block_range(block.start, block.end)}")
            done_col.checkbox(
                "Done",
                value=block.completed,
                key=completion_key(st.session_state["plan_generation"], block.block_id),
                on_change=_toggle_block,
                args=(block.block_id,),
            )
        else:
            st.markdown(
                f'<div style="background:{BREAK_COLOR};padding:8px 12px;border-radius:8px;">'
                f"☕ <strong>Break</strong> "
                f"{format_block_range(block.start, block.end)} ({block.duration_min}m)"
                f"</div>",
                unsafe_allow_html=True,
            )

    with st.expander("Minutes per task"):
        st.bar_chart(minutes_by_task(schedule))

    st.info(f"🚀 {profile.label} Mode Strategy: {profile.strategy_tip()}")

    dl_json, dl_csv = st.columns(2)
    with dl_json:
        st.download_button(
            "Download Plan (.json)",
            data=to_plan_json_string(schedule),
            file_name=f"plan-{schedule.anchor.date().isoformat()}.json",
            mime="application/json",
        )
    with dl_csv:
        st.download_button(
            "Download Timeline (.csv)",
            data=timeline_frame(schedule).to_csv(index=False),
            file_name=f"timeline-{schedule.anchor.date().isoformat()}.csv",
            mime="text/csv",
        )

    if st.session_state.pop("celebrate", False):
        st.balloons()
        st.success("Congratulations! Every session in today's plan is done.")
