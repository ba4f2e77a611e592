"""Utility helpers bridging the Streamlit UI and the day planner.

Pure functions for formatting, colour assignment, timeline tables and plan
persistence.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from day_planner.exceptions import PlanFormatError
from day_planner.models.enums import BlockType, Intensity, ScheduleWindow
from day_planner.models.schedule import Schedule
from day_planner.serialization import from_plan_json_string, to_plan_json_string

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_clock(moment: datetime | None) -> str:
    """12-hour wall-clock time. e.g. 13:05 -> '1:05 PM'."""
    if moment is None:
        return "--"
    hour = moment.hour % 12 or 12
    suffix = "PM" if moment.hour >= 12 else "AM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def format_duration(minutes: float) -> str:
    """Convert minutes to human string. e.g. 90 -> '1h 30m'."""
    if minutes <= 0:
        return "0m"
    h = int(minutes) // 60
    m = int(minutes) % 60
    if h > 0 and m > 0:
        return f"{h}h {m}m"
    if h > 0:
        return f"{h}h"
    return f"{m}m"


def format_block_range(start: datetime | None, end: datetime | None) -> str:
    """e.g. '7:00 AM - 7:40 AM'."""
    return f"{format_clock(start)} - {format_clock(end)}"


# ---------------------------------------------------------------------------
# Color maps
# ---------------------------------------------------------------------------

TASK_COLORS = (
    "#3B82F6",  # blue
    "#22C55E",  # green
    "#A855F7",  # purple
    "#EC4899",  # pink
    "#EAB308",  # yellow
    "#6366F1",  # indigo
    "#EF4444",  # red
    "#14B8A6",  # teal
)

BREAK_COLOR = "#DCFCE7"

WINDOW_LABELS: dict[ScheduleWindow, str] = {
    ScheduleWindow.MORNING: "Morning (7:00 AM)",
    ScheduleWindow.DAY: "Day (9:00 AM)",
    ScheduleWindow.EVENING: "Evening (6:00 PM)",
    ScheduleWindow.NIGHT: "Night (10:00 PM)",
}

INTENSITY_LABELS: dict[Intensity, str] = {
    Intensity.LIGHT: "Light",
    Intensity.NORMAL: "Normal",
    Intensity.HUSTLE: "Hustle",
}


def task_color(name: str, tasks: tuple[str, ...]) -> str:
    """Colour for a task, assigned by its position in the task list."""
    try:
        index = tasks.index(name)
    except ValueError:
        index = 0
    return TASK_COLORS[index % len(TASK_COLORS)]


def completion_key(generation: int, block_id: int) -> str:
    """Widget key for a block's checkbox, unique to one generated plan."""
    return f"done_{generation}_{block_id}"


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


def timeline_frame(schedule: Schedule) -> pd.DataFrame:
    """One row per block, in timeline order."""
    rows = [
        {
            "Start": format_clock(b.start),
            "End": format_clock(b.end),
            "Type": "Work" if b.block_type == BlockType.WORK else "Break",
            "Name": b.name,
            "Minutes": b.duration_min,
            "Done": b.completed if b.is_work else None,
        }
        for b in schedule.blocks
    ]
    return pd.DataFrame(
        rows, columns=["Start", "End", "Type", "Name", "Minutes", "Done"],
    )


def minutes_by_task(schedule: Schedule) -> pd.Series:
    """Total scheduled work minutes per task, largest first."""
    frame = pd.DataFrame(
        [(b.name, b.duration_min) for b in schedule.work_blocks],
        columns=["Task", "Minutes"],
    )
    if frame.empty:
        return pd.Series(dtype="int64", name="Minutes")
    return frame.groupby("Task")["Minutes"].sum().sort_values(ascending=False)


# ---------------------------------------------------------------------------
# Plan persistence
# ---------------------------------------------------------------------------

_PLANS_DIR = Path(__file__).parent / "plans"
_CURRENT_PLAN = "current"


def _ensure_plans_dir() -> Path:
    _PLANS_DIR.mkdir(parents=True, exist_ok=True)
    return _PLANS_DIR


def save_plan(schedule: Schedule, name: str = _CURRENT_PLAN) -> Path:
    """Save a schedule as JSON. Returns the file path."""
    path = _ensure_plans_dir() / f"{name}.json"
    path.write_text(to_plan_json_string(schedule), encoding="utf-8")
    return path


def load_plan(name: str = _CURRENT_PLAN) -> Schedule | None:
    """Load a saved schedule, or None when nothing usable is stored."""
    path = _PLANS_DIR / f"{name}.json"
    if not path.exists():
        return None
    try:
        return from_plan_json_string(path.read_text(encoding="utf-8"))
    except PlanFormatError as exc:
        logger.error("Failed to load saved plan %s: %s", path, exc)
        return None


def clear_plan(name: str = _CURRENT_PLAN) -> None:
    """Delete a saved schedule if present."""
    (_PLANS_DIR / f"{name}.json").unlink(missing_ok=True)
