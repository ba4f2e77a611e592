"""Enumerations and scheduling constants for the day planner."""

from enum import IntEnum, auto


class BlockType(IntEnum):
    """Kind of time block in a generated schedule."""

    WORK = auto()
    BREAK = auto()


class Intensity(IntEnum):
    """Named intensity profiles, lightest first."""

    LIGHT = auto()
    NORMAL = auto()
    HUSTLE = auto()


class ScheduleWindow(IntEnum):
    """Start-of-day presets offered by the planner UI."""

    MORNING = auto()
    DAY = auto()
    EVENING = auto()
    NIGHT = auto()


# ---------------------------------------------------------------------------
# Allocation constants
# ---------------------------------------------------------------------------
# Remaining work at or below this is not worth a separate session
MIN_VIABLE_SESSION_MIN = 15

# Breaks are rounded up to this increment, never shorter than MIN_BREAK_MIN
BREAK_INCREMENT_MIN = 5
MIN_BREAK_MIN = 5

# Iteration cap = number of tasks * this
ROTATION_PASS_LIMIT = 4

BREAK_LABEL = "Break"

# ---------------------------------------------------------------------------
# Window anchors (minutes after local midnight)
# ---------------------------------------------------------------------------
WINDOW_START_MIN = {
    ScheduleWindow.MORNING: 7 * 60,    # 7:00 AM
    ScheduleWindow.DAY: 9 * 60,        # 9:00 AM
    ScheduleWindow.EVENING: 18 * 60,   # 6:00 PM
    ScheduleWindow.NIGHT: 22 * 60,     # 10:00 PM
}

# Hours slider bounds in the UI and scheduler config
MIN_HOURS_AVAILABLE = 1
MAX_HOURS_AVAILABLE = 12
DEFAULT_HOURS_AVAILABLE = 8
