"""Day planner — splits a time budget into randomized work sessions and breaks."""

from day_planner.engine import PlanRequest, ScheduleGenerator, generate_schedule
from day_planner.exceptions import (
    DayPlannerError,
    DuplicateTask,
    InvalidInput,
    PlanFormatError,
)
from day_planner.tasks import TaskList

__all__ = [
    "DayPlannerError",
    "DuplicateTask",
    "InvalidInput",
    "PlanFormatError",
    "PlanRequest",
    "ScheduleGenerator",
    "TaskList",
    "generate_schedule",
]
