"""Data models for the day planner."""

from day_planner.models.block import Block
from day_planner.models.enums import BlockType, Intensity, ScheduleWindow
from day_planner.models.profile import PROFILES, IntensityProfile, get_profile
from day_planner.models.schedule import BudgetSplit, Schedule

__all__ = [
    "Block",
    "BlockType",
    "BudgetSplit",
    "Intensity",
    "IntensityProfile",
    "PROFILES",
    "Schedule",
    "ScheduleWindow",
    "get_profile",
]
