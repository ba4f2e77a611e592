"""Planner pipeline — budget split, rotation, allocation, timestamps."""

from day_planner.planner.allocator import allocate_blocks
from day_planner.planner.budget import plan_budget
from day_planner.planner.rotation import TaskRotation
from day_planner.planner.timestamps import anchor_for_window, stamp_blocks

__all__ = [
    "TaskRotation",
    "allocate_blocks",
    "anchor_for_window",
    "plan_budget",
    "stamp_blocks",
]
