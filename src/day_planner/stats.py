"""Read-only views over a Schedule for dashboards, plus completion toggling.

Completion flags belong to the presentation layer; nothing in the
generation pipeline reads them.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from day_planner.math.rounding import round_half_up
from day_planner.models.schedule import Schedule


@dataclass(frozen=True)
class ScheduleStats:
    """Dashboard figures for a schedule."""

    work_min: int
    break_min: int
    completed: int
    total: int
    progress_pct: int


def summarize(schedule: Schedule) -> ScheduleStats:
    """Work/break totals and completion progress over work blocks."""
    work_blocks = schedule.work_blocks
    completed = sum(1 for b in work_blocks if b.completed)
    progress = round_half_up(completed / len(work_blocks) * 100) if work_blocks else 0
    return ScheduleStats(
        work_min=schedule.total_work_min,
        break_min=schedule.total_break_min,
        completed=completed,
        total=len(work_blocks),
        progress_pct=progress,
    )


def all_work_completed(schedule: Schedule) -> bool:
    """True when there is at least one work block and every one is done."""
    work_blocks = schedule.work_blocks
    return bool(work_blocks) and all(b.completed for b in work_blocks)


def mark_completed(schedule: Schedule, block_id: int, done: bool = True) -> Schedule:
    """Return a copy of ``schedule`` with one block's completion flag set.

    Raises:
        KeyError: If no block has ``block_id``.
    """
    if schedule.get(block_id) is None:
        raise KeyError(f"No block with id {block_id}")
    blocks = tuple(
        dataclasses.replace(b, completed=done) if b.block_id == block_id else b
        for b in schedule.blocks
    )
    return dataclasses.replace(schedule, blocks=blocks)
