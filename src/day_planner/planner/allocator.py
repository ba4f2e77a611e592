"""Block allocator — carves the work pool into sessions with breaks between.

Greedy randomized packing:
- Each session draws a length uniformly from the profile bounds, capped by
  the work still unallocated.
- A break follows every session except the final one, sized from the session
  length and the profile's break/work ratio, rounded up to 5 minutes and
  capped by the break pool.
- Allocation stops once the remaining work is at most 15 minutes or the
  iteration cap is reached.
- Break minutes left over are spread evenly across existing breaks.
"""

from __future__ import annotations

import dataclasses

import numpy as np

from day_planner.math.rounding import ceil_to_increment, round_half_up
from day_planner.models.block import Block
from day_planner.models.enums import (
    BREAK_INCREMENT_MIN,
    BREAK_LABEL,
    MIN_BREAK_MIN,
    MIN_VIABLE_SESSION_MIN,
    BlockType,
)
from day_planner.models.profile import IntensityProfile
from day_planner.models.schedule import BudgetSplit
from day_planner.planner.rotation import TaskRotation


def compute_break_duration(session_min: int, profile: IntensityProfile) -> int:
    """Uncapped break length that follows a work session.

    Example: 30 min at normal (0.75) -> 30 * 0.25 / 0.75 = 10 -> 10
             40 min at hustle (0.85) -> 7.06 -> 7 -> 10
    """
    proportional = round_half_up(
        session_min * profile.break_ratio / profile.work_ratio
    )
    return max(MIN_BREAK_MIN, ceil_to_increment(proportional, BREAK_INCREMENT_MIN))


def redistribute_leftover(blocks: list[Block], leftover: int) -> tuple[list[Block], int]:
    """Spread unused break minutes evenly over the break blocks.

    Each break gets ``leftover // n_breaks`` extra minutes. With no breaks
    nothing is added.

    Returns:
        (new block list, minutes that could not be placed)
    """
    break_count = sum(1 for b in blocks if b.is_break)
    if leftover <= 0 or break_count == 0:
        return list(blocks), max(leftover, 0)

    extra = leftover // break_count
    if extra == 0:
        return list(blocks), leftover

    result = [
        dataclasses.replace(b, duration_min=b.duration_min + extra) if b.is_break else b
        for b in blocks
    ]
    return result, leftover - extra * break_count


def allocate_blocks(
    budget: BudgetSplit,
    profile: IntensityProfile,
    rotation: TaskRotation,
    rng: np.random.Generator,
    max_iterations: int,
) -> list[Block]:
    """Allocate work sessions and breaks from the two pools.

    Args:
        budget: Work and break pools for this run.
        profile: Active intensity profile (session bounds and ratio).
        rotation: Source of task names for successive sessions.
        rng: Random generator used for session lengths.
        max_iterations: Upper bound on work sessions.

    Returns:
        Unstamped blocks in timeline order, ``block_id`` = position.
    """
    remaining_work = budget.work_pool
    remaining_break = budget.break_pool
    blocks: list[Block] = []
    iteration = 0

    while remaining_work > MIN_VIABLE_SESSION_MIN and iteration < max_iterations:
        task_name = rotation.next()

        drawn = int(rng.integers(
            profile.min_session_min, profile.max_session_min, endpoint=True,
        ))
        duration = min(drawn, remaining_work)
        blocks.append(Block(
            block_id=len(blocks),
            block_type=BlockType.WORK,
            name=task_name,
            duration_min=duration,
        ))
        remaining_work -= duration
        iteration += 1

        # Breaks only go between sessions, never after the final one
        if _another_session_follows(remaining_work, iteration, max_iterations):
            break_min = min(compute_break_duration(duration, profile), remaining_break)
            if break_min > 0:
                blocks.append(Block(
                    block_id=len(blocks),
                    block_type=BlockType.BREAK,
                    name=BREAK_LABEL,
                    duration_min=break_min,
                ))
                remaining_break -= break_min

    blocks, _ = redistribute_leftover(blocks, remaining_break)
    return blocks


def _another_session_follows(remaining_work: int, iteration: int, max_iterations: int) -> bool:
    return remaining_work > MIN_VIABLE_SESSION_MIN and iteration < max_iterations
