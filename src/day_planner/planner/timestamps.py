"""Timestamp assignment: walk the blocks and lay them end to end."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from datetime import date, datetime, time, timedelta

from day_planner.models.block import Block
from day_planner.models.enums import WINDOW_START_MIN, ScheduleWindow


def stamp_blocks(blocks: Sequence[Block], anchor: datetime) -> list[Block]:
    """Fill ``start``/``end`` on every block from a running clock.

    The first block starts at ``anchor`` and each following block starts
    where the previous one ended. Existing timestamps are overwritten, so
    stamping the same durations twice gives identical results.

    Args:
        blocks: Blocks in timeline order.
        anchor: Start of the first block.

    Returns:
        New list of stamped blocks.
    """
    clock = anchor
    stamped: list[Block] = []
    for block in blocks:
        start = clock
        clock = clock + timedelta(minutes=block.duration_min)
        stamped.append(dataclasses.replace(block, start=start, end=clock))
    return stamped


def anchor_for_window(window: ScheduleWindow, on_date: date) -> datetime:
    """Local wall-clock anchor for a window preset on a given day.

    Example: (MORNING, 2026-03-02) -> 2026-03-02 07:00
    """
    hours, minutes = divmod(WINDOW_START_MIN[window], 60)
    return datetime.combine(on_date, time(hour=hours, minute=minutes))
