"""Tests for schedule statistics and completion toggling."""

from __future__ import annotations

import pytest

from day_planner.models.enums import BlockType
from day_planner.models.schedule import BudgetSplit, Schedule
from day_planner.planner.timestamps import stamp_blocks
from day_planner.stats import all_work_completed, mark_completed, summarize


@pytest.fixture
def schedule(anchor, normal_profile, make_block) -> Schedule:
    blocks = stamp_blocks(
        [
            make_block(0, BlockType.WORK, 30, "Write report"),
            make_block(1, BlockType.BREAK, 15),
            make_block(2, BlockType.WORK, 30, "Email"),
            make_block(3, BlockType.BREAK, 15),
            make_block(4, BlockType.WORK, 30, "Review PR"),
        ],
        anchor,
    )
    return Schedule(
        blocks=tuple(blocks),
        anchor=anchor,
        profile=normal_profile,
        total_minutes=120,
        budget=BudgetSplit(work_pool=90, break_pool=30),
        tasks=("Write report", "Email", "Review PR"),
    )


class TestSummarize:
    def test_totals_for_fresh_schedule(self, schedule) -> None:
        stats = summarize(schedule)
        assert stats.work_min == 90
        assert stats.break_min == 30
        assert stats.completed == 0
        assert stats.total == 3
        assert stats.progress_pct == 0

    def test_progress_rounds_half_up(self, schedule) -> None:
        """1 of 3 -> 33%, 2 of 3 -> 67%."""
        one = mark_completed(schedule, 0)
        assert summarize(one).progress_pct == 33
        two = mark_completed(one, 2)
        assert summarize(two).progress_pct == 67

    def test_empty_schedule_has_zero_progress(self, schedule) -> None:
        empty = Schedule(
            blocks=(),
            anchor=schedule.anchor,
            profile=schedule.profile,
            total_minutes=120,
            budget=schedule.budget,
        )
        assert summarize(empty).progress_pct == 0
        assert summarize(empty).total == 0


class TestCompletion:
    def test_mark_completed_returns_new_schedule(self, schedule) -> None:
        updated = mark_completed(schedule, 2)
        assert updated is not schedule
        assert updated.get(2).completed is True
        assert schedule.get(2).completed is False

    def test_unmark(self, schedule) -> None:
        done = mark_completed(schedule, 0)
        undone = mark_completed(done, 0, done=False)
        assert undone == schedule

    def test_only_target_block_changes(self, schedule) -> None:
        updated = mark_completed(schedule, 4)
        changed = [a.block_id for a, b in zip(schedule.blocks, updated.blocks) if a != b]
        assert changed == [4]

    def test_unknown_block_raises(self, schedule) -> None:
        with pytest.raises(KeyError):
            mark_completed(schedule, 42)

    def test_all_work_completed(self, schedule) -> None:
        assert not all_work_completed(schedule)
        for block_id in (0, 2, 4):
            schedule = mark_completed(schedule, block_id)
        assert all_work_completed(schedule)

    def test_breaks_do_not_count(self, schedule) -> None:
        updated = mark_completed(schedule, 1)
        assert summarize(updated).completed == 0
