"""End-to-end scenarios: task list -> generator -> stats -> persistence."""

from __future__ import annotations

from datetime import timedelta

import pytest

from day_planner.engine import PlanRequest, ScheduleGenerator
from day_planner.exceptions import InvalidInput
from day_planner.models.enums import Intensity
from day_planner.serialization import from_plan_json_string, to_plan_json_string
from day_planner.stats import all_work_completed, mark_completed, summarize
from day_planner.tasks import TaskList


class TestThreeTaskNormalScenario:
    """3 tasks, 120 min, normal: work 90, break 30."""

    def _generate(self, anchor, seed, make_rng):
        tasks = TaskList.from_names(["Write report", "Email", "Review PR"])
        request = PlanRequest(
            tasks=tasks.names, total_minutes=120, start=anchor, intensity=Intensity.NORMAL,
        )
        return ScheduleGenerator().generate(request, rng=make_rng(seed))

    def test_budget(self, anchor, make_rng) -> None:
        schedule = self._generate(anchor, 0, make_rng)
        assert schedule.budget.work_pool == 90
        assert schedule.budget.break_pool == 30

    def test_shape_over_many_seeds(self, anchor, make_rng) -> None:
        for seed in range(200):
            schedule = self._generate(anchor, seed, make_rng)
            work = schedule.work_blocks
            assert 2 <= len(work) <= 3
            assert schedule.total_work_min <= 90
            assert schedule.total_break_min <= 30
            assert schedule.blocks[0].start == anchor
            assert schedule.end <= anchor + timedelta(minutes=120)
            assert len({b.name for b in work}) == len(work)

    def test_complete_everything(self, anchor, make_rng) -> None:
        schedule = self._generate(anchor, 3, make_rng)
        for block in schedule.work_blocks:
            schedule = mark_completed(schedule, block.block_id)
        assert all_work_completed(schedule)
        assert summarize(schedule).progress_pct == 100

    def test_survives_save_and_load(self, anchor, make_rng) -> None:
        schedule = self._generate(anchor, 4, make_rng)
        schedule = mark_completed(schedule, schedule.work_blocks[0].block_id)
        restored = from_plan_json_string(to_plan_json_string(schedule))
        assert restored == schedule


class TestFailureScenarios:
    def test_empty_task_list(self, anchor) -> None:
        request = PlanRequest(tasks=TaskList().names, total_minutes=480, start=anchor)
        with pytest.raises(InvalidInput):
            ScheduleGenerator().generate(request)

    def test_ten_minutes(self, anchor, three_tasks) -> None:
        request = PlanRequest(tasks=three_tasks, total_minutes=10, start=anchor)
        with pytest.raises(InvalidInput):
            ScheduleGenerator().generate(request)


class TestFullDay:
    @pytest.mark.parametrize("intensity", list(Intensity))
    def test_twelve_hours_every_profile(self, anchor, many_tasks, make_rng, intensity) -> None:
        request = PlanRequest(
            tasks=many_tasks, total_minutes=720, start=anchor, intensity=intensity,
        )
        schedule = ScheduleGenerator().generate(request, rng=make_rng(7))
        assert schedule.blocks[-1].is_work
        assert set(b.name for b in schedule.work_blocks) == set(many_tasks)
        assert schedule.end <= anchor + timedelta(minutes=720)
