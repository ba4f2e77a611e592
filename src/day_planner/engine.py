"""ScheduleGenerator — the orchestrator that turns a request into a Schedule."""

from __future__ import annotations

import logging
import numbers
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from day_planner.exceptions import InvalidInput
from day_planner.models.enums import ROTATION_PASS_LIMIT, Intensity
from day_planner.models.profile import IntensityProfile, get_profile
from day_planner.models.schedule import Schedule
from day_planner.planner.allocator import allocate_blocks
from day_planner.planner.budget import plan_budget
from day_planner.planner.rotation import TaskRotation
from day_planner.planner.timestamps import stamp_blocks

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanRequest:
    """Everything one generation call needs.

    ``tasks`` must already be trimmed, non-empty and unique (see TaskList);
    the generator does not re-check that.
    """

    tasks: tuple[str, ...]
    total_minutes: int
    start: datetime
    intensity: Intensity = Intensity.NORMAL


class ScheduleGenerator:
    """Runs budget split, rotation, allocation and stamping for one request.

    The random source is injected: pass ``rng`` to ``generate`` or an
    ``rng_factory`` to the constructor. Without either, every call gets its
    own ``numpy.random.default_rng()``, so concurrent calls share nothing.

    Usage:
        generator = ScheduleGenerator()
        schedule = generator.generate(request)
    """

    def __init__(
        self,
        rng_factory: Callable[[], np.random.Generator] | None = None,
    ) -> None:
        self.rng_factory = rng_factory or np.random.default_rng

    def generate(
        self,
        request: PlanRequest,
        rng: np.random.Generator | None = None,
    ) -> Schedule:
        """Generate a fresh, fully stamped schedule.

        Args:
            request: Tasks, budget, anchor and intensity.
            rng: Optional random generator for this call only.

        Returns:
            A new Schedule.

        Raises:
            InvalidInput: If there are no tasks, the budget is not a
                positive integer, or the work pool cannot hold a single
                minimum-length session.
        """
        profile = get_profile(request.intensity)
        self._validate(request, profile)

        rng = rng if rng is not None else self.rng_factory()
        budget = plan_budget(request.total_minutes, profile)

        rotation = TaskRotation(request.tasks, rng)
        blocks = allocate_blocks(
            budget,
            profile,
            rotation,
            rng,
            max_iterations=len(request.tasks) * ROTATION_PASS_LIMIT,
        )
        stamped = stamp_blocks(blocks, request.start)

        schedule = Schedule(
            blocks=tuple(stamped),
            anchor=request.start,
            profile=profile,
            total_minutes=request.total_minutes,
            budget=budget,
            tasks=tuple(request.tasks),
        )
        logger.info(
            "Generated %d blocks (%d work min, %d break min) for %d tasks at %s intensity",
            len(schedule.blocks),
            schedule.total_work_min,
            schedule.total_break_min,
            len(request.tasks),
            profile.label,
        )
        return schedule

    @staticmethod
    def _validate(request: PlanRequest, profile: IntensityProfile) -> None:
        if not request.tasks:
            raise InvalidInput("Please add tasks first.")
        total = request.total_minutes
        if isinstance(total, bool) or not isinstance(total, numbers.Integral) or total <= 0:
            raise InvalidInput(f"total_minutes must be a positive integer, got {total!r}")
        work_pool = plan_budget(int(total), profile).work_pool
        if work_pool < profile.min_session_min:
            raise InvalidInput(
                f"{total} min at {profile.label} intensity leaves {work_pool} min of work, "
                f"less than one {profile.min_session_min} min session"
            )


def generate_schedule(
    tasks: Sequence[str],
    total_minutes: int,
    start: datetime,
    intensity: Intensity | str = Intensity.NORMAL,
    rng: np.random.Generator | None = None,
) -> Schedule:
    """Convenience wrapper around ScheduleGenerator().generate()."""
    if isinstance(intensity, str):
        intensity = get_profile(intensity).intensity
    request = PlanRequest(
        tasks=tuple(tasks),
        total_minutes=total_minutes,
        start=start,
        intensity=intensity,
    )
    return ScheduleGenerator().generate(request, rng=rng)
