"""Budget planner: split the available minutes into work and break pools."""

from __future__ import annotations

import math

from day_planner.models.profile import IntensityProfile
from day_planner.models.schedule import BudgetSplit


def plan_budget(total_minutes: int, profile: IntensityProfile) -> BudgetSplit:
    """Split ``total_minutes`` by the profile's work ratio.

    The break pool is the residual, so the two pools always sum exactly to
    ``total_minutes``.

    Example: 120 min at 0.75 -> work 90, break 30
    """
    work_pool = math.floor(total_minutes * profile.work_ratio)
    return BudgetSplit(work_pool=work_pool, break_pool=total_minutes - work_pool)
