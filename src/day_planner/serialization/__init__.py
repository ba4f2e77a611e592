"""Serialization module — save and restore generated plans as JSON."""

from day_planner.serialization.plan_json import (
    from_plan_json,
    from_plan_json_string,
    to_plan_json,
    to_plan_json_string,
)

__all__ = [
    "from_plan_json",
    "from_plan_json_string",
    "to_plan_json",
    "to_plan_json_string",
]
