"""JSON persistence for Schedule objects.

Writes the schedule verbatim: every block field, the anchor, the budget and
the active profile's intensity. Datetimes are ISO-8601 strings and enums are
stored by name. Loading rebuilds an equal Schedule.

All functions are pure (no file I/O).
"""

from __future__ import annotations

import json
import logging
from datetime import datetime

from day_planner.exceptions import InvalidInput, PlanFormatError
from day_planner.models.block import Block
from day_planner.models.enums import BlockType
from day_planner.models.profile import get_profile
from day_planner.models.schedule import BudgetSplit, Schedule

logger = logging.getLogger(__name__)

PLAN_FORMAT_VERSION = 1


def to_plan_json(schedule: Schedule) -> dict:
    """Convert a Schedule to a JSON-compatible dict."""
    return {
        "version": PLAN_FORMAT_VERSION,
        "anchor": schedule.anchor.isoformat(),
        "intensity": schedule.profile.intensity.name,
        "totalMinutes": schedule.total_minutes,
        "workPool": schedule.budget.work_pool,
        "breakPool": schedule.budget.break_pool,
        "tasks": list(schedule.tasks),
        "blocks": [_convert_block(b) for b in schedule.blocks],
    }


def to_plan_json_string(schedule: Schedule, indent: int = 2) -> str:
    """Convert a Schedule to a JSON string."""
    return json.dumps(to_plan_json(schedule), indent=indent, ensure_ascii=False)


def from_plan_json(data: dict) -> Schedule:
    """Rebuild a Schedule from ``to_plan_json`` output.

    Raises:
        PlanFormatError: If the document is missing fields or holds values
            of the wrong shape.
    """
    try:
        version = data.get("version", PLAN_FORMAT_VERSION)
        if version != PLAN_FORMAT_VERSION:
            raise PlanFormatError(f"Unsupported plan format version: {version!r}")
        schedule = Schedule(
            blocks=tuple(_parse_block(raw) for raw in data["blocks"]),
            anchor=datetime.fromisoformat(data["anchor"]),
            profile=get_profile(data["intensity"]),
            total_minutes=int(data["totalMinutes"]),
            budget=BudgetSplit(
                work_pool=int(data["workPool"]),
                break_pool=int(data["breakPool"]),
            ),
            tasks=_parse_tasks(data.get("tasks", [])),
        )
    except PlanFormatError:
        raise
    except (AttributeError, KeyError, TypeError, ValueError, InvalidInput) as exc:
        logger.warning("Rejected plan document: %s", exc)
        raise PlanFormatError(f"Malformed plan document: {exc}") from exc
    return schedule


def from_plan_json_string(text: str) -> Schedule:
    """Parse a JSON string produced by ``to_plan_json_string``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PlanFormatError(f"Plan is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise PlanFormatError("Plan document must be a JSON object")
    return from_plan_json(data)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _convert_block(block: Block) -> dict:
    return {
        "id": block.block_id,
        "type": block.block_type.name.lower(),
        "name": block.name,
        "duration": block.duration_min,
        "startTime": block.start.isoformat() if block.start else None,
        "endTime": block.end.isoformat() if block.end else None,
        "completed": block.completed,
    }


def _parse_block(raw: dict) -> Block:
    start = raw.get("startTime")
    end = raw.get("endTime")
    return Block(
        block_id=int(raw["id"]),
        block_type=BlockType[raw["type"].upper()],
        name=_expect(raw["name"], str, "block name"),
        duration_min=_positive_int(raw["duration"], "block duration"),
        start=datetime.fromisoformat(start) if start else None,
        end=datetime.fromisoformat(end) if end else None,
        completed=_expect(raw.get("completed", False), bool, "completed flag"),
    )


def _parse_tasks(raw) -> tuple[str, ...]:
    if not isinstance(raw, list) or not all(isinstance(t, str) for t in raw):
        raise TypeError(f"tasks must be a list of strings, got {raw!r}")
    return tuple(raw)


def _expect(value, kind: type, field: str):
    if not isinstance(value, kind):
        raise TypeError(f"{field} must be {kind.__name__}, got {value!r}")
    return value


def _positive_int(value, field: str) -> int:
    # bool is an int subclass but never a valid count of minutes
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{field} must be a positive integer, got {value!r}")
    return value
