"""Custom exception hierarchy for the day planner."""

from __future__ import annotations


class DayPlannerError(Exception):
    """Base exception for all day_planner errors."""


class InvalidInput(DayPlannerError):
    """Generation or task-store preconditions were not met."""


class DuplicateTask(InvalidInput):
    """A task with the same name (ignoring case) already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Task already exists: {name!r}")
        self.name = name


class PlanFormatError(DayPlannerError):
    """A persisted plan document could not be decoded."""
