"""Environment-variable-based configuration for the daily plan scheduler."""

from __future__ import annotations

import os
from pathlib import Path

TASKS_PATH: Path = Path(os.environ.get("PLANNER_TASKS_PATH", "tasks.json")).expanduser()
OUTPUT_DIR: Path = Path(os.environ.get("PLANNER_OUTPUT_DIR", "plans")).expanduser()
HOURS_AVAILABLE: int = int(os.environ.get("PLANNER_HOURS", "8"))
WINDOW: str = os.environ.get("PLANNER_WINDOW", "morning")
INTENSITY: str = os.environ.get("PLANNER_INTENSITY", "normal")
DAILY_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "6"))
DAILY_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "0"))
