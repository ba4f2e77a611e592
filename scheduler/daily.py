"""Daily scheduler — generates the day's plan and writes it to disk.

Usage:
    python -m scheduler.daily --once      # single run (for cron)
    python -m scheduler.daily --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import date
from pathlib import Path

from day_planner.engine import PlanRequest, ScheduleGenerator
from day_planner.exceptions import InvalidInput
from day_planner.models.enums import ScheduleWindow
from day_planner.models.profile import get_profile
from day_planner.planner.timestamps import anchor_for_window
from day_planner.serialization import to_plan_json_string
from day_planner.tasks import TaskList

from scheduler.config import (
    DAILY_HOUR,
    DAILY_MINUTE,
    HOURS_AVAILABLE,
    INTENSITY,
    OUTPUT_DIR,
    TASKS_PATH,
    WINDOW,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _load_tasks(path: Path) -> TaskList:
    """Load a JSON list of task names from disk."""
    with open(path, encoding="utf-8") as f:
        names = json.load(f)
    if not isinstance(names, list):
        raise InvalidInput(f"{path} must contain a JSON list of task names")
    bad = [n for n in names if not isinstance(n, str)]
    if bad:
        raise InvalidInput(f"{path} holds non-string task names: {bad!r}")
    return TaskList.from_names(names)


def _parse_window(name: str) -> ScheduleWindow:
    try:
        return ScheduleWindow[name.strip().upper()]
    except KeyError:
        raise InvalidInput(f"Unknown schedule window: {name!r}") from None


def daily_job(today: date | None = None) -> Path | None:
    """Execute one daily cycle: load tasks, generate a plan, write it out.

    Returns:
        Path of the written plan, or None if the run failed.
    """
    today = today or date.today()
    logger.info("Starting daily plan job for %s", today.isoformat())

    # 1. Load tasks
    try:
        tasks = _load_tasks(TASKS_PATH)
    except FileNotFoundError:
        logger.error("Task file not found at %s", TASKS_PATH)
        return None
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, InvalidInput) as exc:
        logger.error("Could not read tasks from %s: %s", TASKS_PATH, exc)
        return None

    # 2. Generate
    try:
        request = PlanRequest(
            tasks=tasks.names,
            total_minutes=HOURS_AVAILABLE * 60,
            start=anchor_for_window(_parse_window(WINDOW), today),
            intensity=get_profile(INTENSITY).intensity,
        )
        schedule = ScheduleGenerator().generate(request)
    except InvalidInput as exc:
        logger.error("Failed to generate plan: %s", exc)
        return None

    # 3. Write
    path = OUTPUT_DIR / f"plan-{today.isoformat()}.json"
    try:
        OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        path.write_text(to_plan_json_string(schedule), encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to write plan to %s: %s", path, exc)
        return None
    logger.info(
        "Wrote %d blocks (%d work sessions) to %s",
        len(schedule.blocks),
        len(schedule.work_blocks),
        path,
    )
    return path


def main() -> None:
    parser = argparse.ArgumentParser(description="Day Planner daily scheduler")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    args = parser.parse_args()

    if args.once:
        daily_job()
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            daily_job,
            "cron",
            hour=DAILY_HOUR,
            minute=DAILY_MINUTE,
            id="daily_job",
        )
        logger.info(
            "Scheduler started — daily plan at %02d:%02d",
            DAILY_HOUR,
            DAILY_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
