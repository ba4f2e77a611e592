"""Schedule models: BudgetSplit and Schedule."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from day_planner.models.block import Block
from day_planner.models.profile import IntensityProfile


@dataclass(frozen=True)
class BudgetSplit:
    """Work and break minute pools derived once per generation."""

    work_pool: int
    break_pool: int

    @property
    def total(self) -> int:
        return self.work_pool + self.break_pool


@dataclass(frozen=True)
class Schedule:
    """Output of ScheduleGenerator.generate(): an ordered, stamped timeline.

    Each generation produces a new Schedule; nothing in the core edits one
    after it has been built.
    """

    blocks: tuple[Block, ...]
    anchor: datetime
    profile: IntensityProfile
    total_minutes: int
    budget: BudgetSplit
    tasks: tuple[str, ...] = field(default_factory=tuple)

    @property
    def work_blocks(self) -> tuple[Block, ...]:
        return tuple(b for b in self.blocks if b.is_work)

    @property
    def break_blocks(self) -> tuple[Block, ...]:
        return tuple(b for b in self.blocks if b.is_break)

    @property
    def total_work_min(self) -> int:
        return sum(b.duration_min for b in self.work_blocks)

    @property
    def total_break_min(self) -> int:
        return sum(b.duration_min for b in self.break_blocks)

    @property
    def end(self) -> datetime:
        """End of the last block, or the anchor for an empty timeline."""
        if not self.blocks or self.blocks[-1].end is None:
            return self.anchor
        return self.blocks[-1].end

    def get(self, block_id: int) -> Block | None:
        """Retrieve a block by its id."""
        for block in self.blocks:
            if block.block_id == block_id:
                return block
        return None
