"""Block model — one scheduled unit of work or rest."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from day_planner.models.enums import BlockType


@dataclass(frozen=True)
class Block:
    """A single work session or break.

    ``block_id`` is the block's position at creation and stays stable for
    the life of the schedule. ``start``/``end`` are None until the block
    has been stamped. ``completed`` belongs to the presentation layer; the
    generator only ever sets it to False.
    """

    block_id: int
    block_type: BlockType
    name: str
    duration_min: int
    start: datetime | None = None
    end: datetime | None = None
    completed: bool = False

    @property
    def is_work(self) -> bool:
        return self.block_type == BlockType.WORK

    @property
    def is_break(self) -> bool:
        return self.block_type == BlockType.BREAK

    @property
    def is_stamped(self) -> bool:
        return self.start is not None and self.end is not None
