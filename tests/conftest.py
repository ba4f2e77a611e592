"""Shared test fixtures: profiles, task sets, anchors and seeded generators."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

import numpy as np
import pytest

from day_planner.models.block import Block
from day_planner.models.enums import BlockType, Intensity
from day_planner.models.profile import PROFILES, IntensityProfile


@pytest.fixture
def anchor() -> datetime:
    """Monday 2 March 2026, 7:00 AM (the MORNING window)."""
    return datetime(2026, 3, 2, 7, 0)


@pytest.fixture
def normal_profile() -> IntensityProfile:
    """work 0.75, sessions 30-45 min."""
    return PROFILES[Intensity.NORMAL]


@pytest.fixture
def light_profile() -> IntensityProfile:
    """work 0.60, sessions 25-35 min."""
    return PROFILES[Intensity.LIGHT]


@pytest.fixture
def hustle_profile() -> IntensityProfile:
    """work 0.85, sessions 40-60 min."""
    return PROFILES[Intensity.HUSTLE]


@pytest.fixture
def three_tasks() -> tuple[str, ...]:
    return ("Write report", "Email", "Review PR")


@pytest.fixture
def many_tasks() -> tuple[str, ...]:
    return ("Write report", "Email", "Review PR", "Plan sprint", "Read paper")


@pytest.fixture
def make_rng() -> Callable[[int], np.random.Generator]:
    """Factory for seeded generators so random properties are reproducible."""

    def _make(seed: int) -> np.random.Generator:
        return np.random.default_rng(seed)

    return _make


@pytest.fixture
def make_block() -> Callable[..., Block]:
    """Factory for unstamped blocks: make_block(0, BlockType.WORK, 30, 'Email')."""

    def _make(
        block_id: int,
        block_type: BlockType,
        duration_min: int,
        name: str | None = None,
    ) -> Block:
        if name is None:
            name = "Task" if block_type == BlockType.WORK else "Break"
        return Block(
            block_id=block_id,
            block_type=block_type,
            name=name,
            duration_min=duration_min,
        )

    return _make


class FixedRng:
    """Stand-in for numpy's Generator with scripted draws.

    ``integers`` returns the scripted session lengths in order (clamped to
    the requested bounds); ``permutation`` returns the identity order.
    """

    def __init__(self, draws: list[int]) -> None:
        self._draws = list(draws)
        self.integer_calls = 0

    def integers(self, low: int, high: int, endpoint: bool = False) -> int:
        self.integer_calls += 1
        value = self._draws.pop(0)
        upper = high if endpoint else high - 1
        return max(low, min(value, upper))

    def permutation(self, n: int) -> np.ndarray:
        return np.arange(n)


@pytest.fixture
def fixed_rng() -> Callable[[list[int]], FixedRng]:
    def _make(draws: list[int]) -> FixedRng:
        return FixedRng(draws)

    return _make
