"""Intensity profiles — the work/break split and session bounds per level."""

from __future__ import annotations

from dataclasses import dataclass

from day_planner.exceptions import InvalidInput
from day_planner.math.rounding import round_half_up
from day_planner.models.enums import Intensity


@dataclass(frozen=True)
class IntensityProfile:
    """A named work/break configuration.

    Attributes:
        intensity: Which named level this profile represents.
        label: Display name.
        work_ratio: Fraction of the total budget spent working, in (0, 1).
        min_session_min: Shortest drawn work session in minutes.
        max_session_min: Longest drawn work session in minutes.
        emoji: Decoration used by the presentation layer.
    """

    intensity: Intensity
    label: str
    work_ratio: float
    min_session_min: int
    max_session_min: int
    emoji: str = ""

    def __post_init__(self) -> None:
        if not 0.0 < self.work_ratio < 1.0:
            raise ValueError(
                f"work_ratio must be in (0, 1), got {self.work_ratio}"
            )
        if not 1 <= self.min_session_min <= self.max_session_min:
            raise ValueError(
                "session bounds must satisfy 1 <= min <= max, got "
                f"{self.min_session_min}-{self.max_session_min}"
            )

    @property
    def break_ratio(self) -> float:
        return 1.0 - self.work_ratio

    def strategy_tip(self) -> str:
        """One-line summary shown next to the intensity picker."""
        return (
            f"Work {round_half_up(self.work_ratio * 100)}% of the time. "
            f"Sessions are {self.min_session_min}-{self.max_session_min} mins."
        )


PROFILES: dict[Intensity, IntensityProfile] = {
    Intensity.LIGHT: IntensityProfile(
        intensity=Intensity.LIGHT,
        label="Light",
        work_ratio=0.60,
        min_session_min=25,
        max_session_min=35,
        emoji="🌤️",
    ),
    Intensity.NORMAL: IntensityProfile(
        intensity=Intensity.NORMAL,
        label="Normal",
        work_ratio=0.75,
        min_session_min=30,
        max_session_min=45,
        emoji="⚡",
    ),
    Intensity.HUSTLE: IntensityProfile(
        intensity=Intensity.HUSTLE,
        label="Hustle",
        work_ratio=0.85,
        min_session_min=40,
        max_session_min=60,
        emoji="🔥",
    ),
}


def get_profile(intensity: Intensity | str) -> IntensityProfile:
    """Look up the profile for an intensity level.

    Args:
        intensity: An Intensity member or its name, case-insensitive
            (e.g. ``"hustle"``).

    Returns:
        The matching IntensityProfile.

    Raises:
        InvalidInput: If the name does not match a known profile.
    """
    if isinstance(intensity, str):
        try:
            intensity = Intensity[intensity.strip().upper()]
        except KeyError:
            raise InvalidInput(f"Unknown intensity profile: {intensity!r}") from None
    try:
        return PROFILES[intensity]
    except KeyError:
        raise InvalidInput(f"Unknown intensity profile: {intensity!r}") from None
