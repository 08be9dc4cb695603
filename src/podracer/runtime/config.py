"""Controller settings.

All tuning constants live in :class:`ControllerSettings`.  Entry points call
``load_dotenv()`` first, so any field can be overridden from the environment
or a ``.env`` file as ``PODRACER_<FIELD_NAME>`` (e.g. ``PODRACER_MIN_THRUST``).
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import BaseModel, Field, model_validator

from podracer.control.thrust import ThrustReduction

ENV_PREFIX = "PODRACER_"


@dataclass(frozen=True)
class VariantThresholds:
    """Distance thresholds used by one controller variant."""

    proximity: float
    """Below this distance the thrust policy looks at the upcoming turn."""

    boost_distance: float
    """Above this distance the boost may fire."""


class ControllerSettings(BaseModel):
    capture_radius: float = Field(600.0, gt=0)
    heading_threshold_deg: float = Field(90.0, gt=0, le=180)
    critical_angle: float = Field(70.0, ge=0, lt=180)
    min_thrust: int = Field(15, ge=15, le=100)
    max_thrust: int = Field(100, ge=15, le=100)
    unknown_turn_speed: float = Field(500.0, ge=0)
    sharp_turn_speed: float = Field(400.0, ge=0)
    boost_alignment_angle: float = Field(15.0, gt=0)
    boosts: int = Field(1, ge=0)
    course_width: float = Field(16000.0, gt=0)
    course_height: float = Field(9000.0, gt=0)
    thrust_reduction: ThrustReduction = ThrustReduction.PROPORTIONAL

    proximity_threshold: float | None = Field(None, gt=0)
    """Overrides the variant's derived proximity threshold."""

    boost_distance: float | None = Field(None, gt=0)
    """Overrides the variant's derived boost distance."""

    @model_validator(mode="after")
    def _check_thrust_bounds(self) -> ControllerSettings:
        if self.min_thrust > self.max_thrust:
            raise ValueError("min_thrust must not exceed max_thrust")
        return self

    @property
    def course_diagonal(self) -> float:
        return math.hypot(self.course_width, self.course_height)

    def discovery_thresholds(self) -> VariantThresholds:
        """Thresholds scaled on the course diagonal."""
        return VariantThresholds(
            proximity=self.proximity_threshold or self.course_diagonal / 7.0,
            boost_distance=self.boost_distance or self.course_diagonal / 2.7,
        )

    def fixed_course_thresholds(self) -> VariantThresholds:
        """Thresholds scaled on the checkpoint capture radius."""
        return VariantThresholds(
            proximity=self.proximity_threshold or self.capture_radius * 2.0 * 2.0,
            boost_distance=self.boost_distance or self.capture_radius * 5.0,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ControllerSettings:
        """Build settings from ``PODRACER_*`` variables in *environ* (default ``os.environ``).

        Raises ``pydantic.ValidationError`` on invalid values.
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for name in cls.model_fields:
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is not None and raw != "":
                values[name] = raw
        return cls.model_validate(values)
