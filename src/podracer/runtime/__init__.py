"""Controller runtime: settings, tick orchestration, game loops and tracing."""

from podracer.runtime.config import ControllerSettings, VariantThresholds
from podracer.runtime.controller import (
    DiscoveryController,
    FixedCourseController,
    PodPilot,
    heading_error,
)
from podracer.runtime.loop import run_discovery, run_fixed
from podracer.runtime.trace import LoggingTraceSink, NullTraceSink, TraceEvent

__all__ = [
    "ControllerSettings",
    "DiscoveryController",
    "FixedCourseController",
    "LoggingTraceSink",
    "NullTraceSink",
    "PodPilot",
    "TraceEvent",
    "VariantThresholds",
    "heading_error",
    "run_discovery",
    "run_fixed",
]
