"""Per-pod state tracking."""

from podracer.pod.state import PodState, PodStateTracker, TrackerPhase

__all__ = ["PodState", "PodStateTracker", "TrackerPhase"]
