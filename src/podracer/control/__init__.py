"""Targeting and thrust control.

Public API
----------
AimPointSolver  - lead targeting with capture-radius clamp
ThrustPolicy    - engine power decision table
BoostPolicy     - single-use boost trigger
Command         - aim point + Thrust | Boost
"""

from podracer.control.aim import AimPointSolver, AimResult
from podracer.control.boost import BoostPolicy
from podracer.control.commands import Boost, Command, Thrust
from podracer.control.thrust import ThrustPolicy, ThrustReduction, curvature_angle

__all__ = [
    "AimPointSolver",
    "AimResult",
    "Boost",
    "BoostPolicy",
    "Command",
    "Thrust",
    "ThrustPolicy",
    "ThrustReduction",
    "curvature_angle",
]
