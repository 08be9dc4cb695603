"""Steering commands emitted once per pod per tick."""

from __future__ import annotations

from dataclasses import dataclass

from podracer.geometry.vector import Position

BOOST_KEYWORD = "BOOST"


@dataclass(frozen=True)
class Thrust:
    """Numeric engine power."""

    power: int


@dataclass(frozen=True)
class Boost:
    """One-shot full-power override."""


@dataclass(frozen=True)
class Command:
    """Aim point plus either a thrust value or the boost."""

    target: Position
    action: Thrust | Boost

    @property
    def is_boost(self) -> bool:
        return isinstance(self.action, Boost)

    @property
    def thrust_token(self) -> str:
        """Third token of the output line: the power or ``BOOST``."""
        if isinstance(self.action, Boost):
            return BOOST_KEYWORD
        return str(self.action.power)
