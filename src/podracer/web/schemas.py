"""Pydantic request/response schemas for the decision inspection API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class Point(BaseModel):
    x: float
    y: float


class GridPoint(BaseModel):
    x: int
    y: int


class DecideRequest(BaseModel):
    variant: Literal["discovery", "fixed"] = "fixed"
    position: Point
    velocity: Point = Field(default_factory=lambda: Point(x=0.0, y=0.0))
    checkpoint: GridPoint
    after_next: GridPoint | None = None
    heading: float | None = None
    """Pod facing angle in degrees; used when heading_error is not given."""

    heading_error: float | None = None
    distance: float | None = Field(None, ge=0)
    boost_available: bool = True


class HealthResponse(BaseModel):
    status: str
    version: str


class DecideResponse(BaseModel):
    target_x: int
    target_y: int
    thrust: int | None
    boost: bool
    aim_reason: str
    curvature: float | None
    command: str
