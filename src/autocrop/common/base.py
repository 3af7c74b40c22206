"""
Base data models - fundamental types without dependencies.

This module contains basic Pydantic models used throughout the engine:
- Point: integer pixel coordinate
- RectangleRange: inclusive bounding box accumulator

IMPORTANT: This module must NOT import from core, services, schemas or api
to avoid circular dependencies.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field

from autocrop.common.constants import CropConstants


class Point(BaseModel):
    """2D pixel coordinate"""

    x: int = Field(..., ge=0, description="X coordinate")
    y: int = Field(..., ge=0, description="Y coordinate")


class RectangleRange(BaseModel):
    """
    Inclusive bounding box grown one coordinate at a time.

    A fresh range is empty: ``min`` sits at the coordinate maximum and ``max``
    at the origin, so the first ``correct`` call collapses it onto that point.
    Width and height are ``max - min``, which means a single point has a width
    and height of zero.
    """

    min: Point = Field(
        default_factory=lambda: Point(x=CropConstants.COORD_MAX, y=CropConstants.COORD_MAX)
    )
    max: Point = Field(default_factory=lambda: Point(x=0, y=0))

    def is_empty(self) -> bool:
        """True while no coordinate has been accumulated."""
        return self.min.x > self.max.x or self.min.y > self.max.y

    def width(self) -> int:
        if self.is_empty():
            return 0
        return self.max.x - self.min.x

    def height(self) -> int:
        if self.is_empty():
            return 0
        return self.max.y - self.min.y

    def correct(self, x: int, y: int) -> bool:
        """
        Grow the range so it includes (x, y).

        Args:
            x: X coordinate
            y: Y coordinate

        Returns:
            True if any bound moved
        """
        changed = False
        if x < self.min.x:
            self.min.x = x
            changed = True
        if y < self.min.y:
            self.min.y = y
            changed = True
        if x > self.max.x:
            self.max.x = x
            changed = True
        if y > self.max.y:
            self.max.y = y
            changed = True
        return changed

    def contains(self, x: int, y: int) -> bool:
        """Check if point is inside the range (both ends inclusive)."""
        return self.min.x <= x <= self.max.x and self.min.y <= y <= self.max.y

    def to_dict(self) -> Dict[str, object]:
        """Convert to dictionary for API responses."""
        return {
            "empty": self.is_empty(),
            "min": {"x": self.min.x, "y": self.min.y},
            "max": {"x": self.max.x, "y": self.max.y},
            "width": self.width(),
            "height": self.height(),
        }
