"""Data models for layout generation.

All models are immutable. A layout strategy returns a plain list of
LayoutTarget values; index i of that list belongs to record i of the
caller's ordering.
"""

from __future__ import annotations

from enum import Enum
import math

from pydantic import BaseModel, ConfigDict, field_validator

Vec3 = tuple[float, float, float]


class LayoutKind(str, Enum):
    """Identifiers of the built-in layouts."""

    TABLE = "table"
    GRID = "grid"
    SPHERE = "sphere"
    HELIX = "helix"
    TETRAHEDRON = "tetrahedron"


class LayoutTarget(BaseModel):
    """Target placement of a single entity after a layout change.

    Attributes:
        position: (x, y, z) position in scene units.
        rotation: (rx, ry, rz) Euler angles in radians.

    Example:
        >>> target = LayoutTarget(position=(0.0, 100.0, 0.0), rotation=(0.0, 0.0, 0.0))
        >>> target.position[1]
        100.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    position: Vec3
    rotation: Vec3 = (0.0, 0.0, 0.0)

    @field_validator("position", "rotation")
    @classmethod
    def validate_finite(cls, v: Vec3) -> Vec3:
        """Reject NaN and infinite components."""
        if not all(math.isfinite(c) for c in v):
            raise ValueError(f"Layout coordinates must be finite, got {v}")
        return v


class TriangleFace(BaseModel):
    """A triangular face of a polyhedral layout surface.

    Attributes:
        vertices: The three corners, in traversal order.
        normal: Outward unit normal.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    vertices: tuple[Vec3, Vec3, Vec3]
    normal: Vec3
