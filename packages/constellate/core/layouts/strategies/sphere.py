"""Sphere layout - spiral distribution over a spherical shell."""

from __future__ import annotations

import logging
import math

import numpy as np

from constellate.core.config.models import SphereSettings
from constellate.core.layouts.errors import validate_count
from constellate.core.layouts.geometry import as_tuple, orientation_towards
from constellate.core.layouts.models import LayoutKind, LayoutTarget

logger = logging.getLogger(__name__)


class SphereLayout:
    """Spread records approximately uniformly over a sphere.

    Uses a spiral parameterisation: for record i of N the polar angle is
    phi = acos(-1 + 2i/N) and the azimuth is theta = sqrt(N * pi) * phi,
    so the spiral winds faster as it climbs and keeps the areal density
    even. Each target faces outward along its radius vector.

    For N = 1 the only record sits at phi = pi (the bottom pole).

    Attributes:
        layout_id: Unique identifier ("sphere").
    """

    layout_id: str = LayoutKind.SPHERE.value

    def __init__(self, settings: SphereSettings | None = None) -> None:
        self.settings = settings or SphereSettings()

    def generate(self, count: int) -> list[LayoutTarget]:
        """Generate sphere targets for count records."""
        count = validate_count(count)
        radius = self.settings.radius
        winding = math.sqrt(count * math.pi)

        targets: list[LayoutTarget] = []
        for i in range(count):
            # i <= N - 1 keeps the argument in [-1, 1 - 2/N]; clip absorbs rounding
            phi = math.acos(float(np.clip(-1.0 + (2.0 * i) / count, -1.0, 1.0)))
            theta = winding * phi

            position = np.array(
                [
                    radius * math.cos(theta) * math.sin(phi),
                    radius * math.cos(phi),
                    radius * math.sin(theta) * math.sin(phi),
                ]
            )
            targets.append(
                LayoutTarget(
                    position=as_tuple(position),
                    rotation=orientation_towards(position),
                )
            )

        logger.debug(f"Sphere: generated {len(targets)} targets")
        return targets


def get_sphere_layout(count: int, settings: SphereSettings | None = None) -> list[LayoutTarget]:
    """Generate sphere targets with the given (or default) settings."""
    return SphereLayout(settings).generate(count)
