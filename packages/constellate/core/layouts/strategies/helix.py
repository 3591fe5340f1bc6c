"""Double helix layout - two interleaved coils."""

from __future__ import annotations

import logging
import math

from constellate.core.config.models import HelixSettings
from constellate.core.layouts.errors import validate_count
from constellate.core.layouts.models import LayoutKind, LayoutTarget

logger = logging.getLogger(__name__)


class DoubleHelixLayout:
    """Two coils offset by half a turn, stacked along the Y axis.

    Even indices form one strand, odd indices the other (phase + pi).
    Height grows linearly with the index and the helix is centered on
    y = 0, so sequence order matches vertical order: rank-ordered input
    puts the first record at the bottom extremum.

    Targets face outward (yaw = angle + pi/2) with zero pitch.

    Attributes:
        layout_id: Unique identifier ("helix").
    """

    layout_id: str = LayoutKind.HELIX.value

    def __init__(self, settings: HelixSettings | None = None) -> None:
        self.settings = settings or HelixSettings()

    def generate(self, count: int) -> list[LayoutTarget]:
        """Generate double helix targets for count records."""
        count = validate_count(count)
        s = self.settings

        targets: list[LayoutTarget] = []
        for i in range(count):
            phase = 0.0 if i % 2 == 0 else math.pi
            angle = s.angle_step * i + phase
            x = s.radius * math.cos(angle)
            z = s.radius * math.sin(angle)
            y = (i - count / 2) * s.height_step

            targets.append(
                LayoutTarget(position=(x, y, z), rotation=(0.0, angle + math.pi / 2, 0.0))
            )

        logger.debug(f"Helix: generated {len(targets)} targets")
        return targets


def get_double_helix_layout(
    count: int, settings: HelixSettings | None = None
) -> list[LayoutTarget]:
    """Generate double helix targets with the given (or default) settings."""
    return DoubleHelixLayout(settings).generate(count)
