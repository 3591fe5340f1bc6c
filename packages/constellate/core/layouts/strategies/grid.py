"""Grid layout - cubic lattice centered on the origin."""

from __future__ import annotations

import logging

from constellate.core.config.models import GridSettings
from constellate.core.layouts.errors import validate_count
from constellate.core.layouts.models import LayoutKind, LayoutTarget

logger = logging.getLogger(__name__)


class GridLayout:
    """Three-dimensional lattice of width x height x depth cells.

    Record i occupies cell (i mod W, floor(i / W) mod H, floor(i / (W*H)) mod D).
    Counts above the lattice capacity wrap around and reuse cells.

    Attributes:
        layout_id: Unique identifier ("grid").
    """

    layout_id: str = LayoutKind.GRID.value

    def __init__(self, settings: GridSettings | None = None) -> None:
        self.settings = settings or GridSettings()

    def cell(self, index: int) -> tuple[int, int, int]:
        """Lattice cell (ix, iy, iz) assigned to a record index."""
        w, h, d = self.settings.width, self.settings.height, self.settings.depth
        return (index % w, (index // w) % h, (index // (w * h)) % d)

    def generate(self, count: int) -> list[LayoutTarget]:
        """Generate grid targets for count records."""
        count = validate_count(count)
        s = self.settings

        targets: list[LayoutTarget] = []
        for i in range(count):
            ix, iy, iz = self.cell(i)
            x = (ix - (s.width - 1) / 2) * s.spacing
            y = ((s.height - 1) / 2 - iy) * s.spacing
            z = (iz - (s.depth - 1) / 2) * s.spacing
            targets.append(LayoutTarget(position=(x, y, z)))

        if count > s.capacity:
            logger.debug(f"Grid: {count} records exceed {s.capacity} cells; cells are reused")
        logger.debug(f"Grid: generated {len(targets)} targets")
        return targets


def get_grid_layout(count: int, settings: GridSettings | None = None) -> list[LayoutTarget]:
    """Generate grid targets with the given (or default) settings."""
    return GridLayout(settings).generate(count)
