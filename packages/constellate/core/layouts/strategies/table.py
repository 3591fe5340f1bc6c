"""Table layout - planar rows and columns, the home layout."""

from __future__ import annotations

import logging
import math

from constellate.core.config.models import TableSettings
from constellate.core.layouts.errors import validate_count
from constellate.core.layouts.models import LayoutKind, LayoutTarget

logger = logging.getLogger(__name__)


class TableLayout:
    """Planar grid with a fixed column count in the z = 0 plane.

    Records fill rows left to right, top to bottom. The number of rows is
    ceil(N / columns) and the whole table is centered on the origin.
    Every target faces forward (zero rotation).

    Attributes:
        layout_id: Unique identifier ("table").

    Example:
        >>> targets = TableLayout().generate(3)
        >>> [t.position[2] for t in targets]
        [0.0, 0.0, 0.0]
    """

    layout_id: str = LayoutKind.TABLE.value

    def __init__(self, settings: TableSettings | None = None) -> None:
        self.settings = settings or TableSettings()

    def generate(self, count: int) -> list[LayoutTarget]:
        """Generate table targets for count records."""
        count = validate_count(count)
        columns = self.settings.columns
        spacing = self.settings.spacing
        rows = math.ceil(count / columns)

        targets: list[LayoutTarget] = []
        for i in range(count):
            col = i % columns
            row = i // columns
            x = (col - (columns - 1) / 2) * spacing
            y = ((rows - 1) / 2 - row) * spacing
            targets.append(LayoutTarget(position=(x, y, 0.0)))

        logger.debug(f"Table: generated {len(targets)} targets in {rows} rows")
        return targets


def get_table_layout(count: int, settings: TableSettings | None = None) -> list[LayoutTarget]:
    """Generate table targets with the given (or default) settings."""
    return TableLayout(settings).generate(count)
