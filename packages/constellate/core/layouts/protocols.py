"""Layout strategy protocol.

Every layout shares one contract: given a record count N it returns
exactly N LayoutTarget values. Strategies hold only immutable settings,
so a single instance can be shared between callers.
"""

from __future__ import annotations

from typing import Protocol

from constellate.core.layouts.models import LayoutTarget


class LayoutStrategy(Protocol):
    """Protocol for layout strategies.

    Attributes:
        layout_id: Unique identifier for this layout (e.g., "sphere").
    """

    layout_id: str

    def generate(self, count: int) -> list[LayoutTarget]:
        """Generate targets for count records.

        Args:
            count: Number of records to place (>= 0).

        Returns:
            List of exactly count targets.

        Raises:
            InvalidCountError: If count is negative or not an integer.
        """
        ...
