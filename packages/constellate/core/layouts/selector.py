"""Layout selection.

The presentation layer asks for a layout by identifier and gets back the
target list for its current record count.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging

from constellate.core.layouts.defaults import create_default_layout_registry
from constellate.core.layouts.errors import validate_count
from constellate.core.layouts.models import LayoutKind, LayoutTarget
from constellate.core.layouts.ordering import order_targets
from constellate.core.layouts.registry import LayoutRegistry

logger = logging.getLogger(__name__)


class LayoutSelector:
    """Dispatch layout requests to registered strategies.

    Example:
        >>> selector = LayoutSelector()
        >>> targets = selector.select("sphere", 37)
        >>> len(targets)
        37
    """

    def __init__(self, registry: LayoutRegistry | None = None) -> None:
        self.registry = registry or create_default_layout_registry()

    def available(self) -> list[str]:
        """Identifiers that select() accepts."""
        return self.registry.list_layouts()

    def select(
        self,
        layout_id: LayoutKind | str,
        count: int,
        *,
        ranks: Sequence[float] | None = None,
    ) -> list[LayoutTarget]:
        """Compute targets for a layout.

        Args:
            layout_id: LayoutKind member or its string value.
            count: Number of records (>= 0).
            ranks: Optional rank per record; when given, the record with
                the lowest rank receives the layout's first slot.

        Returns:
            Exactly count targets in record order.

        Raises:
            InvalidCountError: If count is invalid.
            LayoutNotFoundError: If layout_id is not registered.
            InvalidOrderingError: If ranks does not have count entries.
        """
        count = validate_count(count)
        strategy = self.registry.get(layout_id)
        targets = strategy.generate(count)

        if ranks is not None:
            targets = order_targets(targets, ranks)

        logger.debug(f"Selected layout {strategy.layout_id!r} for {count} records")
        return targets


def get_layout_targets(
    layout_id: LayoutKind | str,
    count: int,
    *,
    ranks: Sequence[float] | None = None,
    registry: LayoutRegistry | None = None,
) -> list[LayoutTarget]:
    """Compute targets for a layout using the given (or default) registry.

    See LayoutSelector.select for arguments and errors.
    """
    return LayoutSelector(registry).select(layout_id, count, ranks=ranks)
