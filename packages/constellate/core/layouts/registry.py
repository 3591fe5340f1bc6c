"""Layout registry.

Maps layout identifiers to strategy instances. Lookup of an unknown
identifier raises LayoutNotFoundError; there is deliberately no fallback
layout.
"""

from __future__ import annotations

from constellate.core.layouts.errors import LayoutNotFoundError
from constellate.core.layouts.models import LayoutKind
from constellate.core.layouts.protocols import LayoutStrategy


def _key(layout_id: LayoutKind | str) -> str:
    return layout_id.value if isinstance(layout_id, LayoutKind) else str(layout_id)


class LayoutRegistry:
    """Registry of layout strategies keyed by layout_id.

    Example:
        >>> from constellate.core.layouts.strategies import SphereLayout
        >>> registry = LayoutRegistry()
        >>> registry.register(SphereLayout())
        >>> len(registry.get(LayoutKind.SPHERE).generate(4))
        4
    """

    def __init__(self) -> None:
        self._layouts: dict[str, LayoutStrategy] = {}

    def register(self, layout: LayoutStrategy) -> None:
        """Register a strategy, replacing any with the same layout_id."""
        self._layouts[layout.layout_id] = layout

    def get(self, layout_id: LayoutKind | str) -> LayoutStrategy:
        """Get a strategy by ID.

        Args:
            layout_id: LayoutKind member or its string value.

        Returns:
            The registered strategy.

        Raises:
            LayoutNotFoundError: If no strategy is registered under layout_id.
        """
        key = _key(layout_id)
        if key in self._layouts:
            return self._layouts[key]

        raise LayoutNotFoundError(key, available=self.list_layouts())

    def has(self, layout_id: LayoutKind | str) -> bool:
        """Check if a strategy is registered."""
        return _key(layout_id) in self._layouts

    def list_layouts(self) -> list[str]:
        """List all registered layout IDs in registration order."""
        return list(self._layouts.keys())
