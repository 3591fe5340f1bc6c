"""Default layout registry setup.

Provides a factory that returns a registry with every built-in layout
registered, configured from LayoutSettings.
"""

from __future__ import annotations

from constellate.core.config.models import LayoutSettings
from constellate.core.layouts.registry import LayoutRegistry
from constellate.core.layouts.strategies import (
    DoubleHelixLayout,
    GridLayout,
    SphereLayout,
    TableLayout,
    TetrahedronLayout,
)


def create_default_layout_registry(settings: LayoutSettings | None = None) -> LayoutRegistry:
    """Create a layout registry with all built-in layouts.

    Args:
        settings: Layout constants; defaults to LayoutSettings().

    Returns:
        LayoutRegistry with table, sphere, helix, grid and tetrahedron.
    """
    settings = settings or LayoutSettings()
    registry = LayoutRegistry()

    # Home layout first
    registry.register(TableLayout(settings.table))
    registry.register(SphereLayout(settings.sphere))
    registry.register(DoubleHelixLayout(settings.helix))
    registry.register(GridLayout(settings.grid))
    registry.register(TetrahedronLayout(settings.tetrahedron))

    return registry
