"""Layout generation engine.

Maps a record count to static 3D placements for several arrangements
(table, grid, sphere, double helix, tetrahedron). Animating between
layouts is left to the caller.
"""

from constellate.core.layouts.defaults import create_default_layout_registry
from constellate.core.layouts.errors import (
    InvalidCountError,
    InvalidOrderingError,
    LayoutError,
    LayoutNotFoundError,
)
from constellate.core.layouts.models import LayoutKind, LayoutTarget, TriangleFace
from constellate.core.layouts.protocols import LayoutStrategy
from constellate.core.layouts.registry import LayoutRegistry
from constellate.core.layouts.selector import LayoutSelector, get_layout_targets
from constellate.core.layouts.strategies import (
    DoubleHelixLayout,
    GridLayout,
    SphereLayout,
    TableLayout,
    TetrahedronLayout,
    face_point_counts,
    get_double_helix_layout,
    get_grid_layout,
    get_sphere_layout,
    get_table_layout,
    get_tetrahedron_layout,
)

__all__ = [
    # Models
    "LayoutKind",
    "LayoutTarget",
    "TriangleFace",
    # Protocol
    "LayoutStrategy",
    # Errors
    "InvalidCountError",
    "InvalidOrderingError",
    "LayoutError",
    "LayoutNotFoundError",
    # Strategies
    "DoubleHelixLayout",
    "GridLayout",
    "SphereLayout",
    "TableLayout",
    "TetrahedronLayout",
    "face_point_counts",
    "get_double_helix_layout",
    "get_grid_layout",
    "get_sphere_layout",
    "get_table_layout",
    "get_tetrahedron_layout",
    # Selection
    "LayoutRegistry",
    "LayoutSelector",
    "create_default_layout_registry",
    "get_layout_targets",
]
