"""Built-in layout strategies.

Each strategy maps a record count to the same number of static
LayoutTarget placements.
"""

from constellate.core.layouts.strategies.grid import GridLayout, get_grid_layout
from constellate.core.layouts.strategies.helix import (
    DoubleHelixLayout,
    get_double_helix_layout,
)
from constellate.core.layouts.strategies.sphere import SphereLayout, get_sphere_layout
from constellate.core.layouts.strategies.table import TableLayout, get_table_layout
from constellate.core.layouts.strategies.tetrahedron import (
    TetrahedronLayout,
    face_point_counts,
    get_tetrahedron_layout,
)

__all__ = [
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
]
