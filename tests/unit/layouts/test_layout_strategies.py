"""Tests shared by every built-in layout strategy."""

from __future__ import annotations

import math

import pytest

from constellate.core.config.models import (
    GridSettings,
    HelixSettings,
    SphereSettings,
    TableSettings,
)
from constellate.core.layouts import (
    DoubleHelixLayout,
    GridLayout,
    InvalidCountError,
    LayoutStrategy,
    SphereLayout,
    TableLayout,
    TetrahedronLayout,
    get_double_helix_layout,
    get_grid_layout,
    get_sphere_layout,
    get_table_layout,
)

COUNTS = [0, 1, 2, 3, 4, 5, 20, 37, 200, 1000]


def all_strategies() -> list[LayoutStrategy]:
    return [
        TableLayout(),
        GridLayout(),
        SphereLayout(),
        DoubleHelixLayout(),
        TetrahedronLayout(),
    ]


class TestCommonContract:
    """Properties every strategy must satisfy."""

    @pytest.mark.parametrize("strategy", all_strategies(), ids=lambda s: s.layout_id)
    @pytest.mark.parametrize("count", COUNTS)
    def test_exact_length(self, strategy: LayoutStrategy, count: int) -> None:
        """Test generate(N) returns exactly N targets."""
        assert len(strategy.generate(count)) == count

    @pytest.mark.parametrize("strategy", all_strategies(), ids=lambda s: s.layout_id)
    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_small_counts_are_finite(self, strategy: LayoutStrategy, count: int) -> None:
        """Test tiny counts never produce NaN or infinity."""
        for target in strategy.generate(count):
            assert all(math.isfinite(c) for c in (*target.position, *target.rotation))

    @pytest.mark.parametrize("strategy", all_strategies(), ids=lambda s: s.layout_id)
    def test_deterministic(self, strategy: LayoutStrategy) -> None:
        """Test repeated calls return identical targets."""
        assert strategy.generate(37) == strategy.generate(37)

    @pytest.mark.parametrize("strategy", all_strategies(), ids=lambda s: s.layout_id)
    @pytest.mark.parametrize("bad", [-1, -100, 2.5, True, "3", None])
    def test_invalid_count_rejected(self, strategy: LayoutStrategy, bad: object) -> None:
        """Test invalid counts raise before any computation."""
        with pytest.raises(InvalidCountError):
            strategy.generate(bad)  # type: ignore[arg-type]

    def test_invalid_count_is_value_error(self) -> None:
        """Test InvalidCountError can be caught as ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            TableLayout().generate(-1)


class TestTableLayout:
    """Tests for the planar table."""

    def test_three_records_one_row(self) -> None:
        """Test three records sit left to right in the z = 0 plane."""
        targets = get_table_layout(3)
        xs = [t.position[0] for t in targets]
        assert xs == sorted(xs)
        assert xs[0] < xs[1] < xs[2]
        for t in targets:
            assert t.position[1] == 0.0
            assert t.position[2] == 0.0
            assert t.rotation == (0.0, 0.0, 0.0)

    def test_twenty_first_record_starts_second_row(self) -> None:
        """Test index 20 wraps to column 0 one row below index 0."""
        targets = get_table_layout(21)
        first, last = targets[0], targets[20]
        assert first.position == pytest.approx((-9.5 * 200, 0.5 * 200, 0.0))
        assert last.position == pytest.approx((-9.5 * 200, -0.5 * 200, 0.0))

    def test_centered_on_origin(self) -> None:
        """Test a full table has its centroid at the origin."""
        targets = get_table_layout(40)
        assert sum(t.position[0] for t in targets) == pytest.approx(0.0)
        assert sum(t.position[1] for t in targets) == pytest.approx(0.0)

    def test_rows_follow_count(self) -> None:
        """Test row count is ceil(N / columns)."""
        targets = get_table_layout(7, TableSettings(columns=3, spacing=10.0))
        ys = sorted({t.position[1] for t in targets}, reverse=True)
        assert ys == pytest.approx([10.0, 0.0, -10.0])


class TestGridLayout:
    """Tests for the cubic lattice."""

    def test_first_cell(self) -> None:
        """Test index 0 lands in the corner cell."""
        target = get_grid_layout(1)[0]
        assert target.position == pytest.approx((-400.0, 300.0, -900.0))
        assert target.rotation == (0.0, 0.0, 0.0)

    def test_cells_distinct_within_capacity(self) -> None:
        """Test every record gets its own cell up to capacity."""
        targets = get_grid_layout(200)
        assert len({t.position for t in targets}) == 200

    def test_wraps_past_capacity(self) -> None:
        """Test index capacity reuses cell 0."""
        targets = get_grid_layout(201)
        assert targets[200].position == targets[0].position

    def test_cell_indices(self) -> None:
        """Test width-major cell assignment."""
        layout = GridLayout(GridSettings(width=2, height=2, depth=2, spacing=1.0))
        assert layout.cell(0) == (0, 0, 0)
        assert layout.cell(1) == (1, 0, 0)
        assert layout.cell(2) == (0, 1, 0)
        assert layout.cell(4) == (0, 0, 1)
        assert layout.cell(8) == (0, 0, 0)


class TestSphereLayout:
    """Tests for the spiral sphere."""

    @pytest.mark.parametrize("count", [1, 2, 37, 200])
    def test_points_on_shell(self, count: int) -> None:
        """Test every target lies on the configured radius."""
        for t in get_sphere_layout(count, SphereSettings(radius=500.0)):
            assert math.hypot(*t.position) == pytest.approx(500.0)

    def test_single_record_at_bottom_pole(self) -> None:
        """Test N = 1 places the record at phi = pi."""
        target = get_sphere_layout(1)[0]
        assert target.position == pytest.approx((0.0, -1000.0, 0.0), abs=1e-9)

    def test_faces_outward(self) -> None:
        """Test pitch matches the elevation of the radius vector."""
        for t in get_sphere_layout(20):
            x, y, z = t.position
            pitch, yaw, roll = t.rotation
            assert pitch == pytest.approx(math.atan2(y, math.hypot(x, z)))
            assert yaw == pytest.approx(math.atan2(x, z))
            assert roll == 0.0

    def test_heights_increase(self) -> None:
        """Test the spiral climbs from bottom to top."""
        ys = [t.position[1] for t in get_sphere_layout(50)]
        assert ys == sorted(ys)


class TestDoubleHelixLayout:
    """Tests for the interleaved coils."""

    def test_constant_radius(self) -> None:
        """Test every target is at the coil radius from the Y axis."""
        for t in get_double_helix_layout(37):
            x, _, z = t.position
            assert x * x + z * z == pytest.approx(300.0**2)

    def test_heights_increase_per_strand(self) -> None:
        """Test each strand climbs monotonically."""
        targets = get_double_helix_layout(20)
        for parity in (0, 1):
            ys = [t.position[1] for t in targets[parity::2]]
            assert all(a < b for a, b in zip(ys, ys[1:]))

    def test_strands_half_turn_apart(self) -> None:
        """Test odd records are phase-shifted by pi."""
        settings = HelixSettings(radius=1.0, height_step=1.0, angle_step=0.0)
        targets = get_double_helix_layout(2, settings)
        assert targets[0].position[0] == pytest.approx(1.0)
        assert targets[1].position[0] == pytest.approx(-1.0)

    def test_centered_vertically(self) -> None:
        """Test y runs from -N/2 steps."""
        targets = get_double_helix_layout(10)
        assert targets[0].position[1] == pytest.approx(-5 * 50.0)
        assert targets[9].position[1] == pytest.approx(4 * 50.0)

    def test_faces_outward(self) -> None:
        """Test yaw is the angle plus a quarter turn."""
        targets = get_double_helix_layout(3)
        assert targets[0].rotation == pytest.approx((0.0, math.pi / 2, 0.0))
        assert targets[2].rotation == pytest.approx((0.0, 0.4 + math.pi / 2, 0.0))
