"""Shared pytest fixtures for constellate tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from constellate.core.layouts.defaults import create_default_layout_registry
from constellate.core.layouts.registry import LayoutRegistry

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Layout Fixtures
# ============================================================================


@pytest.fixture
def registry() -> LayoutRegistry:
    """Default registry with every built-in layout."""
    return create_default_layout_registry()


@pytest.fixture
def seeded_rng() -> np.random.Generator:
    """Reproducible random source for the surface top-up path."""
    return np.random.default_rng(1234)


# ============================================================================
# Record Fixtures
# ============================================================================


SAMPLE_CSV = """Name,Net Worth,Company,Country,Interest
Alice Moreau,"$150,000",Acme Corp,France,Sailing
Bob Tanaka,"$250,000",Globex,Japan,Chess
Carla Diaz,"$90,500",Initech,Mexico,Running

Dev Patel,"$250,000",Umbrella,India,Cooking
"""


@pytest.fixture
def sample_csv_text() -> str:
    """Small record table with a blank line and a net worth tie."""
    return SAMPLE_CSV


@pytest.fixture
def sample_csv_path(tmp_path: Path) -> Path:
    """The sample record table written to disk."""
    path = tmp_path / "records.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path
