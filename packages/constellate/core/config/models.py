"""Configuration models for Constellate."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class TableSettings(BaseModel):
    """Planar table layout constants.

    The row count is implied by the record count (ceil(N / columns)).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    columns: int = Field(default=20, ge=1, description="Number of columns")
    spacing: float = Field(default=200.0, gt=0.0, description="Distance between cell centers")


class GridSettings(BaseModel):
    """Cubic grid lattice constants (cell counts per axis)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    width: int = Field(default=5, ge=1, description="Cells along X")
    height: int = Field(default=4, ge=1, description="Cells along Y")
    depth: int = Field(default=10, ge=1, description="Cells along Z")
    spacing: float = Field(default=200.0, gt=0.0, description="Distance between cell centers")

    @property
    def capacity(self) -> int:
        """Number of distinct cells before indices wrap."""
        return self.width * self.height * self.depth


class SphereSettings(BaseModel):
    """Spherical shell constants."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    radius: float = Field(default=1000.0, gt=0.0, description="Shell radius")


class HelixSettings(BaseModel):
    """Double helix constants."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    radius: float = Field(default=300.0, gt=0.0, description="Coil radius")
    height_step: float = Field(default=50.0, gt=0.0, description="Vertical rise per record")
    angle_step: float = Field(default=0.2, description="Angular advance per record (radians)")


class TetrahedronSettings(BaseModel):
    """Regular tetrahedron surface constants."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_radius: float = Field(
        default=1400.0, gt=0.0, description="Circumradius of the base triangle"
    )
    jitter: float = Field(
        default=0.05,
        ge=0.0,
        le=1.0,
        description="Barycentric perturbation width for topped-up face points",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the top-up random source (None = nondeterministic)",
    )


class LayoutSettings(BaseModel):
    """Constants for every built-in layout."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    table: TableSettings = TableSettings()
    grid: GridSettings = GridSettings()
    sphere: SphereSettings = SphereSettings()
    helix: HelixSettings = HelixSettings()
    tetrahedron: TetrahedronSettings = TetrahedronSettings()


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (None = stdout)")


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    layouts: LayoutSettings = LayoutSettings()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("constellate.yaml")
