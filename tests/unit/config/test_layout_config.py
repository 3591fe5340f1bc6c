"""Tests for configuration models and loading."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from constellate.core.config import (
    AppConfig,
    GridSettings,
    LayoutSettings,
    TableSettings,
    TetrahedronSettings,
    detect_format,
    load_app_config,
    load_config,
)
from constellate.core.config.loader import LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def clear_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's environment from leaking into config tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


class TestSettingsModels:
    """Tests for layout settings defaults and validation."""

    def test_defaults(self) -> None:
        """Test the built-in layout constants."""
        settings = LayoutSettings()
        assert settings.table.columns == 20
        assert settings.table.spacing == 200.0
        assert (settings.grid.width, settings.grid.height, settings.grid.depth) == (5, 4, 10)
        assert settings.sphere.radius == 1000.0
        assert settings.helix.radius == 300.0
        assert settings.helix.height_step == 50.0
        assert settings.helix.angle_step == 0.2
        assert settings.tetrahedron.base_radius == 1400.0
        assert settings.tetrahedron.jitter == 0.05
        assert settings.tetrahedron.seed is None

    def test_grid_capacity(self) -> None:
        """Test capacity is the product of the axis counts."""
        assert GridSettings().capacity == 200

    @pytest.mark.parametrize(
        "kwargs",
        [{"columns": 0}, {"spacing": 0.0}, {"spacing": -5.0}],
    )
    def test_table_rejects_invalid(self, kwargs: dict[str, float]) -> None:
        """Test non-positive table constants are rejected."""
        with pytest.raises(ValidationError):
            TableSettings(**kwargs)

    def test_jitter_bounds(self) -> None:
        """Test jitter must be within [0, 1]."""
        with pytest.raises(ValidationError):
            TetrahedronSettings(jitter=1.5)

    def test_unknown_field_rejected(self) -> None:
        """Test layout settings forbid unknown keys."""
        with pytest.raises(ValidationError):
            LayoutSettings.model_validate({"cylinder": {}})

    def test_frozen(self) -> None:
        """Test settings are immutable."""
        settings = TableSettings()
        with pytest.raises(ValidationError):
            settings.columns = 5  # type: ignore[misc]


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        ("name", "fmt"),
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.YML", "yaml")],
    )
    def test_known(self, name: str, fmt: str) -> None:
        """Test supported extensions."""
        assert detect_format(name) == fmt

    def test_unknown(self) -> None:
        """Test unsupported extensions raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported"):
            detect_format("a.toml")


class TestLoadConfig:
    """Tests for load_config."""

    def test_json(self, tmp_path: Path) -> None:
        """Test loading a JSON document."""
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"layouts": {"table": {"columns": 8}}}))
        assert load_config(path) == {"layouts": {"table": {"columns": 8}}}

    def test_yaml(self, tmp_path: Path) -> None:
        """Test loading a YAML document."""
        path = tmp_path / "c.yaml"
        path.write_text("layouts:\n  sphere:\n    radius: 250\n")
        assert load_config(path) == {"layouts": {"sphere": {"radius": 250}}}

    def test_empty_yaml(self, tmp_path: Path) -> None:
        """Test an empty YAML file loads as an empty mapping."""
        path = tmp_path / "c.yaml"
        path.write_text("")
        assert load_config(path) == {}

    def test_missing(self, tmp_path: Path) -> None:
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON raises ValueError."""
        path = tmp_path / "c.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        """Test a list document is rejected."""
        path = tmp_path / "c.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)


class TestLoadAppConfig:
    """Tests for load_app_config."""

    def test_defaults_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test defaults are used when the default file is absent."""
        monkeypatch.chdir(tmp_path)
        assert load_app_config() == AppConfig()

    def test_default_path_picked_up(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test constellate.yaml in the working directory is loaded."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "constellate.yaml").write_text("layouts:\n  helix:\n    radius: 10\n")
        assert load_app_config().layouts.helix.radius == 10.0

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test overrides and unknown top-level sections."""
        path = tmp_path / "app.yaml"
        path.write_text(
            "layouts:\n"
            "  table:\n"
            "    columns: 10\n"
            "  tetrahedron:\n"
            "    seed: 42\n"
            "logging:\n"
            "  level: DEBUG\n"
            "renderer:\n"
            "  fov: 75\n"
        )
        config = load_app_config(path)
        assert config.layouts.table.columns == 10
        assert config.layouts.table.spacing == 200.0
        assert config.layouts.tetrahedron.seed == 42
        assert config.logging.level == "DEBUG"

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        """Test an explicit path must exist."""
        with pytest.raises(FileNotFoundError):
            load_app_config(tmp_path / "nope.yaml")

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Test invalid layout constants raise ValidationError."""
        path = tmp_path / "app.json"
        path.write_text(json.dumps({"layouts": {"table": {"columns": 0}}}))
        with pytest.raises(ValidationError):
            load_app_config(path)

    def test_env_log_level(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the environment overrides the configured log level."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "warning")
        assert load_app_config().logging.level == "WARNING"

    def test_env_log_level_invalid(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an unknown level from the environment is rejected."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
        with pytest.raises(ValidationError):
            load_app_config()
