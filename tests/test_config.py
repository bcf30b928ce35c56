"""
Tests for terrain configuration and application settings.
"""

import pytest
from pydantic import ValidationError
from py_terrain.config import Settings, TerrainConfig, is_valid_size
from py_terrain.errors import InvalidConfigError


class TestTerrainConfig:
    """Test TerrainConfig validation."""

    def test_defaults(self):
        config = TerrainConfig()

        assert config.size == 9
        assert config.noise == 0.1
        assert config.deviation == 5.0
        assert config.roughness == 13.0

    @pytest.mark.parametrize("size,valid", [
        (1, True), (2, True), (3, True), (5, True), (9, True), (513, True), (1025, True),
        (4, False), (6, False), (7, False), (10, False), (100, False),
    ])
    def test_is_valid_size(self, size, valid):
        assert is_valid_size(size) is valid

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            TerrainConfig(size=9, seed=3)

    def test_frozen(self):
        config = TerrainConfig()
        with pytest.raises(ValidationError):
            config.size = 17

    @pytest.mark.parametrize("noise", [float("inf"), float("nan")])
    def test_noise_must_be_finite(self, noise):
        with pytest.raises(ValidationError):
            TerrainConfig(noise=noise)

    def test_strict_size(self):
        with pytest.raises(ValidationError):
            TerrainConfig(size=9.0)

    def test_create_wraps_validation_errors(self):
        with pytest.raises(InvalidConfigError) as exc_info:
            TerrainConfig.create(size=12)

        assert "2^n + 1" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValidationError)


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PY_TERRAIN_DEFAULT_SIZE", raising=False)
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.default_size == 9
        assert settings.max_size == 4097

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PY_TERRAIN_DEFAULT_SIZE", "17")
        monkeypatch.setenv("PY_TERRAIN_DEFAULT_NOISE", "0.4")
        monkeypatch.setenv("PY_TERRAIN_LOG_FORMAT", "console")
        settings = Settings()

        assert settings.default_size == 17
        assert settings.default_noise == 0.4
        assert settings.log_format == "console"

    def test_config_from_settings(self):
        settings = Settings(default_size=33, default_noise=0.7)
        config = TerrainConfig.from_settings(settings)

        assert config.size == 33
        assert config.noise == 0.7

    def test_config_from_settings_overrides(self):
        settings = Settings(default_size=33)
        config = TerrainConfig.from_settings(settings, size=5, roughness=2)

        assert config.size == 5
        assert config.roughness == 2

    def test_config_from_settings_max_size(self):
        settings = Settings(max_size=17)
        with pytest.raises(InvalidConfigError, match="exceeds"):
            TerrainConfig.from_settings(settings, size=33)
