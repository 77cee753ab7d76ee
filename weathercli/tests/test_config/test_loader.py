"""Tests for config loading, validation, and dotted-key lookup."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from weathercli.config.loader import get_config_value, load_config
from weathercli.config.schema import AppConfig, UnitSystem


class TestLoadConfig:
    def test_missing_file_uses_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "nope.yaml")
        assert config == AppConfig()
        assert config.api.units == UnitSystem.METRIC
        assert config.display.forecast_days == 5

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.storage.favorites_file == "favorite_cities.json"

    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.api.base_url == "https://test-owm.example.com"
        assert config.display.timezone == "UTC"
        assert config.storage.credential_file.endswith("weather_config.json")

    def test_units_and_lang(self, tmp_path: Path):
        path = tmp_path / "c.yaml"
        with open(path, "w") as f:
            yaml.dump({"api": {"units": "imperial", "lang": "ja"}}, f)
        config = load_config(path)
        assert config.api.units == UnitSystem.IMPERIAL
        assert config.api.lang == "ja"

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"api": {"retries": 3}}, f)
        with pytest.raises(ValidationError):
            load_config(path)


class TestSchema:
    def test_forecast_days_capped(self):
        with pytest.raises(ValidationError):
            AppConfig(display={"forecast_days": 6})

    def test_no_timeout_setting(self):
        with pytest.raises(ValidationError):
            AppConfig(api={"timeout_seconds": 10})

    def test_unknown_timezone_rejected(self):
        with pytest.raises(ValidationError, match="Mars/Olympus"):
            AppConfig(display={"timezone": "Mars/Olympus"})

    def test_known_timezone(self):
        assert AppConfig(display={"timezone": "Asia/Tokyo"}).display.timezone == "Asia/Tokyo"

    def test_invalid_units(self):
        with pytest.raises(ValidationError):
            AppConfig(api={"units": "furlongs"})


class TestGetConfigValue:
    def test_dotted_key(self):
        assert get_config_value(AppConfig(), "api.units") == UnitSystem.METRIC

    def test_top_level(self):
        val = get_config_value(AppConfig(), "display")
        assert val.forecast_days == 5

    def test_invalid_key(self):
        with pytest.raises(KeyError):
            get_config_value(AppConfig(), "api.nonexistent")

    def test_key_below_leaf(self):
        with pytest.raises(KeyError):
            get_config_value(AppConfig(), "api.lang.code")
