"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weathercli.config.schema import (
    ApiConfig,
    AppConfig,
    DisplayConfig,
    StorageConfig,
)
from weathercli.session import Session

TEST_BASE_URL = "https://test-owm.example.com"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def current_tokyo(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "owm_current_tokyo.json") as f:
        return json.load(f)


@pytest.fixture
def forecast_london(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "owm_forecast_london.json") as f:
        return json.load(f)


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    """Config pointing at a fake API host and tmp_path storage, in UTC."""
    return AppConfig(
        api=ApiConfig(base_url=TEST_BASE_URL),
        storage=StorageConfig(
            credential_file=str(tmp_path / "weather_config.json"),
            favorites_file=str(tmp_path / "favorite_cities.json"),
        ),
        display=DisplayConfig(timezone="UTC"),
    )


@pytest.fixture
def session(app_config: AppConfig) -> Session:
    """Session with a saved API key and no favorites."""
    s = Session.open(app_config)
    s.save_credential("test-key-123")
    return s


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a config YAML with tmp_path storage and return its path."""
    data = {
        "api": {"base_url": TEST_BASE_URL},
        "storage": {
            "credential_file": str(tmp_path / "weather_config.json"),
            "favorites_file": str(tmp_path / "favorite_cities.json"),
        },
        "display": {"timezone": "UTC"},
    }
    path = tmp_path / "weathercli.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
