"""Tests for session startup and client wiring."""

import json
from pathlib import Path

import pytest

from weathercli.config.schema import AppConfig
from weathercli.ingest.openweather_client import InvalidCredential, OpenWeatherClient
from weathercli.session import Session


class TestSessionOpen:
    def test_loads_both_files(self, app_config: AppConfig):
        Path(app_config.storage.favorites_file).write_text(json.dumps(["Tokyo"]))
        Path(app_config.storage.credential_file).write_text(
            json.dumps({"apiKey": "abc", "setupDate": "2026-10-19T00:00:00+00:00"})
        )
        session = Session.open(app_config)
        assert session.favorites == ["Tokyo"]
        assert session.credential.api_key == "abc"

    def test_empty_start(self, app_config: AppConfig):
        session = Session.open(app_config)
        assert session.favorites == []
        assert session.credential is None

    def test_display_tz(self, app_config: AppConfig):
        assert str(Session.open(app_config).display_tz) == "UTC"
        assert Session.open(AppConfig(storage=app_config.storage)).display_tz is None


class TestOpenClient:
    def test_requires_credential(self, app_config: AppConfig):
        with pytest.raises(InvalidCredential):
            Session.open(app_config).open_client()

    def test_uses_config(self, session: Session):
        client = session.open_client()
        assert isinstance(client, OpenWeatherClient)
        assert client.api_key == "test-key-123"
        assert client.base_url == "https://test-owm.example.com"

    def test_client_factory(self, session: Session):
        seen = []

        def factory(api_key: str) -> OpenWeatherClient:
            seen.append(api_key)
            return OpenWeatherClient(api_key)

        session.client_factory = factory
        session.open_client()
        assert seen == ["test-key-123"]
