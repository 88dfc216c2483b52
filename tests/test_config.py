from pathlib import Path

import pytest

from usersearch.config import DEFAULT_TIMEOUT, load_client_settings, load_server_settings


def test_client_settings_from_env(monkeypatch):
    monkeypatch.setenv("SEARCH_SERVICE_URL", "http://search.local/search")
    monkeypatch.setenv("SEARCH_ACCESS_TOKEN", "token")
    monkeypatch.delenv("SEARCH_TIMEOUT", raising=False)

    settings = load_client_settings()
    assert settings.url == "http://search.local/search"
    assert settings.access_token == "token"
    assert settings.timeout == DEFAULT_TIMEOUT == 1.0


def test_client_settings_require_url(monkeypatch):
    monkeypatch.delenv("SEARCH_SERVICE_URL", raising=False)
    with pytest.raises(RuntimeError, match="SEARCH_SERVICE_URL must be set"):
        load_client_settings()


def test_server_settings_from_env(monkeypatch):
    monkeypatch.setenv("SEARCH_SERVER_ACCESS_TOKEN", "secret")
    monkeypatch.delenv("DATASET_PATH", raising=False)

    settings = load_server_settings()
    assert settings.access_token == "secret"
    assert settings.dataset_path == Path("dataset.xml")


def test_server_settings_require_token(monkeypatch):
    monkeypatch.setenv("SEARCH_SERVER_ACCESS_TOKEN", "")
    with pytest.raises(RuntimeError, match="SEARCH_SERVER_ACCESS_TOKEN must be set"):
        load_server_settings()
