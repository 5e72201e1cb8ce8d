"""tests/unit/test_config.py"""

import pytest
from pydantic import ValidationError

from msggo.config import DEFAULT_BASE_URL, Settings, load_config


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in ("MSGGO_API_KEY", "MSGGO_BASE_URL", "MSGGO_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("MSGGO_API_KEY", "env-key")
    monkeypatch.setenv("MSGGO_TIMEOUT", "2.5")
    settings = Settings()
    assert settings.api_key == "env-key"
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout == 2.5


def test_settings_requires_key():
    with pytest.raises(ValidationError):
        Settings()


def test_load_config(tmp_path):
    path = tmp_path / "msggo.yaml"
    path.write_text("api_key: file-key\nbase_url: https://example.test/\nunrelated: 1\n")
    settings = load_config(path)
    assert settings.api_key == "file-key"
    assert settings.base_url == "https://example.test/"


def test_load_config_empty_file(tmp_path, monkeypatch):
    monkeypatch.setenv("MSGGO_API_KEY", "env-key")
    path = tmp_path / "msggo.yaml"
    path.write_text("")
    assert load_config(path).api_key == "env-key"
