import pytest
from weatherunion import WeatherUnion, WeatherUnionSettings
from weatherunion.config import DEFAULT_BASE_URL

def test_from_env_defaults(monkeypatch):
    monkeypatch.setenv('WEATHERUNION_API_KEY', 'abc')
    monkeypatch.delenv('WEATHERUNION_BASE_URL', raising=False)
    monkeypatch.delenv('WEATHERUNION_TIMEOUT', raising=False)
    monkeypatch.delenv('WEATHERUNION_LOCALITIES', raising=False)
    settings = WeatherUnionSettings.from_env()
    assert settings.api_key == 'abc'
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout is None
    assert settings.localities == []

def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv('WEATHERUNION_API_KEY', 'abc')
    monkeypatch.setenv('WEATHERUNION_BASE_URL', 'https://wu.test')
    monkeypatch.setenv('WEATHERUNION_TIMEOUT', '7.5')
    monkeypatch.setenv('WEATHERUNION_LOCALITIES', 'ZWL003467, ZWL006538,,')
    settings = WeatherUnionSettings.from_env()
    assert settings.base_url == 'https://wu.test'
    assert settings.timeout == 7.5
    assert settings.localities == ['ZWL003467', 'ZWL006538']

def test_from_env_requires_key(monkeypatch):
    monkeypatch.delenv('WEATHERUNION_API_KEY', raising=False)
    with pytest.raises(KeyError):
        WeatherUnionSettings.from_env()

def test_from_env_bad_timeout(monkeypatch):
    monkeypatch.setenv('WEATHERUNION_API_KEY', 'abc')
    monkeypatch.setenv('WEATHERUNION_TIMEOUT', 'soon')
    with pytest.raises(ValueError):
        WeatherUnionSettings.from_env()

def test_client_from_key_keeps_key():
    wu = WeatherUnion.from_key('abc')
    assert wu.api_key == 'abc'
    with pytest.raises(AttributeError):
        wu.api_key = 'other'
