import pytest

from backend.config import AppConfig, Theme
from backend.models.reference import Language


def test_defaults(monkeypatch):
    for name in ("VALUATION_LANGUAGE", "VALUATION_THEME", "VALUATION_SIMULATED_DELAY", "VALUATION_CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("backend.config.load_dotenv", lambda: False)
    config = AppConfig.from_env()
    assert config.language == Language.EN
    assert config.theme == Theme.LIGHT
    assert config.simulated_delay_seconds == 1.5
    assert config.cors_origins == ["http://localhost:5173"]


def test_from_env(monkeypatch):
    monkeypatch.setenv("VALUATION_LANGUAGE", "AR")
    monkeypatch.setenv("VALUATION_THEME", "dark")
    monkeypatch.setenv("VALUATION_SIMULATED_DELAY", "0.25")
    monkeypatch.setenv("VALUATION_CORS_ORIGINS", "http://a.test, http://b.test")
    config = AppConfig.from_env()
    assert config.language == Language.AR
    assert config.direction == "rtl"
    assert config.theme == Theme.DARK
    assert config.simulated_delay_seconds == 0.25
    assert config.cors_origins == ["http://a.test", "http://b.test"]


def test_with_language_returns_new_config():
    config = AppConfig()
    switched = config.with_language(Language.AR)
    assert switched.language == Language.AR
    assert config.language == Language.EN


def test_config_is_immutable():
    with pytest.raises(Exception):
        AppConfig().language = Language.AR


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        AppConfig(simulated_delay_seconds=-1)
