# tests/core/test_config.py
from english_coach.core.config import GEMINI_API_KEY_PLACEHOLDER, Settings, get_settings

def test_get_settings_loads_defaults():
    settings = get_settings()
    assert isinstance(settings, Settings)
    assert settings.PROJECT_NAME == "English Coach Backend"

def test_defaults_without_environment(monkeypatch):
    for name in ("PORT", "GEMINI_API_KEY", "GEMINI_MODEL_NAME_LITE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.PORT == 8080
    assert settings.GEMINI_MODEL_NAME_LITE == "gemini-1.5-flash"
    assert settings.GEMINI_API_KEY == GEMINI_API_KEY_PLACEHOLDER
    assert settings.gemini_configured is False

def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("GEMINI_API_KEY", "abc123")
    monkeypatch.setenv("GEMINI_MODEL_NAME_LITE", "gemini-2.0-flash-lite")
    settings = Settings(_env_file=None)
    assert settings.PORT == 9090
    assert settings.GEMINI_MODEL_NAME_LITE == "gemini-2.0-flash-lite"
    assert settings.gemini_configured is True

def test_empty_or_missing_key_is_not_configured():
    assert Settings(_env_file=None, GEMINI_API_KEY="").gemini_configured is False
    assert Settings(_env_file=None, GEMINI_API_KEY=None).gemini_configured is False
