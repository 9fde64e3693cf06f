# tests/test_settings.py

from api.settings import Settings


def test_settings_defaults(monkeypatch):
    for name in ("PLACEMENT_QUIZ_SIZE", "PLACEMENT_MAX_QUIZ_SIZE", "CORS_ALLOW_ORIGINS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.placement_quiz_size == 20
    assert s.max_quiz_size == 100
    assert s.cors_allow_origins == ["*"]
    assert s.log_level == "INFO"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PLACEMENT_QUIZ_SIZE", "12")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["https://example.com"]')
    s = Settings(_env_file=None)
    assert s.placement_quiz_size == 12
    assert s.cors_allow_origins == ["https://example.com"]
