import logging

from mvc_blog.core.config import Settings


def test_defaults_match_demo_post():
    settings = Settings()
    assert settings.POST_TITLE == "My First Post"
    assert settings.UPDATED_TITLE == "My Updated Post"
    assert settings.DEFAULT_VIEW == "console"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DEFAULT_VIEW", "json")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.DEFAULT_VIEW == "json"
    assert settings.get_log_level() == logging.DEBUG


def test_unknown_log_level_falls_back():
    assert Settings(LOG_LEVEL="chatty").get_log_level() == logging.WARNING
