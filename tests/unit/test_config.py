"""Unit tests for config module."""

from feedback.config import Settings

# Env vars that deployments set which override Pydantic Settings defaults.
_ENV_VARS = [
    "ADMIN_PASSWORD",
    "SESSION_SECRET",
    "DATABASE_PATH",
    "ANTHROPIC_API_KEY",
    "LLM_MODEL",
    "LLM_TIMEOUT_SECONDS",
    "ANALYTICS_CACHE_TTL_SECONDS",
    "REVIEWS_REQUIRE_ADMIN",
]


def test_default_settings(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.admin_password == "admin"
    assert s.anthropic_api_key == ""
    assert s.session_ttl_hours == 24
    assert s.llm_timeout_seconds == 15.0
    assert s.analytics_cache_ttl_seconds == 0.0
    assert s.reviews_require_admin is False


def test_settings_override(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    s = Settings(
        _env_file=None,
        admin_password="s3cret",
        database_path="/tmp/reviews.db",
        llm_timeout_seconds=5.0,
    )
    assert s.admin_password == "s3cret"
    assert s.database_path == "/tmp/reviews.db"
    assert s.llm_timeout_seconds == 5.0


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    monkeypatch.setenv("REVIEWS_REQUIRE_ADMIN", "true")
    s = Settings(_env_file=None)
    assert s.anthropic_api_key == "sk-test"
    assert s.reviews_require_admin is True
