"""Feedback service configuration — loaded from environment variables / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Admin session guard
    admin_password: str = "admin"
    session_secret: str = ""
    session_ttl_hours: int = 24
    cookie_secure: bool = False
    reviews_require_admin: bool = False

    # Persistence
    database_path: str = "/app/data/feedback.db"
    analytics_cache_ttl_seconds: float = 0.0

    # Anthropic (empty key activates fallback responses)
    anthropic_api_key: str = ""
    llm_model: str = "claude-3-5-haiku-latest"
    llm_timeout_seconds: float = 15.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_dir: str = "/app/logs"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
