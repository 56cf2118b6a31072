"""
Application configuration loaded from environment variables.
Uses pydantic-settings for typed, validated config.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """All environment variables required by the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Blog backend ──────────────────────────────────────────
    backend_url: str
    request_timeout_seconds: float | None = None   # None → no timeout

    # ── Verify endpoint ───────────────────────────────────────
    app_password: str = ""           # server-side only, never sent to clients

    # ── App ───────────────────────────────────────────────────
    app_name: str = "blog-admin"
    notice_history: int = 50
    debug: bool = False


# Singleton — import this wherever config is needed
settings = Settings()  # type: ignore[call-arg]
