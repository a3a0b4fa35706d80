"""Application settings via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables with KCA_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="KCA_",
        env_file=".env",
        case_sensitive=False,
    )

    # --- Core ---
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]
    rate_limit_requests: int = 100
    rate_limit_window_seconds: int = 60
    log_level: str = "INFO"
    log_format: str = "json"

    # --- JWT ---
    jwt_secret: str = "kidscode-arena-dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 7 * 24 * 60
    jwt_issuer: str = "kidscode-arena"

    # --- Accounts ---
    password_min_length: int = 6
    password_max_length: int = 128

    # --- Data ---
    seed_demo_data: bool = True
    daily_challenge_bonus_xp: int = 50

    # --- Grading ---
    grader_seed: int | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
