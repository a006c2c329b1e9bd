"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="PB_", extra="ignore"
    )

    # Service
    service_name: str = "pb-challenge"
    log_level: str = "INFO"

    # Game
    initial_assets: int = 100_000_000_000  # 1000억 KRW
    max_active_games: int = 1000


settings = Settings()
