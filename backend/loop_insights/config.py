"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Analysis defaults (used only by the HTTP layer)
    DEFAULT_CONNECTION_STRENGTH: float = 0.5  # when the caller has no strength estimate
    MAX_RECORDS_PER_REQUEST: int = 1000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
