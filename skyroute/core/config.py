# skyroute/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (.env file).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    APP_NAME: str = "SkyRoute"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Base URL of the external route optimization service (no trailing slash)
    OPTIMIZER_BASE_URL: str = "http://localhost:8080/api"
    # Per-request timeout in seconds for calls to the optimization service
    OPTIMIZER_TIMEOUT_S: float = 10.0


settings = Settings()
