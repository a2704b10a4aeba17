"""Application configuration."""

from os import getenv

from pydantic import BaseModel


class Settings(BaseModel):
    """Runtime settings for the application."""

    app_name: str = getenv("APP_NAME", "users-api")
    app_env: str = getenv("APP_ENV", "dev")
    debug: bool = getenv("DEBUG", "0") == "1"
    log_level: str = getenv("LOG_LEVEL", "INFO")
    host: str = getenv("HOST", "0.0.0.0")
    port: int = int(getenv("PORT", "3000"))


settings: Settings = Settings()
