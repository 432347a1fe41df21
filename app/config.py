"""Application configuration using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    DATA_DIR: str = "data"
    CACHE_ABSOLUTE_TTL: int = 300
    CACHE_SLIDING_TTL: int = 120
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:8000"
    RATE_LIMIT: str = "100/minute"
    DEFAULT_LOCALE: str = "zh-TW"
    LOG_FILE: str = ""
    DEBUG: bool = False

    @property
    def allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    @property
    def data_path(self) -> Path:
        """Resolve DATA_DIR, relative paths being taken from the repository root."""
        path = Path(self.DATA_DIR)
        if not path.is_absolute():
            path = BASE_DIR / path
        return path

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
