from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class AppConfig(BaseSettings):
    """Application configuration using Pydantic BaseSettings.

    Loads configuration from environment variables and .env file (if present).
    Fields are type-checked and validated. Defaults are provided where appropriate.
    """
    # Application
    log_level: str = "DEBUG"
    page_title: str = "Promotion RESTful Service"

    # Promotions REST resource
    api_backend: Literal["http", "memory"] = "http"
    api_base_url: str = "http://localhost:8080"
    collection_path: str = "/promotions"
    request_timeout: Optional[float] = None

    # Local in-memory backend
    seed_csv: Optional[str] = None

    # Flash messages
    success_message: str = "Success"
    delete_success_message: str = "promotion has been Deleted!"
    delete_error_message: str = "Server error!"
    surface_delete_errors: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def collection_url(self) -> str:
        return self.api_base_url.rstrip("/") + "/" + self.collection_path.strip("/")

_config: Optional[AppConfig] = None

def get_config() -> AppConfig:
    """Return the AppConfig instance (singleton pattern)."""
    global _config
    if _config is None:
        _config = AppConfig()
    return _config

def set_config_for_test(**kwargs):
    """For testing only: override the AppConfig instance with new values."""
    global _config
    _config = AppConfig(**kwargs)
