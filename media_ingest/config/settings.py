from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    storage_provider: str = "http"
    storage_api_base_url: str = "http://localhost:8080/api"
    storage_api_timeout_seconds: int = 30
    storage_api_token: str = ""

    image_codec: str = "pillow"
