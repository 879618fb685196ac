"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings. All values can be overridden via environment variables."""

    # Application
    app_name: str = "SOP Assist"
    debug: bool = False

    # Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-3-pro-preview"
    gemini_temperature: float = 0.1

    # Query dispatch
    query_max_retries: int = 4
    query_backoff_base_seconds: float = 3.0  # 3s, 6s, 12s, 24s

    model_config = {"env_prefix": "SOPASSIST_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
