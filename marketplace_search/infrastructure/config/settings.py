"""Application settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration settings."""

    debug_mode: bool = False
    search_api_base_url: str = "http://localhost:3000"
    search_api_path: str = "/api/search"
    suggestions_api_path: str = "/api/search/suggestions"
    trending_api_path: str = "/api/search/trending"
    search_page_size: int = 12
    search_timeout_seconds: float = 10
    url_history_mode: str = "replace"  # replace or push
    session_ttl_seconds: int = 1800  # 30 minutes of inactivity ends a page session
    saved_search_repository: str = "in_memory"  # in_memory or redis
    redis_url: str = "redis://localhost:6379/0"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",
    )


settings = Settings()
