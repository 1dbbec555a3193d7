"""
Application settings and configuration management.
All values can be overridden from environment variables or a .env file.
"""
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings - all values from environment variables."""

    # Application settings
    app_name: str = "Scoreline"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"

    # ESPN public API endpoints
    espn_site_base_url: str = "https://site.api.espn.com/apis/site/v2/sports"
    espn_standings_base_url: str = "https://site.api.espn.com/apis/v2/sports"
    espn_web_base_url: str = "https://site.web.api.espn.com/apis/site/v3/sports"

    # HTTP client settings
    request_timeout: float = 15.0
    connection_limit: int = 20
    connection_limit_per_host: int = 10

    # User Agent for API requests
    api_user_agent: str = "Scoreline/0.1.0"

    # Leagues covered by the "top" pseudo-league
    top_leagues: List[str] = [
        "nba",
        "nfl",
        "uefa.champions",
        "eng.1",
        "esp.1",
        "ita.1",
        "ger.1",
        "fra.1",
    ]
    top_news_leagues: List[str] = ["nba", "nfl", "eng.1", "esp.1", "uefa.champions"]

    # Logging settings
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
