"""
Configuration management for the nsperf API
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="NSPERF_",
        case_sensitive=False,
        extra="ignore",
    )

    # Document store
    storage_backend: Literal["mongo", "memory"] = "mongo"
    mongo_url: str = "mongodb://localhost:27017/ns-preformance-db"
    mongo_database: str | None = None  # Falls back to the database named in mongo_url
    # Bounds how long a query or ping waits when no server is reachable
    mongo_server_selection_timeout_ms: int = 2000

    # API Settings
    api_host: str = "localhost"
    api_port: int = 8900
    api_reload: bool = False
    graphql_path: str = "/graphql"
    graphiql_path: str = "/graphiql"
    cors_origins: list[str] = ["*"]
    cors_methods: list[str] = ["GET", "PUT", "POST", "DELETE", "OPTIONS"]

    # Environment
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    @property
    def api_url(self) -> str:
        return f"http://{self.api_host}:{self.api_port}{self.graphql_path}"


# Global settings instance
settings = Settings()
