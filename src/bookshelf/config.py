"""
Configuration management for the Bookshelf API
"""

from importlib import resources

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Seed data
    seed_data_path: str | None = None  # Defaults to the bundled books.json
    initial_max_id: int = 5  # Id counter floor; the first added book gets floor + 1

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:8080"]
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "BOOKSHELF_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_seed_data_path() -> str:
    """Get the seed file path, falling back to the packaged sample data."""
    if settings.seed_data_path:
        return settings.seed_data_path
    return str(resources.files("bookshelf") / "data" / "books.json")
