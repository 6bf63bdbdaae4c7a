"""Configuration management for the Entity Search Service."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
    # Environment variables should be set directly
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Supabase configuration (required)
    SUPABASE_URL: str = Field(..., description="Supabase project URL")
    SUPABASE_SERVICE_ROLE_KEY: str = Field(..., description="Supabase service role key")
    SUPABASE_TIMEOUT_SECONDS: int = Field(
        default=10, description="PostgREST request timeout in seconds"
    )

    # Environment
    SEARCH_ENGINE_ENV: str = Field(default="dev", description="Environment: dev, staging, prod")

    # Search behaviour
    SEARCH_MIN_QUERY_LENGTH: int = Field(
        default=2, description="Queries shorter than this return no results"
    )
    SEARCH_RESULT_LIMIT: int = Field(default=20, description="Max results per search")
    SEARCH_SNIPPET_CHARS: int = Field(
        default=150, description="Characters of content shown in a result snippet"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If required environment variables are missing
    """
    return Settings()
