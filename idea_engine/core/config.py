"""Configuration management for the Idea Assessment Engine."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # In sandboxed environments, .env might not be accessible
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

    # Environment
    IDEA_ENGINE_ENV: str = Field(default="dev", description="Environment: dev, staging, prod")

    # Idea store tables
    IDEAS_TABLE: str = Field(default="ideas", description="Table holding idea records")
    SUBMIT_ASSESSMENT_RPC: str = Field(
        default="submit_idea_assessment",
        description="Postgres function that persists a record and marks the idea assessed",
    )

    # Assessment workflow
    DEFAULT_ASSESSED_BY: str = Field(
        default="Assessment Team", description="Attribution used when a reviewer gives none"
    )
    SESSION_IDLE_SECONDS: int = Field(
        default=8 * 60 * 60, description="Idle time after which a review session is dropped"
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
