"""
RecipeFinder settings.

Values come from the process environment first, then from a local ``.env``
file. Names are case-insensitive, so ``DATABASE_URL`` and ``database_url``
both work.
"""

from enum import Enum
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Deployment stage the service runs in"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Runtime configuration for the API, database and search defaults."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Service identity
    app_name: str = Field(default="RecipeFinder", description="Name reported by health checks")
    app_version: str = Field(default="1.0.0", description="Version reported in OpenAPI and health")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False, description="Enable FastAPI debug tracebacks")

    # Uvicorn
    host: str = Field(default="0.0.0.0", description="Interface uvicorn binds to")
    port: int = Field(default=8000, ge=1, le=65535)

    # Storage
    database_url: str = Field(
        default="postgresql+psycopg2://user@localhost:5432/recipefinder",
        description="SQLAlchemy URL of the recipe catalog",
    )
    db_echo: bool = Field(default=False, description="Log every SQL statement")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Schema creation tries before startup gives up"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Pause between schema creation tries"
    )

    # Search
    default_per_page: int = Field(
        default=20, ge=1, le=100, description="Page size when none is requested"
    )
    max_per_page: int = Field(default=100, ge=1, description="Largest allowed page size")
    default_match_percentage: int = Field(
        default=80, ge=1, le=100, description="Ingredient search match threshold"
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Browser origins allowed to call the API",
    )
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = Field(default=["GET", "POST", "PUT", "DELETE"])
    cors_allow_headers: list[str] = Field(default=["*"])

    # OpenAPI
    api_prefix: str = Field(default="", description="Mount point for every router")
    api_title: str = "RecipeFinder API"
    api_description: str = "Recipe catalog with ingredient-match and budget search"

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v):
        """Accept ``PRODUCTION``, ``Production`` and so on"""
        if isinstance(v, str):
            return Environment(v.strip().lower())
        return v

    @field_validator("database_url", mode="before")
    @classmethod
    def fix_database_url(cls, v):
        """Hosting providers hand out postgres:// but SQLAlchemy requires postgresql://."""
        if isinstance(v, str) and v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT


settings = Settings()
