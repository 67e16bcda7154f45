"""
Application configuration with Pydantic Settings for validation and type safety.
Values are read from environment variables or a .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="Design Patterns Demo", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")

    # Database settings, URL of the form protocol://host:port/database
    database_url: str = Field(
        default="postgresql+psycopg2://localhost:5432/qlsv",
        description="Student database connection URL",
    )
    database_user: str = Field(default="postgres", description="Database username")
    database_password: str = Field(default="", description="Database password")
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize log level to upper case"""
        if isinstance(v, str):
            return v.upper()
        return v


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Return the global settings instance"""
    return settings
