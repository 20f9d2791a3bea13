"""
Configuration settings for the CQRS demo API
"""
from typing import List, Union
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Application settings"""

    # Project Info
    PROJECT_NAME: str = "Demo CQRS API"
    VERSION: str = "1.0.0"
    APP_ENV: str = Field(default="development")
    DEBUG: bool = Field(default=True)

    # API Settings
    API_V1_PREFIX: str = "/api/v1"

    # CORS
    CORS_ORIGINS: Union[str, List[str]] = Field(
        default="http://localhost:3000,http://localhost"
    )

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list"""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        elif isinstance(v, list):
            return v
        return ["http://localhost:3000", "http://localhost"]

    # CQRS
    CQRS_HANDLER_MODULES: Union[str, List[str]] = Field(
        default="app.domains.users.application.handlers"
    )
    CQRS_VALIDATE_ON_STARTUP: bool = Field(default=True)

    @field_validator('CQRS_HANDLER_MODULES', mode='before')
    @classmethod
    def parse_handler_modules(cls, v):
        """Parse handler modules from a comma-separated string or list"""
        if isinstance(v, str):
            return [module.strip() for module in v.split(",") if module.strip()]
        return v

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    STRUCTURED_LOGGING_ENABLED: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create settings instance
settings = Settings()
