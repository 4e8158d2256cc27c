"""
Configuration management for the ResumeForge PDF service
Handles environment variables, font selection and rendering settings
"""

import os
from typing import Optional, List
from typing_extensions import Annotated
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
import structlog

logger = structlog.get_logger()

KNOWN_DESIGNS = ("classic", "modern", "modern-sidebar", "modern-two-column", "modern-minimal")
TEXT_MEASUREMENT_MODES = ("heuristic", "font_metrics")


class Settings(BaseSettings):
    """
    Application settings with environment variable support
    Uses Pydantic for validation and type conversion
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = Field(default="ResumeForge PDF")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # Server Settings
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:3000", "http://localhost:8000"]
    )

    # Monitoring & Logging
    log_level: str = Field(default="INFO")

    # Rendering Settings
    default_design: str = Field(default="modern-sidebar")
    text_measurement: str = Field(default="heuristic")
    char_width_factor: float = Field(default=0.6)
    regular_font: str = Field(default="Helvetica")
    bold_font: str = Field(default="Helvetica-Bold")
    regular_font_path: Optional[str] = Field(default=None)
    bold_font_path: Optional[str] = Field(default=None)

    # Request Limits
    rate_limit_per_minute: int = Field(default=30)
    max_experience_entries: int = Field(default=50)
    max_education_entries: int = Field(default=30)
    max_skills: int = Field(default=200)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list"""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("text_measurement")
    @classmethod
    def validate_text_measurement(cls, v):
        v = v.strip().lower()
        if v not in TEXT_MEASUREMENT_MODES:
            raise ValueError(f"text_measurement must be one of {', '.join(TEXT_MEASUREMENT_MODES)}")
        return v

    @field_validator("char_width_factor")
    @classmethod
    def validate_char_width_factor(cls, v):
        if v <= 0:
            raise ValueError("char_width_factor must be positive")
        return v

    @field_validator("default_design")
    @classmethod
    def validate_default_design(cls, v):
        v = v.strip().lower()
        if v not in KNOWN_DESIGNS:
            raise ValueError(f"Unknown default design: {v}")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment.lower() in ("development", "dev")

    def get_font_config(self) -> dict:
        """Get font configuration dictionary"""
        return {
            "regular": self.regular_font,
            "bold": self.bold_font,
            "regular_path": self.regular_font_path,
            "bold_path": self.bold_font_path,
        }


class DevelopmentSettings(Settings):
    """Development-specific settings"""
    debug: bool = True
    log_level: str = "DEBUG"


class ProductionSettings(Settings):
    """Production-specific settings"""
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("cors_origins")
    @classmethod
    def validate_production_cors(cls, v):
        """Wildcard origins are not allowed in production"""
        if "*" in v:
            raise ValueError("Wildcard CORS origin is not allowed in production")
        return v


class TestSettings(Settings):
    """Test-specific settings"""
    debug: bool = True
    rate_limit_per_minute: int = 1000


def get_settings() -> Settings:
    """
    Get application settings based on environment

    Returns:
        Settings: Configured settings instance
    """
    environment = os.getenv("ENVIRONMENT", "development").lower()

    if environment in ("production", "prod"):
        settings = ProductionSettings()
    elif environment in ("test", "testing"):
        settings = TestSettings()
    else:
        settings = DevelopmentSettings()

    logger.info("Settings loaded",
               environment=settings.environment,
               debug=settings.debug,
               app_name=settings.app_name)

    return settings


# Global settings instance
settings = get_settings()


def log_settings_summary():
    """Log a summary of current settings"""
    logger.info("Application configuration summary",
               app_name=settings.app_name,
               environment=settings.environment,
               debug=settings.debug,
               host=settings.host,
               port=settings.port,
               default_design=settings.default_design,
               text_measurement=settings.text_measurement,
               regular_font=settings.regular_font,
               bold_font=settings.bold_font,
               rate_limit_per_minute=settings.rate_limit_per_minute)
