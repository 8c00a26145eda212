"""Configuration models."""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Record store
    database_url: Optional[str] = Field(None, description="SQLAlchemy database URL")
    table_prefix: str = Field("wp_", description="Base table prefix")

    # Synthetic values
    faker_locale: str = Field("en_US", description="Faker locale for generated values")
    faker_seed: Optional[int] = Field(None, description="Seed for reproducible runs")

    # Login uniqueness
    login_max_attempts: int = Field(30, description="Give up after this many login lookups")
    login_suffix_after: int = Field(3, description="Collisions tolerated before suffixing")
    login_suffix_digits: int = Field(5, description="Width of the numeric login suffix")

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_file: str = Field("gdpr_sanitizer.log", description="Log file path")
    enable_pii_redaction: bool = Field(True, description="Redact PII in logs")

    # Audit
    audit_file: str = Field("gdpr_sanitizer_audit.log", description="Audit log path")
    audit_enabled: bool = Field(True, description="Write run lifecycle to the audit log")


# Global settings instance
settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings
