"""
Settings Module
===============

Pydantic-based configuration with environment variable loading.

Version: 0.1.0
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class OpenSanctionsSettings(BaseSettings):
    """OpenSanctions matching API configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OPENSANCTIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: SecretStr = Field(
        default=SecretStr(""),
        alias="OPEN_SANCTIONS_KEY",
    )
    base_url: str = "https://api.opensanctions.org"
    dataset: str = "default"
    search_url: str = "https://www.opensanctions.org/search/"
    search_scope: str = "sanctions"
    timeout_seconds: float = 30.0

    @property
    def match_url(self) -> str:
        """Generate the matching endpoint URL for the configured dataset."""
        return f"{self.base_url.rstrip('/')}/match/{self.dataset}"

    @property
    def has_api_key(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.api_key.get_secret_value())


class RegulationSettings(BaseSettings):
    """EU Dual-Use Regulation source configuration."""

    model_config = SettingsConfigDict(
        env_prefix="REGULATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    source_url: str = (
        "https://eur-lex.europa.eu/legal-content/EN/TXT/?uri=CELEX%3A02021R0821-20241108"
    )
    legal_citation: str = "Regulation (EU) 2021/821 Annex I"
    cache_ttl_hours: int = 24
    timeout_seconds: float = 60.0
    user_agent: str = "TradeComplianceBot/1.0 (Export Control Screening)"


class CORSSettings(BaseSettings):
    """CORS configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    origins: str = "http://localhost:3000,http://localhost:4321"
    allow_credentials: bool = True

    @property
    def origins_list(self) -> list[str]:
        """Parse origins string into list."""
        return [o.strip() for o in self.origins.split(",") if o.strip()]


class Settings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables with sensible defaults.
    Use the global `settings` singleton or call `get_settings()`.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = True
    log_level: LogLevel = LogLevel.INFO
    port: int = Field(default=8010, alias="TRADE_COMPLIANCE_PORT")

    # External sources
    opensanctions: OpenSanctionsSettings = Field(default_factory=OpenSanctionsSettings)
    regulation: RegulationSettings = Field(default_factory=RegulationSettings)

    # Security
    cors: CORSSettings = Field(default_factory=CORSSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Ensure log level is uppercase."""
        if isinstance(v, str):
            return LogLevel(v.upper())
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.environment == Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings singleton.
    """
    return Settings()
