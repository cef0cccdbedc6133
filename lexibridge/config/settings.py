"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any, List
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EngineSettings(BaseSettings):
    """Translation pipeline toggles and thresholds"""

    enable_idioms_lookup: bool = Field(default=True)
    enable_morphology: bool = Field(default=True)
    enable_reordering: bool = Field(default=True)
    enable_disambiguation: bool = Field(default=True)
    enable_post_processing: bool = Field(default=True)
    enable_fallback: bool = Field(default=True)
    fallback_confidence_threshold: float = Field(default=0.4, ge=0.0, le=1.0)

    # Result cache
    cache_ttl_seconds: float = Field(default=300, gt=0, le=86400)
    max_cache_size: int = Field(default=10000, ge=1, le=1_000_000)

    # Dictionary tables
    dictionary_ttl_seconds: float = Field(default=300, gt=0, le=86400)
    phrase_row_limit: int = Field(default=2000, ge=1, le=100_000)
    table_row_limit: int = Field(default=5000, ge=1, le=100_000)

    max_sentence_length: int = Field(default=500, ge=10, le=10_000)

    model_config = {"env_prefix": "ENGINE_", "env_file": ".env", "extra": "ignore"}


class DatabaseSettings(BaseSettings):
    """Persistent dictionary store configuration"""

    url: Optional[str] = Field(
        default=None,
        description="SQLAlchemy URL; the bundled starter dictionary is used when unset"
    )
    echo: bool = Field(default=False)

    model_config = {"env_prefix": "DATABASE_", "env_file": ".env", "extra": "ignore"}


class FallbackSettings(BaseSettings):
    """Remote fallback translation service configuration"""

    base_url: Optional[str] = Field(default=None)
    api_key: Optional[str] = Field(default=None)
    timeout_seconds: float = Field(default=10, gt=0, le=120)

    @field_validator('base_url', mode='before')
    @classmethod
    def strip_trailing_slash(cls, v):
        """Normalize the base URL so paths can be appended"""
        if isinstance(v, str):
            v = v.strip().rstrip("/")
            return v or None
        return v

    model_config = {"env_prefix": "FALLBACK_", "env_file": ".env", "extra": "ignore"}


class SecuritySettings(BaseSettings):
    """CORS configuration"""

    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "POST", "DELETE"]
    )
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        if isinstance(v, str):
            origin_list = v.split(",")
            return [origin.strip() for origin in origin_list if origin.strip()]
        return v or ["*"]

    model_config = {"env_prefix": "SECURITY_", "env_file": ".env", "extra": "ignore"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="LexiBridge Translation Service")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)

    # Nested Settings
    engine: EngineSettings = Field(default_factory=EngineSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    fallback: FallbackSettings = Field(default_factory=FallbackSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @model_validator(mode='after')
    def check_fallback_target(self):
        """Disable the fallback stage when no service URL is configured"""
        if self.engine.enable_fallback and not self.fallback.base_url:
            self.engine.enable_fallback = False
        return self

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings

