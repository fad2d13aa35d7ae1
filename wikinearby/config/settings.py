"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings
from enum import Enum

from wikinearby.models.nearby import MIN_SEARCH_RADIUS_M, MAX_SEARCH_RADIUS_M


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


class WikiSettings(BaseSettings):
    """Wikipedia query service and marker configuration"""
    
    query_url: str = Field(default="https://en.wikipedia.org/w/api.php")
    user_agent: str = Field(
        default="wikinearby/1.0 (nearby article lookup)",
        description="Wikimedia asks API clients to identify themselves"
    )
    timeout_seconds: float = Field(default=10.0, gt=0, le=120)
    thumbnail_size: int = Field(default=125, ge=16, le=1024)
    
    # Search radius bounds (meters); may narrow but never widen the query invariant
    min_search_radius_m: int = Field(default=MIN_SEARCH_RADIUS_M, ge=MIN_SEARCH_RADIUS_M, le=MAX_SEARCH_RADIUS_M)
    max_search_radius_m: int = Field(default=MAX_SEARCH_RADIUS_M, ge=MIN_SEARCH_RADIUS_M, le=MAX_SEARCH_RADIUS_M)
    default_max_results: int = Field(default=10, ge=1, le=500)
    
    # Spatial reference results are projected into when no view is supplied
    working_wkid: int = Field(default=3857)
    
    # Marker symbol
    icon_path: str = Field(default="/static/images/wikipedia_32.png")
    icon_size: int = Field(default=24, ge=1, le=256)
    more_info_label: str = Field(default="More info")
    
    @model_validator(mode="after")
    def check_radius_bounds(self):
        """Radius bounds must describe a non-empty range"""
        if self.min_search_radius_m > self.max_search_radius_m:
            raise ValueError(
                f"min_search_radius_m ({self.min_search_radius_m}) exceeds "
                f"max_search_radius_m ({self.max_search_radius_m})"
            )
        return self
    
    model_config = {
        "env_prefix": "WIKI_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


class Settings(BaseSettings):
    """Main application settings"""
    
    # Application Configuration
    app_name: str = Field(default="Wiki Nearby Service")
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
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    
    # Nested Settings
    wiki: WikiSettings = Field(default_factory=WikiSettings)
    
    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v
    
    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION
    
    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT
    
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


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
