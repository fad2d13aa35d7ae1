"""
Configuration loader utility for environment-specific settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from .settings import Settings, Environment

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Utility class for loading environment-specific configurations"""
    
    @staticmethod
    def load_environment_config(environment: Optional[str] = None) -> Settings:
        """
        Load configuration for the specified environment.
        
        Args:
            environment: Target environment (development, staging, production, testing)
                        If None, uses ENVIRONMENT env var or defaults to development
        
        Returns:
            Settings instance with environment-specific configuration
        """
        if environment is None:
            environment = os.getenv("ENVIRONMENT", "development")
        
        env = Environment(environment.lower())
        env_file = Path(f".env.{env.value}")
        
        if env_file.exists():
            return Settings(_env_file=str(env_file), environment=env)
        
        logger.warning(f"Environment file {env_file} not found, using default settings")
        return Settings(environment=env)
    
    @staticmethod
    def get_available_environments(directory: str = ".") -> list[str]:
        """Get list of available environment configurations"""
        env_files = []
        for env_file in Path(directory).glob(".env.*"):
            env_name = env_file.name.replace(".env.", "")
            if env_name in {e.value for e in Environment}:
                env_files.append(env_name)
        return sorted(env_files)
    
    @staticmethod
    def create_sample_env_file(environment: str, output_path: Optional[str] = None) -> str:
        """
        Create a sample .env file for the specified environment.
        
        Args:
            environment: Target environment
            output_path: Optional custom output path
            
        Returns:
            Path to the created sample file
        """
        env = Environment(environment.lower())
        
        if output_path is None:
            output_path = f".env.{env.value}.sample"
        
        defaults = Settings()
        
        sample_content = f"""# Sample configuration for {env.value} environment
# Copy this file to .env.{env.value} and modify as needed

# Application Configuration
APP_NAME={defaults.app_name}
APP_VERSION={defaults.app_version}
ENVIRONMENT={env.value}
DEBUG={'true' if env == Environment.DEVELOPMENT else 'false'}

# Server Configuration
HOST={defaults.host}
PORT={defaults.port}
RELOAD={'true' if env == Environment.DEVELOPMENT else 'false'}
WORKERS={1 if env == Environment.DEVELOPMENT else 4}

# Logging Configuration
LOG_LEVEL={defaults.log_level.value}

# Wikipedia Query Configuration
WIKI_QUERY_URL={defaults.wiki.query_url}
WIKI_TIMEOUT_SECONDS={defaults.wiki.timeout_seconds}
WIKI_THUMBNAIL_SIZE={defaults.wiki.thumbnail_size}
WIKI_MIN_SEARCH_RADIUS_M={defaults.wiki.min_search_radius_m}
WIKI_MAX_SEARCH_RADIUS_M={defaults.wiki.max_search_radius_m}
WIKI_DEFAULT_MAX_RESULTS={defaults.wiki.default_max_results}
WIKI_WORKING_WKID={defaults.wiki.working_wkid}
"""
        
        with open(output_path, "w") as f:
            f.write(sample_content)
        
        return output_path


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
