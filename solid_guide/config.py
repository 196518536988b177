"""
Configuration management following Single Responsibility Principle.
Centralizes all configuration handling logic.
"""
import os
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass

from dotenv import load_dotenv

from .interfaces import ConfigurationProvider

# Auto-load .env file if available
load_dotenv()

ENV_PREFIX = "SOLID_GUIDE_"
DEFAULT_CATALOG_PATH = str(Path(__file__).parent / "data" / "catalog.yaml")


@dataclass
class GuideConfiguration:
    """Configuration for running the guide and writing its reports"""
    output_dir: str = "output"
    catalog_path: str = DEFAULT_CATALOG_PATH
    log_level: str = "INFO"
    logger_type: str = "console"

    def validate(self) -> bool:
        """Validate that required fields are usable"""
        if self.logger_type not in ("console", "standard", "prefect"):
            return False
        return bool(self.output_dir.strip()) and bool(self.catalog_path.strip())


class EnvironmentConfigProvider:
    """Configuration provider that reads from environment variables"""

    def __init__(self, prefix: str = ENV_PREFIX):
        self.prefix = prefix

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value from environment"""
        env_key = f"{self.prefix}{key}" if self.prefix else key
        return os.getenv(env_key, default)

    def validate(self) -> bool:
        """Basic validation - always returns True for env provider"""
        return True


class DictConfigProvider:
    """Configuration provider that reads from a dictionary"""

    def __init__(self, config_dict: Dict[str, Any]):
        self.config = config_dict

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value from dictionary"""
        return self.config.get(key, default)

    def validate(self) -> bool:
        """Validate that configuration dictionary is not empty"""
        return bool(self.config)


class ConfigurationManager:
    """Centralized configuration manager"""

    def __init__(self, provider: ConfigurationProvider):
        self.provider = provider

    def get_guide_config(self, output_dir: Optional[str] = None) -> GuideConfiguration:
        """Get guide configuration, explicit arguments win over the provider"""
        defaults = GuideConfiguration()
        return GuideConfiguration(
            output_dir=output_dir or self.provider.get("OUTPUT_DIR", defaults.output_dir),
            catalog_path=self.provider.get("CATALOG_PATH", defaults.catalog_path),
            log_level=str(self.provider.get("LOG_LEVEL", defaults.log_level)).upper(),
            logger_type=self.provider.get("LOGGER_TYPE", defaults.logger_type)
        )

    def validate_all(self) -> bool:
        """Validate all configurations"""
        return self.provider.validate() and self.get_guide_config().validate()
