"""Configuration loading for the GitHub API client.

The loading hierarchy is:
1. Default values from Pydantic models
2. Configuration file (YAML)
3. Environment variables referenced from the file as ${VAR_NAME}
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .exceptions import (
    ConfigurationError,
    ConfigurationFileError,
    ConfigurationValidationError,
)
from .models import Settings

CONFIG_PATH_ENV_VAR = "GITHUBAPI_CONFIG_PATH"


class ConfigurationLoader:
    """Handles loading and validation of configuration from various sources."""

    def __init__(self) -> None:
        """Initialize configuration loader."""
        self._config: Settings | None = None
        self._config_file_path: Path | None = None

    def load_from_file(self, config_path: str | Path) -> Settings:
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationFileError: If file cannot be read or parsed
            ConfigurationValidationError: If configuration validation fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationFileError(
                f"Configuration file not found: {config_path}",
                file_path=config_path,
            )

        if not config_path.is_file():
            raise ConfigurationFileError(
                f"Configuration path is not a file: {config_path}",
                file_path=config_path,
            )

        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationFileError(
                f"Failed to parse YAML configuration: {e}", file_path=config_path
            ) from e
        except OSError as e:
            raise ConfigurationFileError(
                f"Failed to read configuration file: {e}", file_path=config_path
            ) from e

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ConfigurationFileError(
                "Configuration file must contain a mapping",
                file_path=config_path,
            )

        self._config = self._build(config_data)
        self._config_file_path = config_path.resolve()
        return self._config

    def load_from_dict(self, config_data: dict[str, Any]) -> Settings:
        """Load configuration from a dictionary.

        Raises:
            ConfigurationValidationError: If configuration validation fails
        """
        self._config = self._build(config_data)
        return self._config

    def _build(self, config_data: dict[str, Any]) -> Settings:
        try:
            return Settings(**config_data)
        except ValidationError as e:
            raise ConfigurationValidationError(
                f"Configuration validation failed: {e}",
                validation_errors=e.errors(),
            ) from e

    def find_config_file(self, filename: str = "githubapi.yaml") -> Path | None:
        """Find configuration file in standard locations.

        Search order:
        1. Current working directory
        2. GITHUBAPI_CONFIG_PATH environment variable
        3. ~/.githubapi/

        Args:
            filename: Configuration filename to search for

        Returns:
            Path to found configuration file, or None if not found
        """
        search_paths = [Path.cwd() / filename]

        env_path_str = os.getenv(CONFIG_PATH_ENV_VAR)
        if env_path_str:
            env_path = Path(env_path_str)
            if env_path.is_file():
                search_paths.append(env_path)
            else:
                search_paths.append(env_path / filename)

        search_paths.append(Path.home() / ".githubapi" / filename)

        for path in search_paths:
            if path.exists() and path.is_file():
                return path

        return None

    def auto_load(self, config_filename: str = "githubapi.yaml") -> Settings:
        """Automatically load configuration from standard locations.

        Raises:
            ConfigurationFileError: If no configuration file is found
            ConfigurationValidationError: If configuration validation fails
        """
        config_path = self.find_config_file(config_filename)

        if config_path is None:
            raise ConfigurationFileError(
                f"No configuration file '{config_filename}' found in standard locations"
            )

        return self.load_from_file(config_path)

    @property
    def config(self) -> Settings | None:
        """Get the loaded configuration."""
        return self._config

    @property
    def config_file_path(self) -> Path | None:
        """Get the path to the loaded configuration file."""
        return self._config_file_path

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._config is not None


# Global configuration loader instance
_loader = ConfigurationLoader()


def load_config(config_path: str | Path | None = None) -> Settings:
    """Load configuration from file or auto-discovery.

    Args:
        config_path: Explicit path to configuration file

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If configuration cannot be loaded or is invalid
    """
    try:
        if config_path:
            return _loader.load_from_file(config_path)
        return _loader.auto_load()
    except (ConfigurationFileError, ConfigurationValidationError) as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e


def get_config() -> Settings:
    """Get the currently loaded configuration.

    Raises:
        ConfigurationError: If no configuration has been loaded
    """
    if _loader.config is None:
        raise ConfigurationError("No configuration loaded. Call load_config() first.")

    return _loader.config


def is_config_loaded() -> bool:
    """Check if configuration has been loaded."""
    return _loader.is_loaded
