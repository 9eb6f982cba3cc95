"""Configuration management for the GitHub API client.

Example usage:
    from githubapi import GitHubClient
    from githubapi.config import load_config

    settings = load_config("githubapi.yaml")
    client = GitHubClient.from_settings(settings)
"""

from .exceptions import (
    ConfigurationError,
    ConfigurationFileError,
    ConfigurationValidationError,
)
from .loader import (
    ConfigurationLoader,
    get_config,
    is_config_loaded,
    load_config,
)
from .models import (
    ApiConfig,
    CredentialsConfig,
    LogLevel,
    Settings,
    configure_logging,
)

__all__ = [
    "ApiConfig",
    "ConfigurationError",
    "ConfigurationFileError",
    "ConfigurationLoader",
    "ConfigurationValidationError",
    "CredentialsConfig",
    "LogLevel",
    "Settings",
    "configure_logging",
    "get_config",
    "is_config_loaded",
    "load_config",
]
