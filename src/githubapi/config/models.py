"""Pydantic configuration models for the GitHub API client.

Environment variables are substituted using the format ${VAR_NAME} with
optional defaults: ${VAR_NAME:default_value}. This is how credentials are
usually supplied, e.g. ``password: ${GH_PASS}``.
"""

import logging
import os
import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..client import MAX_PER_PAGE, GitHubClientConfig

ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


class LogLevel(str, Enum):
    """Supported logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class BaseConfigModel(BaseModel):
    """Base configuration model with environment variable substitution."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def substitute_env_vars(cls, values: Any) -> Any:
        """Substitute environment variables in string values.

        Supports formats:
        - ${VAR_NAME} - Required environment variable
        - ${VAR_NAME:default} - Optional with default value

        Raises:
            ValueError: If required environment variable is missing
        """

        def replacer(match: re.Match[str]) -> str:
            var_name, default_value = match.group(1), match.group(2)
            env_value = os.getenv(var_name)
            if env_value is not None:
                return env_value
            if default_value is not None:
                return default_value
            raise ValueError(f"Required environment variable '{var_name}' not found")

        def substitute_value(value: Any) -> Any:
            if isinstance(value, str):
                return ENV_VAR_PATTERN.sub(replacer, value)
            elif isinstance(value, dict):
                return {k: substitute_value(v) for k, v in value.items()}
            elif isinstance(value, list):
                return [substitute_value(item) for item in value]
            return value

        if not isinstance(values, dict):
            return values
        return {key: substitute_value(value) for key, value in values.items()}


class CredentialsConfig(BaseConfigModel):
    """HTTP Basic credentials for the GitHub API."""

    username: str = Field(min_length=1, description="GitHub username")
    password: str = Field(
        min_length=1, repr=False, description="Password or personal access token"
    )


class ApiConfig(BaseConfigModel):
    """GitHub API endpoint and transport settings."""

    base_url: str = Field(
        default="https://api.github.com", description="Base URL of the REST API"
    )
    timeout: int = Field(
        default=30, ge=1, le=300, description="Request timeout in seconds"
    )
    per_page: int = Field(
        default=MAX_PER_PAGE, ge=1, le=MAX_PER_PAGE, description="Page size"
    )
    user_agent: str = Field(
        default="githubapi-python/0.1", description="User-Agent header value"
    )
    raise_for_status: bool = Field(
        default=False, description="Raise GitHubUpstreamError for non-2xx responses"
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value.rstrip("/")


class Settings(BaseConfigModel):
    """Root configuration for the GitHub API client."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    credentials: CredentialsConfig
    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Logging level")

    def to_client_config(self) -> GitHubClientConfig:
        """Build the client configuration from these settings."""
        return GitHubClientConfig(
            base_url=self.api.base_url,
            timeout=self.api.timeout,
            per_page=self.api.per_page,
            user_agent=self.api.user_agent,
            raise_for_status=self.api.raise_for_status,
        )


def configure_logging(level: LogLevel | str = LogLevel.WARNING) -> None:
    """Configure root logging for applications driven by these settings.

    Raises:
        ValueError: If the level is not one of the LogLevel names
    """
    if not isinstance(level, LogLevel):
        level = LogLevel(str(level).upper())
    logging.basicConfig(
        level=getattr(logging, level.value),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
