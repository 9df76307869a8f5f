"""
Configuration module for environment variable validation and type-safe config.

Every setting has a default, so the SDK call helpers work with an empty
environment. Values are validated the first time the config is requested.
"""
import os
from dataclasses import dataclass
from typing import Optional


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """Type-safe configuration object with validated environment variables."""

    aws_region: str = "us-east-1"
    log_level: str = "INFO"
    endpoint_url: Optional[str] = None
    cloudwatch_logs_max_attempts: int = 10
    lex_bot_version: str = "$LATEST"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ValueError: If an environment variable holds an invalid value.
        """
        aws_region = os.environ.get("AWS_REGION", "us-east-1")
        endpoint_url = os.environ.get("AWS_ENDPOINT_URL") or None
        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        if log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {log_level}"
            )

        raw_attempts = os.environ.get("CLOUDWATCH_LOGS_MAX_ATTEMPTS", "10")
        try:
            cloudwatch_logs_max_attempts = int(raw_attempts)
        except ValueError:
            raise ValueError(
                f"CLOUDWATCH_LOGS_MAX_ATTEMPTS must be an integer, got: {raw_attempts}"
            ) from None
        if cloudwatch_logs_max_attempts < 1:
            raise ValueError(
                f"CLOUDWATCH_LOGS_MAX_ATTEMPTS must be positive, got: {cloudwatch_logs_max_attempts}"
            )

        lex_bot_version = os.environ.get("LEX_BOT_VERSION", "$LATEST")
        if not lex_bot_version:
            raise ValueError("LEX_BOT_VERSION must not be empty")

        return cls(
            aws_region=aws_region,
            log_level=log_level,
            endpoint_url=endpoint_url,
            cloudwatch_logs_max_attempts=cloudwatch_logs_max_attempts,
            lex_bot_version=lex_bot_version,
        )


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config: The validated configuration object

    Raises:
        ValueError: If an environment variable holds an invalid value.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
