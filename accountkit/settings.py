"""
Accountkit Settings - Configuration management using Pydantic Settings.

Loads configuration from environment variables and .env files.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find project root (where .env file is located)
PROJECT_ROOT = Path(__file__).parent.parent


class AccountkitSettings(BaseSettings):
    """
    Accountkit configuration settings.

    Settings are loaded from:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values (lowest priority)
    """

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="AK_",  # All Accountkit env vars must start with AK_
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR) (env: AK_LOG_LEVEL)",
    )

    # Group Policy Configuration
    fallback_group: str = Field(
        default="users",
        min_length=1,
        description="Primary group used when create_group is false and no gid is given (env: AK_FALLBACK_GROUP)",
    )

    missing_group_policy: Literal["fallback", "strict"] = Field(
        default="fallback",
        description=(
            "What to do when create_group is false and no gid is given: "
            "'fallback' uses fallback_group, 'strict' rejects the account "
            "(env: AK_MISSING_GROUP_POLICY)"
        ),
    )


# Global settings instance
_settings: AccountkitSettings | None = None


def get_settings() -> AccountkitSettings:
    """
    Get the global settings instance.

    Creates the settings instance on first call, then returns cached instance.

    Returns:
        AccountkitSettings instance
    """
    global _settings
    if _settings is None:
        _settings = AccountkitSettings()
    return _settings


def reload_settings() -> AccountkitSettings:
    """
    Reload settings from environment/files.

    Useful for testing or when .env file changes.

    Returns:
        Fresh AccountkitSettings instance
    """
    global _settings
    _settings = AccountkitSettings()
    return _settings
