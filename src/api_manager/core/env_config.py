"""
Configuration loader from environment variables and .env files.

Priority (highest to lowest):
1. **overrides - explicit parameters
2. Environment variables (API_MANAGER_*)
3. .env file
4. Defaults

Example .env file:
    API_MANAGER_BASE_URL=https://api.example.com
    API_MANAGER_TIMEOUT_CONNECT=5
    API_MANAGER_TIMEOUT_READ=30
    API_MANAGER_VERIFY_SSL=true
    API_MANAGER_LOG_LEVEL=DEBUG
    API_MANAGER_LOG_FORMAT=json
    API_MANAGER_LOG_FILE_PATH=/var/log/api_manager.log
"""

from typing import Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import APIManagerConfig, TimeoutConfig
from .logging.config import LoggingConfig


class APIManagerSettings(BaseSettings):
    """
    API Manager settings read from the environment.

    Usage:
        >>> settings = APIManagerSettings()
        >>> settings.timeout_read
        30.0
    """

    model_config = SettingsConfigDict(
        env_prefix='API_MANAGER_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    base_url: str = Field(default="", description="Base URL for relative request paths")

    timeout_connect: float = Field(default=5.0, gt=0)
    timeout_read: float = Field(default=30.0, gt=0)
    verify_ssl: bool = Field(default=True)

    success_status_min: int = Field(default=200, ge=100, le=599)
    success_status_max: int = Field(default=404, ge=100, le=599)

    indicator_message: Optional[str] = None

    # Logging (disabled unless a level is given)
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    log_format: Literal["json", "text"] = Field(default="text")
    log_console: bool = Field(default=True)
    log_file_path: Optional[str] = None

    @model_validator(mode='after')
    def validate_status_range(self) -> 'APIManagerSettings':
        if self.success_status_min > self.success_status_max:
            raise ValueError(
                f"success_status_min ({self.success_status_min}) must be <= "
                f"success_status_max ({self.success_status_max})"
            )
        return self


def load_from_env(env_file: Optional[str] = '.env', **overrides) -> APIManagerConfig:
    """
    Load APIManagerConfig from environment variables.

    Args:
        env_file: .env file path (None to skip .env)
        **overrides: Explicit values for any APIManagerSettings field

    Returns:
        APIManagerConfig instance

    Raises:
        pydantic.ValidationError: If a value fails validation

    Example:
        >>> config = load_from_env()
        >>> config = load_from_env(base_url="https://staging.example.com")
    """
    settings = APIManagerSettings(_env_file=env_file, **overrides)

    logging_cfg = None
    if settings.log_level:
        logging_cfg = LoggingConfig(
            level=settings.log_level,
            format=settings.log_format,
            console=settings.log_console,
            file_path=settings.log_file_path,
        )

    return APIManagerConfig(
        base_url=settings.base_url or None,
        timeout=TimeoutConfig(
            connect=settings.timeout_connect,
            read=settings.timeout_read,
        ),
        verify_ssl=settings.verify_ssl,
        success_status_range=(settings.success_status_min, settings.success_status_max),
        indicator_message=settings.indicator_message,
        logging=logging_cfg,
    )
