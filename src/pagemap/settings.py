"""
Runtime settings for the pagemap CLI.

Uses Pydantic Settings for type-safe environment variable loading.
"""

from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagemap.config import DEFAULT_CONFIG_FILE, describe_validation_error
from pagemap.exceptions import ConfigurationError


class PagemapSettings(BaseSettings):
    """Environment-driven defaults; CLI options take precedence.

    Values come from PAGEMAP_* variables only. get_settings() loads any .env
    file into the environment first.
    """

    model_config = SettingsConfigDict(
        env_prefix="PAGEMAP_",
        case_sensitive=False,
        extra="ignore",
    )

    config_path: Path = Field(default=Path(DEFAULT_CONFIG_FILE), description="Project configuration file")
    project_dir: Path | None = Field(default=None, description="Web project root (defaults to cwd)")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper

    def get_project_dir(self) -> Path:
        """Project root, falling back to the current directory."""
        return (self.project_dir or Path.cwd()).expanduser()


def get_settings() -> PagemapSettings:
    """
    Load settings from the environment and the nearest .env file.

    Raises:
        ConfigurationError: If a PAGEMAP_* variable has an invalid value.
    """
    load_dotenv(find_dotenv(usecwd=True))
    try:
        return PagemapSettings()
    except ValidationError as e:
        problems = describe_validation_error(e, prefix="PAGEMAP_")
        raise ConfigurationError(f"Invalid environment settings: {problems}") from e
