"""Project configuration loading."""

import logging
from pathlib import Path

from pydantic import ValidationError

from pagemap.exceptions import ConfigFileNotFoundError, ConfigurationError, generate_correlation_id
from pagemap.models import SeoConfig

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".seo-config.json"


def describe_validation_error(error: ValidationError, prefix: str | None = None) -> str:
    """
    Flatten a pydantic ValidationError into one line.

    Args:
        error: Validation error to describe.
        prefix: Environment variable prefix; when set, locations are shown
            as variable names (e.g., PAGEMAP_LOG_LEVEL).

    Returns:
        "location: message" pairs joined by "; ".
    """
    problems = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        if prefix:
            location = f"{prefix}{location.upper()}"
        problems.append(f"{location}: {err['msg']}")
    return "; ".join(problems)


def load_config(config_path: Path | str) -> SeoConfig:
    """
    Load and validate the project configuration file.

    Args:
        config_path: Path to the JSON configuration (camelCase keys).

    Returns:
        Validated, read-only SeoConfig.

    Raises:
        ConfigFileNotFoundError: If the file does not exist.
        ConfigurationError: If the file cannot be read or fails validation.
    """
    correlation_id = generate_correlation_id()
    path = Path(config_path)

    if not path.is_file():
        raise ConfigFileNotFoundError(
            f"No {path.name} found at {path}",
            file_path=str(path),
            correlation_id=correlation_id,
        )

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read configuration: {e}",
            config_path=str(path),
            correlation_id=correlation_id,
        ) from e

    try:
        config = SeoConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration: {describe_validation_error(e)}",
            config_path=str(path),
            correlation_id=correlation_id,
            context={"error_count": e.error_count()},
        ) from e

    LOGGER.debug("Loaded configuration from %s", path)
    return config
