"""Error hierarchy for pagemap.

Every error carries a short correlation ID, shown in its string form, and a
context dictionary with the paths involved.
"""

import uuid
from typing import Any


def generate_correlation_id() -> str:
    """Return an 8-character correlation ID."""
    return uuid.uuid4().hex[:8]


def _with_fields(context: dict[str, Any] | None, **fields: Any) -> dict[str, Any]:
    merged = dict(context or {})
    merged.update({key: str(value) for key, value in fields.items() if value is not None})
    return merged


class PagemapError(Exception):
    """Base class for all pagemap errors."""

    def __init__(
        self,
        message: str,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Args:
            message: Human-readable description, printed by the CLI.
            correlation_id: ID to reuse; a new one is generated if None.
            context: Extra details for logs and JSON output.
        """
        self.message = message
        self.correlation_id = correlation_id or generate_correlation_id()
        self.context = context or {}
        super().__init__(f"{message} [correlation_id={self.correlation_id}]")


class ConfigurationError(PagemapError):
    """The configuration file could not be read or is invalid."""

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Args:
            message: What is wrong with the configuration.
            config_path: File that was being loaded.
            correlation_id: ID to reuse; a new one is generated if None.
            context: Extra details; config_path is added to it.
        """
        super().__init__(message, correlation_id, _with_fields(context, config_path=config_path))


class ConfigFileNotFoundError(PagemapError):
    """No configuration file exists at the expected location."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Args:
            message: Description naming the missing file.
            file_path: Location that was checked.
            correlation_id: ID to reuse; a new one is generated if None.
            context: Extra details; file_path is added to it.
        """
        super().__init__(message, correlation_id, _with_fields(context, file_path=file_path))


class ArtifactWriteError(PagemapError):
    """A generated artifact could not be written to disk."""

    def __init__(
        self,
        message: str,
        artifact: str | None = None,
        path: str | None = None,
        correlation_id: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """
        Args:
            message: Description including the underlying OS error.
            artifact: Artifact name ("sitemap" or "robots").
            path: Output path that could not be written.
            correlation_id: ID to reuse; a new one is generated if None.
            context: Extra details; artifact and path are added to it.
        """
        super().__init__(message, correlation_id, _with_fields(context, artifact=artifact, path=path))
