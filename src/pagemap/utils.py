"""Utility functions for pagemap."""

import contextlib
import logging
import os
from pathlib import Path

from pagemap.exceptions import ArtifactWriteError

LOGGER = logging.getLogger(__name__)


def site_base(site_url: str) -> str:
    """
    Return the site URL without trailing slashes, ready for path joining.

    Args:
        site_url: Configured site URL (e.g., "https://example.com/").

    Returns:
        Site URL such as "https://example.com".
    """
    return site_url.rstrip("/")


def resolve_output_path(path: str | Path, base_dir: Path | None = None) -> Path:
    """
    Resolve an output path, anchoring relative paths at base_dir.

    Args:
        path: Configured output path.
        base_dir: Directory relative paths are resolved against (default: cwd).

    Returns:
        Absolute output path.
    """
    output = Path(path)
    if not output.is_absolute() and base_dir is not None:
        output = base_dir / output
    return output.resolve()


def write_text_atomic(path: Path, content: str, artifact: str) -> Path:
    """
    Write UTF-8 text via a temporary file and rename.

    Parent directories are created as needed. Readers see either the
    previous file or the complete new one.

    Args:
        path: Destination file.
        content: Text to write.
        artifact: Artifact name for error context.

    Returns:
        The destination path.

    Raises:
        ArtifactWriteError: If the directory or file cannot be written.
    """
    temp_path = path.with_name(f".{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path.write_text(content, encoding="utf-8")
        os.replace(temp_path, path)
    except OSError as e:
        with contextlib.suppress(OSError):
            temp_path.unlink()
        raise ArtifactWriteError(
            f"Failed to write {artifact} to {path}: {e.strerror or e}",
            artifact=artifact,
            path=str(path),
        ) from e

    LOGGER.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), path)
    return path
