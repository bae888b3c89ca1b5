"""Common CLI utilities and the main app group."""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from pagemap import __version__
from pagemap.settings import PagemapSettings

console = Console(stderr=True)
_configured = False


def configure_logging(*, verbose: bool = False, level: str = "INFO") -> None:
    """Configure logging with Rich handler. Call once at startup."""
    global _configured
    if _configured:
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                tracebacks_show_locals=verbose,
            )
        ],
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    _configured = True


def resolve_locations(
    settings: PagemapSettings,
    project_dir: Path | None,
    config_path: Path | None,
) -> tuple[Path, Path]:
    """
    Work out the project root and configuration file for a command.

    CLI options win over PAGEMAP_* settings. A --config path is taken as
    given; the configured default is looked up inside the project root.

    Returns:
        Tuple of (project root, configuration file path).
    """
    root = (project_dir or settings.get_project_dir()).resolve()
    if config_path is not None:
        return root, config_path.resolve()
    config_file = settings.config_path
    if not config_file.is_absolute():
        config_file = root / config_file
    return root, config_file


@click.group(help="Generate sitemap.xml and robots.txt for file-system routed web projects.")
@click.version_option(version=__version__, prog_name="pagemap")
def app() -> None:
    """
    Entry point for the pagemap CLI.

    Provides commands for previewing discovered routes and generating
    search-engine assets from .seo-config.json.
    """
