"""Route preview command."""

from pathlib import Path

import click

from pagemap.cli._common import app, configure_logging, resolve_locations


@app.command("routes", help="List the routes the sitemap would contain.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file. Without one, only discovery and normalisation run.",
)
@click.option(
    "--project-dir",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help="Web project root. Defaults to the current directory (PAGEMAP_PROJECT_DIR).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format: text (one route per line) or json.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def routes_cmd(
    config_path: Path | None,
    project_dir: Path | None,
    output_format: str,
    verbose: bool,
) -> None:
    """Preview discovered routes without writing any files.

    Examples:
        pagemap routes
        pagemap routes --project-dir ./my-site --format json
    """
    import asyncio
    import json

    from pagemap.config import load_config
    from pagemap.exceptions import PagemapError
    from pagemap.models import SeoConfig
    from pagemap.services.generate import GenerateService
    from pagemap.settings import get_settings

    try:
        settings = get_settings()
    except PagemapError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    configure_logging(verbose=verbose, level=settings.log_level)
    root, config_file = resolve_locations(settings, project_dir, config_path)

    if config_path is not None or config_file.is_file():
        try:
            config = load_config(config_file)
        except PagemapError as e:
            click.echo(f"Error: {e.message}", err=True)
            raise SystemExit(1)
    else:
        config = SeoConfig(site_url="")

    service = GenerateService(config, project_root=root)
    routes, warnings = asyncio.run(service.build_routes())

    if output_format == "json":
        click.echo(json.dumps({"routes": routes, "warnings": warnings}, indent=2))
    else:
        click.echo("\n".join(routes))
