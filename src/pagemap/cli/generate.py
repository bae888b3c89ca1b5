"""Artifact generation command."""

from pathlib import Path

import click

from pagemap.cli._common import app, configure_logging, resolve_locations
from pagemap.models import PipelineResult, SeoConfig

STATUS_ICONS = {"success": "✅", "error": "❌"}


def _show_plan(config: SeoConfig) -> None:
    click.echo("Generation plan:")
    if config.features.sitemap:
        click.echo("  Sitemap generation: enabled")
        click.echo(f"      Output: {config.paths.sitemap}")
        click.echo(f"      Changefreq: {config.sitemap_settings.changefreq.value}")
    if config.features.robots:
        click.echo("  Robots.txt generation: enabled")
        click.echo(f"      Output: {config.paths.robots}")
    if not (config.features.sitemap or config.features.robots):
        click.echo("  Nothing enabled in features")
    click.echo()


def _show_summary(result: PipelineResult) -> None:
    if result.success:
        click.echo(f"Successfully generated {result.success_count} artifact(s)")
    else:
        click.echo(f"Generated {result.success_count} artifact(s) with {result.error_count} error(s)")

    click.echo("Generation results:")
    for artifact in result.artifacts:
        click.echo(f"  {STATUS_ICONS[artifact.outcome]} {artifact.name} - {artifact.detail}")
    for warning in result.warnings:
        click.echo(f"  ⚠️  {warning}")
    click.echo()


def _show_next_steps(config: SeoConfig, result: PipelineResult) -> None:
    click.echo("Next steps:")
    click.echo("  1. Review the generated files")
    click.echo("  2. Deploy your site")
    if any(a.name == "sitemap" and a.outcome == "success" for a in result.artifacts):
        click.echo(f"  3. Submit your sitemap: {config.site_url.rstrip('/')}/sitemap.xml")


@app.command("generate", help="Generate sitemap.xml and robots.txt from the project configuration.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(file_okay=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file. Defaults to .seo-config.json in the project directory (PAGEMAP_CONFIG_PATH).",
)
@click.option(
    "--project-dir",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help="Web project root. Defaults to the current directory (PAGEMAP_PROJECT_DIR).",
)
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Skip the confirmation prompt.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format: text (plan and summary) or json (full result).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def generate_cmd(
    config_path: Path | None,
    project_dir: Path | None,
    force: bool,
    output_format: str,
    verbose: bool,
) -> None:
    """Discover routes and write the configured artifacts.

    Examples:
        pagemap generate
        pagemap generate --force --project-dir ./my-site
        pagemap generate --force --format json
    """
    import asyncio
    import json

    from pagemap.config import load_config
    from pagemap.exceptions import PagemapError
    from pagemap.services.generate import GenerateService
    from pagemap.settings import get_settings

    try:
        settings = get_settings()
        configure_logging(verbose=verbose, level=settings.log_level)
        root, config_file = resolve_locations(settings, project_dir, config_path)
        config = load_config(config_file)
    except PagemapError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(1)

    if output_format == "text":
        _show_plan(config)

    if not force and not click.confirm("Continue with generation?", default=True, err=True):
        click.echo("Generation cancelled.")
        return

    service = GenerateService(config, project_root=root)
    result = asyncio.run(service.generate_all())

    if output_format == "json":
        click.echo(json.dumps({"success": result.success, **result.model_dump()}, indent=2))
    else:
        _show_summary(result)
        if result.success_count > 0:
            _show_next_steps(config, result)

    if not result.success:
        raise SystemExit(1)
