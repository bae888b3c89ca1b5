"""robots.txt generation.

This module renders the crawler policy for a site and points crawlers
at its sitemap.
"""

import logging
from pathlib import Path

from pagemap.models import RobotsSettings
from pagemap.utils import site_base, write_text_atomic

LOGGER = logging.getLogger(__name__)


def build_robots_txt(site_url: str, robots: RobotsSettings | None = None) -> str:
    """
    Build robots.txt content.

    Args:
        site_url: Base site URL; the Sitemap line points at its sitemap.xml.
        robots: Crawler policy. Defaults to allowing "/" and disallowing
            "/admin" and "/api" for all user agents.

    Returns:
        robots.txt content ending with a Sitemap directive and newline.
    """
    robots = robots or RobotsSettings()

    lines = [f"User-agent: {robots.user_agent}"]
    lines.extend(f"Allow: {path}" for path in robots.allow)
    lines.extend(f"Disallow: {path}" for path in robots.disallow)

    # A zero delay means no delay
    if robots.crawl_delay:
        lines.append(f"Crawl-Delay: {robots.crawl_delay}")
    if robots.host:
        lines.append(f"Host: {robots.host}")

    lines.append("")
    lines.append(f"Sitemap: {site_base(site_url)}/sitemap.xml")
    return "\n".join(lines) + "\n"


def write_robots(site_url: str, output_path: Path, robots: RobotsSettings | None = None) -> Path:
    """
    Write robots.txt, replacing any previous file.

    Args:
        site_url: Base site URL.
        output_path: Destination file; parent directories are created.
        robots: Crawler policy (defaults when None).

    Returns:
        Path robots.txt was written to.

    Raises:
        ArtifactWriteError: If the file cannot be written.
    """
    content = build_robots_txt(site_url, robots)
    path = write_text_atomic(Path(output_path), content, artifact="robots")
    LOGGER.info("Robots.txt saved at %s", path)
    return path
