"""sitemap.xml generation.

Serialises a normalised route list into a standard sitemap document and
writes it to disk.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal
from pathlib import Path
from xml.etree import ElementTree

from pagemap.models import ChangeFreq
from pagemap.utils import site_base, write_text_atomic

LOGGER = logging.getLogger(__name__)

# XML namespace for sitemaps
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

ROOT_PRIORITY = "1.0"


def format_priority(priority: float) -> str:
    """Render a priority as a plain decimal (0.7, 1.0, 0.00001), never in exponent form."""
    text = format(Decimal(repr(float(priority))).normalize(), "f")
    return text if "." in text else f"{text}.0"


def build_sitemap_xml(
    routes: Iterable[str],
    site_url: str,
    changefreq: ChangeFreq | str = ChangeFreq.WEEKLY,
    priority: float = 0.7,
) -> str:
    """
    Build a sitemap document for the given routes.

    The root route "/" always gets priority 1.0; every other route gets
    the configured default.

    Args:
        routes: Normalised routes, emitted in order.
        site_url: Base site URL; trailing slashes are stripped.
        changefreq: Change frequency applied to every route.
        priority: Default priority for non-root routes.

    Returns:
        Complete XML string with declaration and trailing newline.
    """
    base = site_base(site_url)
    freq = ChangeFreq(changefreq).value
    default_priority = format_priority(priority)

    urlset = ElementTree.Element("urlset")
    urlset.set("xmlns", SITEMAP_NS)

    for route in routes:
        url_el = ElementTree.SubElement(urlset, "url")
        ElementTree.SubElement(url_el, "loc").text = f"{base}{route}"
        ElementTree.SubElement(url_el, "changefreq").text = freq
        ElementTree.SubElement(url_el, "priority").text = ROOT_PRIORITY if route == "/" else default_priority

    ElementTree.indent(urlset, space="  ")
    body = ElementTree.tostring(urlset, encoding="unicode", short_empty_elements=False)
    return f"{XML_DECLARATION}\n{body}\n"


def write_sitemap(
    routes: list[str],
    site_url: str,
    output_path: Path,
    changefreq: ChangeFreq | str = ChangeFreq.WEEKLY,
    priority: float = 0.7,
) -> Path:
    """
    Write sitemap.xml, replacing any previous file.

    Args:
        routes: Normalised routes.
        site_url: Base site URL.
        output_path: Destination file; parent directories are created.
        changefreq: Change frequency applied to every route.
        priority: Default priority for non-root routes.

    Returns:
        Path the sitemap was written to.

    Raises:
        ArtifactWriteError: If the file cannot be written.
    """
    xml = build_sitemap_xml(routes, site_url, changefreq=changefreq, priority=priority)
    path = write_text_atomic(Path(output_path), xml, artifact="sitemap")
    LOGGER.info("Sitemap saved at %s with %d routes", path, len(routes))
    return path
