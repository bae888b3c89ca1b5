"""Static artifact serialisers (sitemap.xml and robots.txt)."""

from pagemap.artifacts.robots import build_robots_txt, write_robots
from pagemap.artifacts.sitemap import SITEMAP_NS, build_sitemap_xml, format_priority, write_sitemap

__all__ = [
    # Robots
    "build_robots_txt",
    "write_robots",
    # Sitemap
    "SITEMAP_NS",
    "build_sitemap_xml",
    "format_priority",
    "write_sitemap",
]
