"""Sitemap and robots.txt generation for file-system routed web projects."""

__version__ = "1.0.0"
