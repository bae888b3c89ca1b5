"""Service layer for pagemap.

This module provides the core services:
- GenerateService: Route discovery plus sitemap.xml and robots.txt generation
"""

from pagemap.services.generate import GenerateService

__all__ = [
    "GenerateService",
]
