"""Command-line interface for pagemap.

This package provides the CLI commands for pagemap. Commands are organized
into modules by functionality:

- generate: Write sitemap.xml and robots.txt from .seo-config.json
- routes: Preview the routes the sitemap would contain
"""

# Import all command modules to register them with the app
# The order doesn't matter - Click handles command registration
from pagemap.cli import (
    generate,  # noqa: F401
    routes,  # noqa: F401
)
from pagemap.cli._common import app

__all__ = ["app"]
