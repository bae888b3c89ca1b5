"""Pytest configuration and shared fixtures for pagemap tests."""

import json
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Pure logic tests with no I/O")
    config.addinivalue_line("markers", "integration: Filesystem-heavy tests over temporary project trees")
    config.addinivalue_line("markers", "e2e: End-to-end tests running the CLI")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """
    Apply default markers to tests without explicit markers.

    Tests should use explicit markers (@pytest.mark.integration, @pytest.mark.e2e).
    Unmarked tests default to unit.
    """
    for item in items:
        # Skip if already has a category marker
        marker_names = [m.name for m in item.iter_markers()]
        if any(m in marker_names for m in ("unit", "integration", "e2e")):
            continue

        # Default unmarked tests to unit
        item.add_marker(pytest.mark.unit)


def create_files(root: Path, relative_paths: Iterable[str]) -> Path:
    """Create empty files (and their directories) under root."""
    for relative in relative_paths:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("export default function Page() {}\n", encoding="utf-8")
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Factory building a project tree from relative file paths."""

    def _make(*relative_paths: str) -> Path:
        return create_files(tmp_path, relative_paths)

    return _make


@pytest.fixture
def app_project(make_tree: Callable[..., Path]) -> Path:
    """A small app-router project.

    Returns:
        Project root containing app/ with static, dynamic, grouped and
        private segments.
    """
    return make_tree(
        "app/page.tsx",
        "app/layout.tsx",
        "app/about/page.tsx",
        "app/blog/page.tsx",
        "app/blog/[slug]/page.tsx",
        "app/(marketing)/pricing/page.tsx",
        "app/_private/secret/page.tsx",
        "app/components/Button.tsx",
        "app/admin/page.tsx",
        "app/admin/users/page.tsx",
        "app/docs/getting-started/page.tsx",
    )


@pytest.fixture
def seo_config_data() -> dict[str, Any]:
    """Configuration as written to .seo-config.json."""
    return {
        "siteUrl": "https://example.com/",
        "features": {"sitemap": True, "robots": True, "meta": False},
        "paths": {"sitemap": "./public/sitemap.xml", "robots": "./public/robots.txt"},
        "sitemap": {
            "include": [],
            "exclude": ["/admin*"],
            "additionalPaths": ["/landing"],
            "changefreq": "daily",
            "priority": 0.5,
        },
        "robots": {
            "userAgent": "*",
            "disallow": ["/admin", "/api"],
            "allow": [],
            "crawlDelay": None,
            "host": None,
        },
        "metadata": {"title": "Your Title", "description": "Your Description"},
        "googleSearchConsole": {"enabled": False, "method": "meta", "value": ""},
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Factory writing a .seo-config.json into the temporary project root."""

    def _write(data: dict[str, Any]) -> Path:
        config_file = tmp_path / ".seo-config.json"
        config_file.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return config_file

    return _write
