"""Route discovery from a file-system routed project tree.

This module walks a Next.js style route root (``pages/`` or ``app/``) and
turns its directory structure into literal URL paths.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

LOGGER = logging.getLogger(__name__)

# Candidate route roots relative to the project root, in priority order
ROUTE_ROOT_CANDIDATES = [
    Path("src") / "pages",
    Path("pages"),
    Path("src") / "app",
    Path("app"),
]


@dataclass(frozen=True)
class ClassifierRules:
    """
    Naming conventions that decide how directory entries map to routes.

    Attributes:
        page_files: File names that make their directory a route (app router).
        route_extensions: Extensions of flat route files (pages router).
        skip_prefixes: Name prefixes marking dynamic ("["), grouping ("(")
            and private ("_") entries. These never contribute a path segment.
        ignored_dirs: Directory names that are never routes (e.g., components).
        reserved_stems: App router special and metadata files that are not routes.
    """

    page_files: frozenset[str] = frozenset({"page.tsx", "page.ts", "page.jsx", "page.js"})
    route_extensions: tuple[str, ...] = (".tsx", ".ts", ".jsx", ".js")
    skip_prefixes: tuple[str, ...] = ("[", "(", "_")
    ignored_dirs: frozenset[str] = frozenset({"components"})
    reserved_stems: frozenset[str] = frozenset(
        {
            "layout",
            "loading",
            "error",
            "not-found",
            "template",
            "default",
            "route",
            "global-error",
            # Metadata files
            "sitemap",
            "robots",
            "manifest",
            "icon",
            "apple-icon",
            "opengraph-image",
            "twitter-image",
        }
    )

    def is_skipped_dir(self, name: str) -> bool:
        """Check if a directory is excluded from both routing and recursion."""
        return name.startswith(self.skip_prefixes) or name in self.ignored_dirs

    def route_stem(self, name: str) -> str | None:
        """
        Return the route stem of a flat route file, or None if it is not one.

        Args:
            name: File name (e.g., "about.tsx").

        Returns:
            File name without its route extension, or None when the file
            does not define a route on its own.
        """
        if name in self.page_files or name.startswith("page."):
            return None
        if name.startswith("_") or "[" in name:
            return None
        for ext in self.route_extensions:
            if name.endswith(ext):
                stem = name[: -len(ext)]
                if stem in self.reserved_stems:
                    return None
                return stem
        return None


DEFAULT_RULES = ClassifierRules()


def resolve_route_root(project_root: Path) -> Path | None:
    """
    Find the directory whose structure defines the project's routes.

    Args:
        project_root: Root directory of the web project.

    Returns:
        First existing candidate directory, or None if the project has none.
    """
    for candidate in ROUTE_ROOT_CANDIDATES:
        route_root = project_root / candidate
        if route_root.is_dir():
            return route_root
    return None


def scan_routes(root: Path, rules: ClassifierRules = DEFAULT_RULES) -> list[str]:
    """
    Walk a route root and return the routes implied by its structure.

    Directories are visited depth-first, entries within a directory in
    name order. Symbolic links are never followed, so every directory is
    visited at most once. The result is raw: it may contain duplicates and contains
    "/" only if the root itself defines a page.

    Args:
        root: Route root directory (must exist).
        rules: Naming conventions to apply.

    Returns:
        Route paths in visit order.
    """
    return _scan_directory(Path(root), "", rules)


def _scan_directory(directory: Path, prefix: str, rules: ClassifierRules) -> list[str]:
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)

    routes: list[str] = []
    if any(entry.is_file(follow_symlinks=False) and entry.name in rules.page_files for entry in entries):
        routes.append(prefix or "/")

    for entry in entries:
        if entry.is_symlink():
            LOGGER.debug("Skipping symlink %s", entry.path)
            continue
        if entry.is_dir(follow_symlinks=False):
            if rules.is_skipped_dir(entry.name):
                LOGGER.debug("Skipping directory %s", entry.path)
                continue
            routes.extend(_scan_directory(Path(entry.path), f"{prefix}/{entry.name}", rules))
        elif entry.is_file(follow_symlinks=False):
            stem = rules.route_stem(entry.name)
            if stem is None:
                continue
            route = prefix if stem == "index" else f"{prefix}/{stem}"
            routes.append(route or "/")

    return routes


def discover_routes(root: Path, rules: ClassifierRules = DEFAULT_RULES) -> list[str]:
    """
    Discover routes under a route root, guaranteeing a root entry.

    Args:
        root: Route root directory (must exist).
        rules: Naming conventions to apply.

    Returns:
        Route paths in visit order, with "/" inserted first when the walk
        did not produce it.
    """
    routes = scan_routes(root, rules)
    if "/" not in routes:
        routes.insert(0, "/")
    LOGGER.debug("Discovered %d routes under %s", len(routes), root)
    return routes
