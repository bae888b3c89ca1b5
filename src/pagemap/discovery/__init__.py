"""Route discovery utilities.

This package turns a project's route tree into the literal route list
that the sitemap is built from.
"""

from pagemap.discovery.filters import (
    ExtraPaths,
    FilterRule,
    PrefixRule,
    WildcardRule,
    collect_extra_paths,
    compile_rules,
    filter_routes,
    matches_any,
    merge_paths,
    normalize_routes,
)
from pagemap.discovery.routes import (
    DEFAULT_RULES,
    ROUTE_ROOT_CANDIDATES,
    ClassifierRules,
    discover_routes,
    resolve_route_root,
    scan_routes,
)

__all__ = [
    # Routes
    "DEFAULT_RULES",
    "ROUTE_ROOT_CANDIDATES",
    "ClassifierRules",
    "discover_routes",
    "resolve_route_root",
    "scan_routes",
    # Filters
    "ExtraPaths",
    "FilterRule",
    "PrefixRule",
    "WildcardRule",
    "collect_extra_paths",
    "compile_rules",
    "filter_routes",
    "matches_any",
    "merge_paths",
    "normalize_routes",
]
