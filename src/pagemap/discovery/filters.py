"""Route filtering, merging and normalisation.

Include/exclude patterns follow the sitemap configuration conventions:

- A pattern without "*" is a literal prefix ("/blog" keeps "/blog/post").
- A pattern with "*" matches when it occurs anywhere in the route, with
  "*" standing for any sequence of characters ("/admin/*").
"""

import inspect
import logging
import re
from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
from dataclasses import dataclass, field

LOGGER = logging.getLogger(__name__)

# Markers of route segments that cannot be resolved to a literal URL
PLACEHOLDER_MARKERS = ("[", ":")

PAGE_SUFFIX = "/page"

type ExtraPathSource = Callable[[], Awaitable[Iterable[str]] | AsyncIterator[str]]


@dataclass(frozen=True)
class PrefixRule:
    """Literal prefix pattern."""

    prefix: str

    def matches(self, route: str) -> bool:
        return route.startswith(self.prefix)


@dataclass(frozen=True)
class WildcardRule:
    """Wildcard pattern, compiled once."""

    pattern: str
    regex: re.Pattern[str]

    def matches(self, route: str) -> bool:
        return self.regex.search(route) is not None


type FilterRule = PrefixRule | WildcardRule


def compile_rule(pattern: str) -> FilterRule:
    """
    Build a filter rule from a configured pattern.

    Args:
        pattern: Literal prefix or wildcard pattern.

    Returns:
        PrefixRule if the pattern has no "*", otherwise a WildcardRule.
    """
    if "*" not in pattern:
        return PrefixRule(pattern)
    # Escape regex special chars except *
    regex_pattern = re.escape(pattern).replace(r"\*", ".*")
    return WildcardRule(pattern, re.compile(regex_pattern))


def compile_rules(patterns: Iterable[str]) -> list[FilterRule]:
    """Build filter rules for a list of patterns."""
    return [compile_rule(p) for p in patterns]


def matches_any(route: str, rules: Iterable[FilterRule]) -> bool:
    """Check if a route matches at least one rule."""
    return any(rule.matches(route) for rule in rules)


def filter_routes(
    routes: Iterable[str],
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
) -> list[str]:
    """
    Filter routes by include/exclude patterns.

    When include patterns exist, only routes matching at least one of them
    are kept. Routes matching any exclude pattern are then removed.

    Args:
        routes: Routes to filter.
        include: Patterns a route must match (any of).
        exclude: Patterns that remove a route (any of).

    Returns:
        Filtered routes in their original order.
    """
    include_rules = compile_rules(include)
    exclude_rules = compile_rules(exclude)

    filtered: list[str] = []
    for route in routes:
        if include_rules and not matches_any(route, include_rules):
            continue
        if exclude_rules and matches_any(route, exclude_rules):
            continue
        filtered.append(route)
    return filtered


def merge_paths(routes: Iterable[str], *extras: Iterable[str]) -> list[str]:
    """Append extra paths verbatim after the given routes."""
    merged = list(routes)
    for paths in extras:
        merged.extend(paths)
    return merged


@dataclass
class ExtraPaths:
    """
    Outcome of querying a caller-supplied source of extra paths.

    Attributes:
        paths: Paths produced by the source (partial if it failed midway).
        error: Failure message, None on success.
    """

    paths: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def collect_extra_paths(source: ExtraPathSource | None) -> ExtraPaths:
    """
    Await a caller-supplied source of extra paths without raising.

    The source is called with no arguments and may return an awaitable of
    paths or an async iterator of paths. Paths yielded by an async iterator
    before a failure are kept.

    Args:
        source: Zero-argument callable, or None.

    Returns:
        ExtraPaths with the collected paths and any failure message.
    """
    outcome = ExtraPaths()
    if source is None:
        return outcome

    try:
        produced = source()
        if inspect.isawaitable(produced):
            paths = await produced
            if isinstance(paths, str):
                outcome.error = f"Expected an iterable of paths, got a single string: {paths!r}"
                return outcome
            outcome.paths.extend(paths)
        else:
            async for path in produced:
                outcome.paths.append(path)
    except Exception as e:
        outcome.error = str(e) or type(e).__name__

    return outcome


def _strip_page_suffix(route: str) -> str:
    while route.endswith(PAGE_SUFFIX):
        route = route[: -len(PAGE_SUFFIX)]
    return route or "/"


def normalize_routes(routes: Iterable[str]) -> list[str]:
    """
    Normalise routes for serialisation.

    Drops routes with unresolved placeholders ("[slug]", ":id"), strips
    trailing "/page" segments and removes duplicates keeping the first
    occurrence. Does not add "/" when it is missing.

    Args:
        routes: Routes to normalise.

    Returns:
        Literal, unique routes in first-occurrence order.
    """
    seen: set[str] = set()
    normalized: list[str] = []
    for route in routes:
        if any(marker in route for marker in PLACEHOLDER_MARKERS):
            LOGGER.debug("Dropping placeholder route %s", route)
            continue
        route = _strip_page_suffix(route)
        if route in seen:
            continue
        seen.add(route)
        normalized.append(route)
    return normalized
