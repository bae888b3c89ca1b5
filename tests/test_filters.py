"""Tests for route filtering, merging and normalisation."""

from collections.abc import AsyncIterator

import pytest

from pagemap.discovery.filters import (
    PrefixRule,
    WildcardRule,
    collect_extra_paths,
    compile_rule,
    filter_routes,
    matches_any,
    merge_paths,
    normalize_routes,
)


class TestCompileRule:
    """Tests for pattern compilation."""

    def test_literal_pattern_is_prefix_rule(self) -> None:
        """Test patterns without wildcard become prefix rules."""
        rule = compile_rule("/blog")
        assert isinstance(rule, PrefixRule)
        assert rule.matches("/blog")
        assert rule.matches("/blog/post")
        assert rule.matches("/blogroll")
        assert not rule.matches("/about/blog")

    def test_wildcard_pattern_is_wildcard_rule(self) -> None:
        """Test patterns with "*" become compiled wildcard rules."""
        rule = compile_rule("/admin/*")
        assert isinstance(rule, WildcardRule)
        assert rule.matches("/admin/users")
        assert not rule.matches("/admin")

    def test_wildcard_matches_by_containment(self) -> None:
        """Test wildcard patterns match anywhere in the route."""
        rule = compile_rule("/draft*")
        assert rule.matches("/blog/draft-post")

    def test_wildcard_escapes_regex_characters(self) -> None:
        """Test characters other than "*" are literal."""
        rule = compile_rule("/v1.0/*")
        assert rule.matches("/v1.0/docs")
        assert not rule.matches("/v1x0/docs")

    def test_matches_any(self) -> None:
        """Test OR semantics across rules."""
        rules = [compile_rule("/blog"), compile_rule("*secret*")]
        assert matches_any("/blog/a", rules)
        assert matches_any("/x/secret/y", rules)
        assert not matches_any("/about", rules)
        assert not matches_any("/about", [])


class TestFilterRoutes:
    """Tests for include/exclude filtering."""

    def test_include_wildcard(self) -> None:
        """Test include keeps only matching routes."""
        routes = ["/", "/blog", "/blog/post", "/about"]
        assert filter_routes(routes, include=["/blog*"]) == ["/blog", "/blog/post"]

    def test_exclude_wildcard(self) -> None:
        """Test exclude removes matching routes."""
        routes = ["/", "/admin", "/admin/users"]
        assert filter_routes(routes, exclude=["/admin*"]) == ["/"]

    def test_no_patterns_keeps_everything(self) -> None:
        """Test empty pattern lists are a no-op."""
        routes = ["/", "/a", "/a"]
        assert filter_routes(routes) == ["/", "/a", "/a"]

    def test_exclude_applies_after_include(self) -> None:
        """Test exclusion is subtracted from the included set."""
        routes = ["/", "/blog", "/blog/drafts", "/blog/post", "/about"]
        result = filter_routes(routes, include=["/blog"], exclude=["/blog/drafts"])
        assert result == ["/blog", "/blog/post"]

    def test_does_not_mutate_input(self) -> None:
        """Test filtering returns a new list."""
        routes = ["/", "/admin"]
        filter_routes(routes, exclude=["/admin"])
        assert routes == ["/", "/admin"]


class TestMergePaths:
    """Tests for merge_paths."""

    def test_appends_verbatim_in_order(self) -> None:
        """Test extra paths are appended without filtering."""
        assert merge_paths(["/"], ["/b", "/a"], ["/[slug]"]) == ["/", "/b", "/a", "/[slug]"]


class TestCollectExtraPaths:
    """Tests for the optional extra path source."""

    @pytest.mark.asyncio
    async def test_no_source(self) -> None:
        """Test a missing source yields nothing and no error."""
        outcome = await collect_extra_paths(None)
        assert outcome.ok
        assert outcome.paths == []

    @pytest.mark.asyncio
    async def test_awaitable_source(self) -> None:
        """Test coroutine sources are awaited."""

        async def source() -> list[str]:
            return ["/blog/one", "/blog/two"]

        outcome = await collect_extra_paths(source)
        assert outcome.ok
        assert outcome.paths == ["/blog/one", "/blog/two"]

    @pytest.mark.asyncio
    async def test_failing_source_is_captured(self) -> None:
        """Test exceptions become a structured failure."""

        async def source() -> list[str]:
            raise RuntimeError("CMS unavailable")

        outcome = await collect_extra_paths(source)
        assert not outcome.ok
        assert outcome.error == "CMS unavailable"
        assert outcome.paths == []

    @pytest.mark.asyncio
    async def test_single_string_result_is_rejected(self) -> None:
        """Test a bare string is reported instead of being split into characters."""

        async def source() -> str:
            return "/blog"

        outcome = await collect_extra_paths(source)  # type: ignore[arg-type]
        assert not outcome.ok
        assert "single string" in (outcome.error or "")
        assert outcome.paths == []

    @pytest.mark.asyncio
    async def test_async_iterator_keeps_partial_paths(self) -> None:
        """Test paths yielded before a failure are kept."""

        async def source() -> AsyncIterator[str]:
            yield "/p/1"
            yield "/p/2"
            raise ConnectionError("connection reset")

        outcome = await collect_extra_paths(source)
        assert outcome.error == "connection reset"
        assert outcome.paths == ["/p/1", "/p/2"]

    @pytest.mark.asyncio
    async def test_error_without_message_uses_type_name(self) -> None:
        """Test exceptions without a message are still reported."""

        def source():
            raise ValueError()

        outcome = await collect_extra_paths(source)
        assert outcome.error == "ValueError"


class TestNormalizeRoutes:
    """Tests for normalize_routes."""

    def test_removes_duplicates_preserving_order(self) -> None:
        """Test first occurrence wins."""
        assert normalize_routes(["/b", "/", "/b", "/a", "/"]) == ["/b", "/", "/a"]

    def test_drops_placeholders(self) -> None:
        """Test bracket and colon placeholders are dropped."""
        routes = ["/", "/blog/[slug]", "/users/:id", "/about"]
        assert normalize_routes(routes) == ["/", "/about"]

    def test_strips_page_suffix(self) -> None:
        """Test trailing /page segments are removed."""
        assert normalize_routes(["/blog/page", "/docs/page/page"]) == ["/blog", "/docs"]

    def test_page_suffix_only_becomes_root(self) -> None:
        """Test a route reduced to nothing becomes "/"."""
        assert normalize_routes(["/page"]) == ["/"]

    def test_dedupes_after_stripping(self) -> None:
        """Test stripped routes collapse into existing ones."""
        assert normalize_routes(["/blog", "/blog/page"]) == ["/blog"]

    def test_does_not_restore_root(self) -> None:
        """Test a missing "/" is not re-added."""
        assert normalize_routes(["/about"]) == ["/about"]

    def test_is_idempotent(self) -> None:
        """Test normalising twice equals normalising once."""
        routes = ["/", "/a/page", "/a", "/[x]", "/b", "/page", "/b/page/page"]
        once = normalize_routes(routes)
        assert normalize_routes(once) == once

    def test_output_never_contains_placeholders(self) -> None:
        """Test no placeholder survives normalisation."""
        routes = ["/[a]/page", "/x:y", "/[[...all]]", "/ok", "/:id/page"]
        for route in normalize_routes(routes):
            assert "[" not in route
            assert ":" not in route
