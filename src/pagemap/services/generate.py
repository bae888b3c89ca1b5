"""Generate service: route discovery and artifact generation."""

import logging
from pathlib import Path
from typing import AsyncGenerator

from pagemap.artifacts.robots import write_robots
from pagemap.artifacts.sitemap import write_sitemap
from pagemap.discovery.filters import (
    ExtraPathSource,
    collect_extra_paths,
    filter_routes,
    merge_paths,
    normalize_routes,
)
from pagemap.discovery.routes import DEFAULT_RULES, ClassifierRules, discover_routes, resolve_route_root
from pagemap.exceptions import PagemapError
from pagemap.models import ArtifactResult, GenerateEvent, PipelineResult, SeoConfig
from pagemap.utils import resolve_output_path

LOGGER = logging.getLogger(__name__)

NO_ROUTE_ROOT_WARNING = (
    "No pages/, src/pages/, app/ or src/app/ directory found, falling back to default routes"
)


def _describe_error(error: Exception) -> str:
    if isinstance(error, PagemapError):
        return error.message
    return str(error) or type(error).__name__


class GenerateService:
    """Discover routes and write sitemap.xml and robots.txt.

    Usage (streaming with progress):
        service = GenerateService(config, project_root=Path("my-site"))
        async for event in service.generate():
            if event.type == "warning":
                print(f"Warning: {event.message}")
            elif event.type == "artifact":
                print(event.artifact.name, event.artifact.outcome)
            elif event.type == "complete":
                result = event.result

    With dynamic routes from a CMS:
        async def cms_paths() -> list[str]:
            return ["/blog/hello-world", "/blog/second-post"]

        service = GenerateService(config, extra_paths=cms_paths)
        result = await service.generate_all()
    """

    def __init__(
        self,
        config: SeoConfig,
        project_root: Path | None = None,
        extra_paths: ExtraPathSource | None = None,
        rules: ClassifierRules = DEFAULT_RULES,
    ):
        """Initialize generate service.

        Args:
            config: Resolved project configuration (read-only)
            project_root: Web project root; defaults to the current directory.
                Relative output paths are resolved against it.
            extra_paths: Optional zero-argument callable supplying additional
                literal routes (awaitable of paths or async iterator of paths)
            rules: Naming conventions for route discovery
        """
        self._config = config
        self._project_root = (project_root or Path.cwd()).resolve()
        self._extra_paths = extra_paths
        self._rules = rules

    @property
    def project_root(self) -> Path:
        return self._project_root

    def output_path(self, artifact: str) -> Path:
        """Resolved output path for "sitemap" or "robots"."""
        return resolve_output_path(getattr(self._config.paths, artifact), self._project_root)

    async def build_routes(self) -> tuple[list[str], list[str]]:
        """Run discovery, filtering, merging and normalisation.

        Returns:
            Tuple of (normalised routes, warnings raised along the way).
        """
        warnings: list[str] = []
        settings = self._config.sitemap_settings

        route_root = resolve_route_root(self._project_root)
        if route_root is None:
            LOGGER.warning(NO_ROUTE_ROOT_WARNING)
            warnings.append(NO_ROUTE_ROOT_WARNING)
            routes = ["/"]
        else:
            LOGGER.info(f"Using {route_root.relative_to(self._project_root)} directory for route discovery")
            routes = discover_routes(route_root, self._rules)

        routes = filter_routes(routes, include=settings.include, exclude=settings.exclude)

        if settings.additional_paths:
            routes = merge_paths(routes, settings.additional_paths)
            LOGGER.info(f"Added {len(settings.additional_paths)} additional paths from config")

        extra = await collect_extra_paths(self._extra_paths)
        if not extra.ok:
            message = f"Extra path source failed: {extra.error}"
            LOGGER.warning(message)
            warnings.append(message)
        if extra.paths:
            routes = merge_paths(routes, extra.paths)
            LOGGER.info(f"Added {len(extra.paths)} paths from extra path source")

        routes = normalize_routes(routes)
        LOGGER.debug(f"Normalised to {len(routes)} routes")
        return routes, warnings

    async def generate(self) -> AsyncGenerator[GenerateEvent, None]:
        """Generate every enabled artifact, yielding progress events.

        A failing artifact is recorded as an error and does not stop the
        others.

        Yields:
            GenerateEvent for each phase:
            - discovery: Route discovery is starting
            - warning: Non-fatal problem (no route root, extra source failure)
            - artifact: One artifact finished (success or error)
            - complete: Final event with PipelineResult
        """
        result = PipelineResult()
        features = self._config.features

        if features.sitemap:
            yield GenerateEvent(type="discovery", message=f"Discovering routes in {self._project_root}")
            try:
                routes, warnings = await self.build_routes()
                for warning in warnings:
                    result.warnings.append(warning)
                    yield GenerateEvent(type="warning", message=warning)
                result.routes = routes

                settings = self._config.sitemap_settings
                path = write_sitemap(
                    routes,
                    self._config.site_url,
                    self.output_path("sitemap"),
                    changefreq=settings.changefreq,
                    priority=settings.priority,
                )
                record = ArtifactResult(name="sitemap", outcome="success", detail=str(path))
            except Exception as e:
                LOGGER.error(f"Sitemap generation failed: {_describe_error(e)}")
                record = ArtifactResult(name="sitemap", outcome="error", detail=_describe_error(e))
            result.artifacts.append(record)
            yield GenerateEvent(type="artifact", artifact=record)

        if features.robots:
            try:
                path = write_robots(self._config.site_url, self.output_path("robots"), self._config.robots)
                record = ArtifactResult(name="robots", outcome="success", detail=str(path))
            except Exception as e:
                LOGGER.error(f"Robots.txt generation failed: {_describe_error(e)}")
                record = ArtifactResult(name="robots", outcome="error", detail=_describe_error(e))
            result.artifacts.append(record)
            yield GenerateEvent(type="artifact", artifact=record)

        if result.success:
            LOGGER.info(f"Generated {result.success_count} artifact(s)")
        else:
            LOGGER.warning(f"Generated {result.success_count} artifact(s) with {result.error_count} error(s)")

        yield GenerateEvent(type="complete", result=result)

    async def generate_all(self) -> PipelineResult:
        """Generate every enabled artifact and return the final result."""
        result = PipelineResult()
        async for event in self.generate():
            if event.type == "complete" and event.result is not None:
                result = event.result
        return result
