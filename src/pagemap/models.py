"""Data models for pagemap."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# =============================================================================
# Project Configuration (.seo-config.json)
# =============================================================================


class ChangeFreq(str, Enum):
    """Sitemap change-frequency hints."""

    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


class _ConfigModel(BaseModel):
    """Base for config sections: camelCase on disk, read-only once loaded."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class SitemapSettings(_ConfigModel):
    """Sitemap section of the project configuration.

    Include and exclude entries are either literal path prefixes ("/blog")
    or wildcard patterns where "*" matches any sequence ("/admin/*").
    """

    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    additional_paths: list[str] = Field(default_factory=list)
    changefreq: ChangeFreq = ChangeFreq.WEEKLY
    priority: float = Field(default=0.7, ge=0.0, le=1.0)


class RobotsSettings(_ConfigModel):
    """robots.txt section of the project configuration."""

    user_agent: str = "*"
    allow: list[str] = Field(default_factory=lambda: ["/"])
    disallow: list[str] = Field(default_factory=lambda: ["/admin", "/api"])
    crawl_delay: int | None = Field(default=None, ge=0)
    host: str | None = None


class FeatureFlags(_ConfigModel):
    """Which artifacts to generate."""

    sitemap: bool = True
    robots: bool = True


class OutputPaths(_ConfigModel):
    """Where generated artifacts are written, relative to the project root."""

    sitemap: str = "./public/sitemap.xml"
    robots: str = "./public/robots.txt"


class SeoConfig(_ConfigModel):
    """Resolved project configuration.

    Usage:
        config = SeoConfig.model_validate_json(Path(".seo-config.json").read_text())
        config.sitemap_settings.changefreq  # ChangeFreq.WEEKLY unless configured
    """

    site_url: str
    features: FeatureFlags = Field(default_factory=FeatureFlags)
    paths: OutputPaths = Field(default_factory=OutputPaths)
    sitemap: SitemapSettings | None = None
    robots: RobotsSettings | None = None

    @property
    def sitemap_settings(self) -> SitemapSettings:
        """Sitemap section, falling back to defaults when absent."""
        return self.sitemap or SitemapSettings()

    @property
    def robots_settings(self) -> RobotsSettings:
        """Robots section, falling back to defaults when absent."""
        return self.robots or RobotsSettings()


# =============================================================================
# Pipeline Results
# =============================================================================


class ArtifactResult(BaseModel):
    """Outcome of generating a single artifact."""

    name: str
    outcome: Literal["success", "error"]
    detail: str


class PipelineResult(BaseModel):
    """Outcome of a generate run, one record per attempted artifact."""

    artifacts: list[ArtifactResult] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    routes: list[str] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when no artifact failed."""
        return all(a.outcome == "success" for a in self.artifacts)

    @property
    def success_count(self) -> int:
        return sum(1 for a in self.artifacts if a.outcome == "success")

    @property
    def error_count(self) -> int:
        return sum(1 for a in self.artifacts if a.outcome == "error")


class GenerateEvent(BaseModel):
    """Event emitted during a generate run."""

    type: Literal["discovery", "warning", "artifact", "complete"]
    message: str | None = None
    artifact: ArtifactResult | None = None  # Only set for "artifact" type
    result: PipelineResult | None = None  # Only set for "complete" type
