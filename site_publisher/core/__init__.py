"""Core components for Site Publisher."""

from site_publisher.core.config import ConfigError, SiteConfig, load_config
from site_publisher.core.discovery import ContentDiscovery, parse_frontmatter
from site_publisher.core.index import IndexBuilder
from site_publisher.core.models import (
    BuildResult,
    ContentContext,
    ContentItem,
    Heading,
    IndexRecord,
    ProcessedItem,
    RenderedDocument,
)
from site_publisher.core.processor import ContentProcessor

__all__ = [
    "BuildResult",
    "ConfigError",
    "ContentContext",
    "ContentDiscovery",
    "ContentItem",
    "ContentProcessor",
    "Heading",
    "IndexBuilder",
    "IndexRecord",
    "ProcessedItem",
    "RenderedDocument",
    "SiteConfig",
    "load_config",
    "parse_frontmatter",
]
