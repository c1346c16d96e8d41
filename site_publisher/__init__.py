"""
Site Publisher - Build blog and portfolio pages from Markdown content

Converts Markdown files with YAML front matter into static HTML pages
and JSON list files for a personal website, with support for:
- Bilingual blog posts with locale fallback
- Heading anchors and table of contents
- Thumbnail download, inline image extraction and cache cleanup
- Date-ordered list files for client-side listing pages
"""

from site_publisher.core import (
    BuildResult,
    ConfigError,
    ContentDiscovery,
    ContentItem,
    ContentProcessor,
    IndexBuilder,
    SiteConfig,
    load_config,
)
from site_publisher.core.builder import SiteBuilder
from site_publisher.images.thumbnails import ThumbnailStore

__version__ = "0.1.0"

__all__ = [
    "BuildResult",
    "ConfigError",
    "ContentDiscovery",
    "ContentItem",
    "ContentProcessor",
    "IndexBuilder",
    "SiteBuilder",
    "SiteConfig",
    "ThumbnailStore",
    "load_config",
]
