"""Build orchestration: content files in, pages and list files out."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Set

import requests

from site_publisher.core.config import SiteConfig
from site_publisher.core.discovery import ContentDiscovery
from site_publisher.core.index import IndexBuilder, read_thumbnails
from site_publisher.core.models import BuildResult
from site_publisher.core.processor import ContentProcessor
from site_publisher.images.thumbnails import ThumbnailStore
from site_publisher.locales import get_locale
from site_publisher.pages.blog import path_prefix, render_blog_page
from site_publisher.pages.portfolio import render_portfolio_page
from site_publisher.transforms.frontmatter import blog_index_fields, portfolio_index_fields

logger = logging.getLogger(__name__)

BLOG = "blog"
PORTFOLIO = "portfolio"
KINDS = (BLOG, PORTFOLIO)


@dataclass
class BuildContext:
    """State shared by every item of one run.

    The thumbnail store's used set and the result only grow during the
    run; both are read once at the end for cleanup and reporting.
    """
    thumbnails: ThumbnailStore
    result: BuildResult = field(default_factory=BuildResult)


class SiteBuilder:
    """Builds blog and portfolio pages and their list files."""

    def __init__(self, config: SiteConfig, session: Optional[requests.Session] = None):
        """Initialize SiteBuilder.

        Args:
            config: Site configuration
            session: HTTP session for thumbnail downloads
        """
        self.config = config
        self.session = session

    def new_context(self) -> BuildContext:
        store = ThumbnailStore(
            self.config.thumbnail_dir,
            url_prefix=self.config.thumbnail_url_prefix,
            session=self.session,
            timeout=self.config.fetch_timeout,
        )
        return BuildContext(thumbnails=store)

    def build(self, kinds: Iterable[str] = KINDS) -> BuildResult:
        """Run a full build of the given content kinds.

        Pages and list files are written first; unused thumbnails are
        removed last. Thumbnails listed in the published list files of
        kinds that are not rebuilt are kept.

        Args:
            kinds: Any of "blog" and "portfolio"

        Returns:
            BuildResult describing everything written, skipped and removed
        """
        kinds = list(kinds)
        unknown = [k for k in kinds if k not in KINDS]
        if unknown:
            raise ValueError(f"Unknown content kind: {', '.join(unknown)}")

        context = self.new_context()
        self.config.thumbnail_dir.mkdir(parents=True, exist_ok=True)

        if BLOG in kinds:
            self.build_blog(context)
        if PORTFOLIO in kinds:
            self.build_portfolio(context)

        for kind in KINDS:
            if kind not in kinds:
                for path in self._list_paths(kind):
                    context.thumbnails.mark_references(read_thumbnails(path))

        context.result.removed_thumbnails.extend(context.thumbnails.cleanup())
        return context.result

    def build_blog(self, context: BuildContext) -> BuildResult:
        """Build every blog post in every blog locale."""
        config = self.config
        result = BuildResult()
        discovery = ContentDiscovery(
            config.blog_content_dir,
            base_locale=config.base_locale,
            alternate_locales=config.alternate_locales,
        )
        processor = ContentProcessor(context.thumbnails, blog_index_fields())
        indexes = {lang: IndexBuilder(config.blog_list_path(lang)) for lang in config.blog_locales}
        ad_script = config.read_ad_script()

        for item_id in discovery.discover_ids():
            if not discovery.base_path(item_id).exists():
                logger.warning("%s content not found for ID: %s", config.base_locale, item_id)
                result.skipped.append((item_id, f"missing {config.base_locale} content"))
                continue

            for lang in config.blog_locales:
                item = discovery.load(item_id, lang)
                processed = processor.process(item, image_prefix=path_prefix(lang, config.base_locale))
                html = render_blog_page(processed, config, get_locale(lang), lang, ad_script)

                output = config.blog_page_path(item_id, lang)
                self._write_page(output, html)
                logger.info("generated (%s): %s", lang, config.relative(output))
                result.generated.append(output)
                indexes[lang].add(processor.build_record(processed, config.relative(output)))

        for index in indexes.values():
            result.indexes.append(index.write())

        output_dirs = [config.blog_page_path("_", lang).parent for lang in config.blog_locales]
        self._remove_stale_pages(output_dirs, result.generated)

        context.result.merge(result)
        return result

    def build_portfolio(self, context: BuildContext) -> BuildResult:
        """Build every portfolio entry."""
        config = self.config
        result = BuildResult()
        discovery = ContentDiscovery(config.portfolio_content_dir, base_locale=config.portfolio_locale)
        processor = ContentProcessor(context.thumbnails, portfolio_index_fields())
        index = IndexBuilder(config.portfolio_list_path)

        for item_id in discovery.discover_ids():
            item = discovery.load(item_id)
            processed = processor.process(item, image_prefix="..")
            html = render_portfolio_page(processed, config)

            output = config.portfolio_page_path(item_id)
            self._write_page(output, html)
            logger.info("generated: %s", config.relative(output))
            result.generated.append(output)
            index.add(processor.build_record(processed, config.relative(output)))

        result.indexes.append(index.write())
        self._remove_stale_pages([config.portfolio_output_dir], result.generated)

        context.result.merge(result)
        return result

    def _list_paths(self, kind: str) -> List[Path]:
        if kind == BLOG:
            return [self.config.blog_list_path(lang) for lang in self.config.blog_locales]
        return [self.config.portfolio_list_path]

    def _write_page(self, path: Path, html: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding='utf-8')

    def _remove_stale_pages(self, directories: Iterable[Path], generated: Iterable[Path]) -> None:
        """Delete pages of content items that no longer exist."""
        keep: Set[Path] = {Path(p) for p in generated}
        for directory in directories:
            if not directory.exists():
                continue
            for page in sorted(directory.glob("*.html")):
                if page not in keep:
                    logger.info("Removing stale page: %s", self.config.relative(page))
                    page.unlink()
