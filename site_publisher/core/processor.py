"""Content processor: turns content items into page parts and index records."""

from typing import Optional

from site_publisher.core.models import ContentItem, IndexRecord, ProcessedItem
from site_publisher.images.thumbnails import ThumbnailStore
from site_publisher.rendering.markdown import render_markdown
from site_publisher.rendering.toc import build_toc
from site_publisher.transforms.frontmatter import IndexFieldsTransform


class ContentProcessor:
    """Processes one content item at a time for publishing.

    Handles:
    - Markdown rendering with heading ids and rebased image paths
    - Table of contents generation
    - Thumbnail resolution
    - Index record creation
    """

    def __init__(
        self,
        thumbnails: ThumbnailStore,
        index_fields: Optional[IndexFieldsTransform] = None,
    ):
        """Initialize ContentProcessor.

        Args:
            thumbnails: Store that materializes thumbnails for this run
            index_fields: Optional transform adding kind-specific index fields
        """
        self.thumbnails = thumbnails
        self.index_fields = index_fields

    def process(self, item: ContentItem, image_prefix: str = "..") -> ProcessedItem:
        """Render a content item.

        Rendering errors are not caught here; they abort the build.

        Args:
            item: The content item to process
            image_prefix: Relative path from the output page to the site root

        Returns:
            ProcessedItem with body HTML, TOC markup and resolved thumbnail
        """
        document = render_markdown(item.body, image_prefix=image_prefix)
        return ProcessedItem(
            item=item,
            body_html=document.html,
            toc_html=build_toc(document.headings),
            thumbnail=self.thumbnails.resolve(item.thumbnail, item.id),
        )

    def build_record(self, processed: ProcessedItem, content_path: str) -> IndexRecord:
        """Build the index record for a processed item.

        Args:
            processed: Result of :meth:`process`
            content_path: Site-relative path of the generated page

        Returns:
            IndexRecord for the list JSON
        """
        item = processed.item
        extra = {}
        if self.index_fields:
            extra = self.index_fields(item.frontmatter.copy(), item)

        return IndexRecord(
            id=item.id,
            title=item.title,
            date=item.date,
            category=item.category,
            description=item.description,
            tags=list(item.tags),
            thumbnail=processed.thumbnail,
            content_path=content_path,
            extra=extra,
        )
