"""Content discovery: finding content files and reading their front matter."""

import datetime
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

from site_publisher.core.models import ContentContext, ContentItem

logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(r'\A---[ \t]*\n(.*?)^---[ \t]*$\n?', re.DOTALL | re.MULTILINE)


def parse_frontmatter(text: str, source: str = "<string>") -> Tuple[Dict[str, Any], str]:
    """Split a content file into its YAML front matter and Markdown body.

    Args:
        text: Raw file contents
        source: Name used in warnings

    Returns:
        Tuple of (frontmatter dict, body). The frontmatter is empty when
        the file has no header or the header is not a YAML mapping.
    """
    text = text.replace('\r\n', '\n').lstrip('\ufeff')
    match = FRONTMATTER_PATTERN.match(text)
    if not match:
        return {}, text
    body = text[match.end():]

    try:
        frontmatter = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        logger.warning("Failed to parse YAML in %s: %s", source, e)
        return {}, text

    if not isinstance(frontmatter, dict):
        return {}, body
    return frontmatter, body


class ContentDiscovery:
    """Finds content items in a directory and loads their locale variants.

    A base locale file is named ``<id>.md``; an alternate locale file is
    named ``<id>.<lang>.md`` and shares the id of its base file.
    """

    def __init__(
        self,
        content_dir: Path,
        base_locale: str = "ja",
        alternate_locales: Optional[Sequence[str]] = None,
    ):
        """Initialize ContentDiscovery.

        Args:
            content_dir: Directory holding the ``*.md`` content files
            base_locale: Locale of the ``<id>.md`` files
            alternate_locales: Locales that may have ``<id>.<lang>.md`` files
        """
        self.content_dir = Path(content_dir)
        self.base_locale = base_locale
        self.alternate_locales = list(alternate_locales or [])

    @property
    def locales(self) -> List[str]:
        """Every locale an item is built in, base locale first."""
        return [self.base_locale] + self.alternate_locales

    def discover_ids(self) -> List[str]:
        """Collect the distinct content ids in the directory.

        Returns:
            Sorted list of ids; empty if the directory does not exist
        """
        if not self.content_dir.exists():
            logger.warning("Content directory not found: %s", self.content_dir)
            return []

        ids = set()
        for path in self.content_dir.glob("*.md"):
            if path.is_file():
                ids.add(self.id_for(path))
        return sorted(ids)

    def id_for(self, path: Path) -> str:
        """Derive the content id from a file name."""
        stem = Path(path).name[:-len(".md")]
        for lang in self.alternate_locales:
            suffix = f".{lang}"
            if stem.endswith(suffix) and len(stem) > len(suffix):
                return stem[:-len(suffix)]
        return stem

    def base_path(self, item_id: str) -> Path:
        return self.content_dir / f"{item_id}.md"

    def source_path(self, item_id: str, locale: str) -> Optional[Path]:
        """Find the file to build ``item_id`` from in ``locale``.

        Alternate locales fall back to the base locale file when they have
        no file of their own.

        Returns:
            Path of the source file, or None if the base file is missing
        """
        base = self.base_path(item_id)
        if not base.exists():
            return None
        if locale != self.base_locale:
            localized = self.content_dir / f"{item_id}.{locale}.md"
            if localized.exists():
                return localized
        return base

    def load(self, item_id: str, locale: Optional[str] = None) -> Optional[ContentItem]:
        """Read one locale variant of a content item.

        Args:
            item_id: Content id
            locale: Locale to load (default: base locale)

        Returns:
            ContentItem, or None if the base locale file does not exist
        """
        locale = locale or self.base_locale
        path = self.source_path(item_id, locale)
        if path is None:
            return None
        return self._read_item(path, item_id, locale)

    def _read_item(self, path: Path, item_id: str, locale: str) -> ContentItem:
        context = ContentContext(path=path)
        frontmatter, body = parse_frontmatter(context.read_raw(), path.name)

        return ContentItem(
            context=context,
            id=item_id,
            locale=locale,
            title=self._get_string(frontmatter.get('title')) or item_id,
            description=self._get_string(frontmatter.get('description')),
            date=self._get_date_string(frontmatter.get('date')),
            category=self._get_string(frontmatter.get('category')),
            tags=self._extract_tags(frontmatter),
            thumbnail=self._get_string(frontmatter.get('thumbnail')).strip(),
            frontmatter=frontmatter,
            body=body,
        )

    def _extract_tags(self, frontmatter: Dict) -> List[str]:
        """Extract tags from frontmatter.

        Handles both list and comma-separated string formats.
        """
        tag_data = frontmatter.get('tags')
        if not tag_data:
            return []

        if isinstance(tag_data, list):
            raw = [str(tag) for tag in tag_data if tag is not None]
        else:
            raw = str(tag_data).split(',')

        return [tag.strip() for tag in raw if tag.strip()]

    def _get_string(self, value) -> str:
        if value is None:
            return ""
        return str(value)

    def _get_date_string(self, date_value) -> str:
        """Convert various date formats to string.

        Args:
            date_value: Date in various formats (str, datetime, date, None)

        Returns:
            Date string or empty string
        """
        if date_value is None:
            return ""

        if isinstance(date_value, str):
            return date_value.strip()

        if isinstance(date_value, datetime.datetime):
            return date_value.isoformat()

        if isinstance(date_value, datetime.date):
            return date_value.strftime('%Y-%m-%d')

        return str(date_value)
