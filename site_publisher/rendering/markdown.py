"""Markdown rendering with heading anchors and depth-aware image paths."""

import html
import re
from typing import Any, Dict, List, Optional

import mistune

from site_publisher.core.models import Heading, RenderedDocument

TAG_PATTERN = re.compile(r'<[!/a-z].*?>', re.IGNORECASE | re.DOTALL)

# Punctuation (ASCII and the general/supplemental punctuation blocks) is
# dropped from slugs; letters in any script are kept.
SLUG_PUNCTUATION = re.compile(
    r"[\u2000-\u206F\u2E00-\u2E7F\\'!\"#$%&()*+,./:;<=>?@\[\]^`{|}~]"
)

HTML_ESCAPES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
}

PARENT_DIR = "../"

MARKDOWN_PLUGINS = ['table', 'strikethrough', 'task_lists', 'url']


def strip_tags(text: str) -> str:
    """Turn inline HTML into plain text."""
    return html.unescape(TAG_PATTERN.sub('', text))


def escape_html(value: Any = "") -> str:
    """Escape ``& < > "`` for HTML text and attribute contexts."""
    return "".join(HTML_ESCAPES.get(c, c) for c in str(value if value is not None else ""))


class Slugger:
    """Generates heading ids that are unique within one document."""

    def __init__(self):
        self.seen: Dict[str, int] = {}

    def serialize(self, text: str) -> str:
        slug = strip_tags(text).lower().strip()
        slug = SLUG_PUNCTUATION.sub('', slug)
        slug = re.sub(r'\s', '-', slug)
        return slug or "section"

    def slug(self, text: str) -> str:
        """Return a slug for ``text``, suffixed with -1, -2... on repeats."""
        original = self.serialize(text)
        slug = original
        if slug in self.seen:
            occurrence = self.seen[original]
            while True:
                occurrence += 1
                slug = f"{original}-{occurrence}"
                if slug not in self.seen:
                    break
            self.seen[original] = occurrence
        self.seen[slug] = 0
        return slug


class PageRenderer(mistune.HTMLRenderer):
    """HTML renderer that anchors headings and rebases relative images.

    Headings get an ``id`` and are recorded in ``self.headings`` for the
    table of contents. Image sources starting with ``../`` are rewritten
    against ``image_prefix`` because published pages live deeper in the
    site than their content files.
    """

    def __init__(self, image_prefix: str = ".."):
        super().__init__(escape=False)
        self.image_prefix = image_prefix.rstrip('/')
        self.headings: List[Heading] = []
        self.slugger = Slugger()

    def heading(self, text: str, level: int, **attrs) -> str:
        plain = strip_tags(text).strip()
        slug = self.slugger.slug(plain)
        self.headings.append(Heading(level=level, text=plain, id=slug))
        return f'<h{level} id="{escape_html(slug)}">{text}</h{level}>\n'

    def image(self, text: str, url: str, title: Optional[str] = None) -> str:
        src = url or ""
        if src.startswith(PARENT_DIR):
            src = f"{self.image_prefix}/{src[len(PARENT_DIR):]}"
        alt = escape_html(strip_tags(text))
        safe_title = escape_html(html.unescape(title or ""))
        return f'<img src="{self.safe_url(src)}" alt="{alt}" title="{safe_title}" />'


def render_markdown(body: str, image_prefix: str = "..") -> RenderedDocument:
    """Render one document's Markdown body.

    A new renderer is created per call so heading ids never collide with
    ids from another document.

    Args:
        body: Markdown source
        image_prefix: Path from the output page back to the site root

    Returns:
        RenderedDocument with the HTML and the headings in document order
    """
    renderer = PageRenderer(image_prefix=image_prefix)
    markdown = mistune.create_markdown(renderer=renderer, plugins=MARKDOWN_PLUGINS)
    return RenderedDocument(html=markdown(body), headings=renderer.headings)
