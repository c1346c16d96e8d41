"""Table of contents markup for rendered documents."""

from typing import Iterable

from site_publisher.core.models import Heading
from site_publisher.rendering.markdown import escape_html

TOC_LEVELS = (2, 3)


def build_toc(headings: Iterable[Heading]) -> str:
    """Build the table of contents list for a document.

    Only level 2 and 3 headings are listed. Returns an empty string when
    none qualify; callers omit the whole TOC region in that case.
    """
    entries = [h for h in headings if h.level in TOC_LEVELS]
    if not entries:
        return ""

    items = "".join(
        f'<li class="toc-item toc-item--level-{h.level}">'
        f'<a href="#{escape_html(h.id)}">{escape_html(h.text)}</a></li>'
        for h in entries
    )
    return f'<ul class="toc-list">{items}</ul>'
