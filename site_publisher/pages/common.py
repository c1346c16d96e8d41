"""Markup shared by the blog and portfolio page assemblers."""

import json
from typing import Any, Dict, Iterable
from urllib.parse import quote

from site_publisher.rendering.markdown import escape_html

DEFAULT_OG_IMAGE = "assets/img/ogp.png"


def display_text(value: Any) -> str:
    """Front matter value as page text; lists are joined with commas."""
    if value is None:
        return ""
    if isinstance(value, list):
        return ", ".join(str(v) for v in value if v is not None)
    return str(value)


def encode_uri_component(value: str) -> str:
    """Percent-encode a value the way JavaScript's encodeURIComponent does."""
    return quote(str(value), safe="-_.!~*'()")


def tags_html(tags: Iterable[str], list_url: str, css_class: str) -> str:
    """Tag links pointing at a listing page filtered by tag."""
    links = [
        f'<a class="tag" href="{list_url}?tag={escape_html(encode_uri_component(t))}">{escape_html(t)}</a>'
        for t in tags
    ]
    if not links:
        return ""
    return f'<p class="{css_class}">{" ".join(links)}</p>'


def og_image_url(thumbnail: str, base_url: str) -> str:
    """Absolute image URL for OpenGraph and JSON-LD.

    Remote URLs pass through, site-relative paths are made absolute and
    a missing thumbnail falls back to the site-wide default image.
    """
    if not thumbnail:
        return f"{base_url}/{DEFAULT_OG_IMAGE}"
    if thumbnail.startswith("http"):
        return thumbnail
    clean = thumbnail
    while clean.startswith("../"):
        clean = clean[3:]
    return f"{base_url}/{clean.lstrip('/')}"


def json_ld(data: Dict[str, Any]) -> str:
    """Serialize structured data for a ``<script type="application/ld+json">``.

    Angle brackets and ampersands are emitted as unicode escapes so that
    no content text can close the script element.
    """
    text = json.dumps(data, indent=2, ensure_ascii=False)
    return (
        text.replace('&', '\\u0026')
        .replace('<', '\\u003c')
        .replace('>', '\\u003e')
    )


SHARE_ICONS = {
    "twitter": (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="currentColor" '
        'width="20" height="20"><path d="M18.244 2.25h3.308l-7.227 8.26 8.502 11.24H16.17l-5.214-6.817'
        'L4.99 21.75H1.68l7.73-8.835L1.254 2.25H8.08l4.713 6.231zm-1.161 17.52h1.833L7.084 4.126H5.117z">'
        '</path></svg>'
    ),
    "facebook": (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="currentColor" '
        'width="20" height="20"><path d="M14 13.5h2.5l1-4H14v-2c0-1.03 0-2 2-2h1.5V2.14'
        'c-.326-.043-1.557-.14-2.857-.14C11.928 2 10 3.657 10 6.7v2.8H7v4h3V22h4z"></path></svg>'
    ),
    "line": (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="currentColor" '
        'width="20" height="20"><path d="M12 2C6.48 2 2 5.64 2 10.13c0 4.02 3.56 7.39 8.37 8.03'
        '.33.07.77.22.88.5.1.26.07.66.03.92l-.14.86c-.04.26-.2 1 .88.55 1.08-.46 5.84-3.44 7.97-5.89'
        'C21.44 13.5 22 11.9 22 10.13 22 5.64 17.52 2 12 2z"></path></svg>'
    ),
}


def share_buttons_html(title: str, url: str, share_title: str, label_suffix: str) -> str:
    """Share links for Twitter, Facebook and LINE."""
    encoded_title = encode_uri_component(title)
    encoded_url = encode_uri_component(url)
    services = [
        ("Twitter", "twitter",
         f"https://twitter.com/intent/tweet?url={encoded_url}&amp;text={encoded_title}"),
        ("Facebook", "facebook",
         f"https://www.facebook.com/sharer/sharer.php?u={encoded_url}"),
        ("LINE", "line",
         f"https://social-plugins.line.me/lineit/share?url={encoded_url}"),
    ]

    items = "".join(
        f"""
        <li class="share-buttons__item">
          <a href="{href}" class="share-buttons__link share-buttons__link--{css}" target="_blank" rel="noopener noreferrer" aria-label="{name}{escape_html(label_suffix)}">
            {SHARE_ICONS[css]}
          </a>
        </li>"""
        for name, css, href in services
    )
    return f"""<div class="share-buttons">
    <p class="share-buttons__title">{escape_html(share_title)}</p>
    <ul class="share-buttons__list">{items}
    </ul>
  </div>"""
