"""Markdown rendering and table of contents generation."""

from site_publisher.rendering.markdown import PageRenderer, Slugger, escape_html, render_markdown
from site_publisher.rendering.toc import build_toc

__all__ = [
    "PageRenderer",
    "Slugger",
    "escape_html",
    "render_markdown",
    "build_toc",
]
