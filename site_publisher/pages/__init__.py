"""HTML page assemblers."""

from site_publisher.pages.blog import render_blog_page
from site_publisher.pages.common import escape_html
from site_publisher.pages.portfolio import render_portfolio_page

__all__ = [
    "escape_html",
    "render_blog_page",
    "render_portfolio_page",
]
