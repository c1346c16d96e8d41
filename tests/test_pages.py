"""Tests for the blog and portfolio page assemblers."""

import json
import re

import pytest

from site_publisher.core.config import SiteConfig
from site_publisher.core.dates import format_date, parse_date, parse_datetime
from site_publisher.core.models import ContentContext, ContentItem, ProcessedItem
from site_publisher.locales import LOCALES, get_locale
from site_publisher.pages.blog import path_prefix, render_blog_page
from site_publisher.pages.common import (
    display_text,
    encode_uri_component,
    escape_html,
    json_ld,
    og_image_url,
    tags_html,
)
from site_publisher.pages.portfolio import render_portfolio_page

BODY_MARKER = '<p>Body with <b>markup</b></p>'


def make_item(tmp_path, **overrides) -> ContentItem:
    fields = dict(
        context=ContentContext(path=tmp_path / "post.md"),
        id="post_0001",
        locale="ja",
        title="Title",
        description="Description",
        date="2024-01-15",
        category="Tech",
        tags=["Unity"],
        thumbnail="",
        frontmatter={},
        body="",
    )
    fields.update(overrides)
    return ContentItem(**fields)


def processed(item, toc_html='<ul class="toc-list"><li><a href="#a">A</a></li></ul>', thumbnail=""):
    return ProcessedItem(item=item, body_html=BODY_MARKER, toc_html=toc_html, thumbnail=thumbnail)


def outside_body(html: str) -> str:
    """The document with the body region removed."""
    return html.replace(BODY_MARKER, "")


def json_ld_payload(html: str) -> dict:
    match = re.search(r'<script type="application/ld\+json">(.*?)</script>', html, re.DOTALL)
    return json.loads(match.group(1))


class TestCommonHelpers:
    """Tests for shared markup helpers."""

    def test_escape_html(self):
        assert escape_html('a & b < c > d "e"') == "a &amp; b &lt; c &gt; d &quot;e&quot;"
        assert escape_html(None) == ""
        assert escape_html("it's") == "it's"

    def test_encode_uri_component(self):
        assert encode_uri_component("C# & Unity") == "C%23%20%26%20Unity"
        assert encode_uri_component("日本") == "%E6%97%A5%E6%9C%AC"

    def test_format_date(self):
        assert format_date("2024-01-05") == "2024/01/05"
        assert format_date("2024-01-05T10:00:00") == "2024/01/05"
        assert format_date("someday") == "someday"
        assert format_date("") == ""

    def test_parse_date(self):
        assert parse_date("2024/06/01").isoformat() == "2024-06-01"
        assert parse_date("not a date") is None

    def test_parse_datetime(self):
        assert parse_datetime("2024-01-01T09:30:00").isoformat() == "2024-01-01T09:30:00+00:00"
        assert parse_datetime("2024-01-01T09:30:00Z") == parse_datetime("2024-01-01T18:30:00+09:00")
        assert parse_datetime("2024/01/02").isoformat() == "2024-01-02T00:00:00+00:00"
        assert parse_datetime("") is None

    def test_display_text(self):
        assert display_text(["Unity", "C#"]) == "Unity, C#"
        assert display_text("Unity") == "Unity"
        assert display_text(None) == ""

    def test_tags_html(self):
        html = tags_html(["C#", "<b>"], "../blog.html", "post-detail__tags")

        assert html.startswith('<p class="post-detail__tags">')
        assert 'href="../blog.html?tag=C%23">C#</a>' in html
        assert "&lt;b&gt;" in html
        assert tags_html([], "../blog.html", "x") == ""

    def test_og_image_url(self):
        base = "https://example.com/site"

        assert og_image_url("", base) == "https://example.com/site/assets/img/ogp.png"
        assert og_image_url("https://cdn/x.png", base) == "https://cdn/x.png"
        assert og_image_url("../assets/img/thumbnails/a.png", base) == (
            "https://example.com/site/assets/img/thumbnails/a.png"
        )

    def test_json_ld_escapes_markup(self):
        text = json_ld({"headline": "</script><b>&"})

        assert "<" not in text and ">" not in text
        assert json.loads(text) == {"headline": "</script><b>&"}


class TestBlogPage:
    """Tests for render_blog_page."""

    @pytest.fixture
    def config(self, tmp_path):
        return SiteConfig(root=tmp_path, base_url="https://example.com/site")

    def test_base_locale_page(self, tmp_path, config):
        html = render_blog_page(processed(make_item(tmp_path)), config, get_locale("ja"), "ja")

        assert '<html lang="ja">' in html
        assert "<title>Title | PanKUN Blog</title>" in html
        assert '<link rel="canonical" href="https://example.com/site/blog/post_0001.html" />' in html
        assert 'hreflang="en" href="https://example.com/site/blog/en/post_0001.html"' in html
        assert 'hreflang="x-default" href="https://example.com/site/blog/en/post_0001.html"' in html
        assert '<p class="post-detail__meta">2024/01/15 / Tech</p>' in html
        assert 'href="../assets/css/base.css"' in html
        assert 'href="../blog.html?tag=Unity"' in html
        assert LOCALES["ja"]["toc_title"] in html
        assert BODY_MARKER in html

    def test_alternate_locale_page(self, tmp_path, config):
        html = render_blog_page(processed(make_item(tmp_path, locale="en")), config, get_locale("en"), "en")

        assert '<html lang="en">' in html
        assert '<link rel="canonical" href="https://example.com/site/blog/en/post_0001.html" />' in html
        assert 'href="../../assets/css/base.css"' in html
        assert "Contents" in html

    def test_path_prefix(self):
        assert path_prefix("ja", "ja") == ".."
        assert path_prefix("en", "ja") == "../.."

    def test_toc_region_omitted_when_empty(self, tmp_path, config):
        html = render_blog_page(processed(make_item(tmp_path), toc_html=""), config, get_locale("ja"), "ja")

        assert 'class="post-sidebar"' not in html
        assert 'class="toc-toggle"' not in html
        assert 'class="toc-overlay"' not in html

    def test_toc_region_present(self, tmp_path, config):
        html = render_blog_page(processed(make_item(tmp_path)), config, get_locale("ja"), "ja")

        assert 'class="post-sidebar"' in html
        assert 'class="toc-toggle"' in html
        assert '<nav class="toc">' in html

    def test_user_text_escaped(self, tmp_path, config):
        item = make_item(
            tmp_path,
            title='A & B <script>"x"</script>',
            description="<i>desc</i>",
            category="<cat>",
            tags=["<tag>"],
        )

        html = render_blog_page(processed(item), config, get_locale("ja"), "ja")
        rest = outside_body(html)

        assert "<title>A &amp; B &lt;script&gt;&quot;x&quot;&lt;/script&gt; | PanKUN Blog</title>" in html
        assert 'content="&lt;i&gt;desc&lt;/i&gt;"' in html
        assert '<script>"x"' not in rest
        assert "<i>desc</i>" not in rest
        assert "<cat>" not in rest
        assert "<tag>" not in rest

    def test_json_ld(self, tmp_path, config):
        item = make_item(tmp_path, title="Hello <World>")
        html = render_blog_page(processed(item, thumbnail="assets/img/thumbnails/post_0001.jpg"),
                                config, get_locale("ja"), "ja")

        data = json_ld_payload(html)

        assert data["@type"] == "BlogPosting"
        assert data["headline"] == "Hello <World>"
        assert data["image"] == ["https://example.com/site/assets/img/thumbnails/post_0001.jpg"]
        assert data["datePublished"] == "2024-01-15"
        assert "Hello <World>" not in html

    def test_default_og_image(self, tmp_path, config):
        html = render_blog_page(processed(make_item(tmp_path)), config, get_locale("ja"), "ja")

        assert '<meta property="og:image" content="https://example.com/site/assets/img/ogp.png" />' in html

    def test_ad_script_injected(self, tmp_path, config):
        html = render_blog_page(processed(make_item(tmp_path)), config, get_locale("ja"), "ja",
                                ad_script="<script>ads()</script>")

        assert "<script>ads()</script>" in html

    def test_script_order(self, tmp_path, config):
        html = render_blog_page(processed(make_item(tmp_path)), config, get_locale("ja"), "ja")

        order = ["layout.js", "ui.js", "p5.min.js", "particles.js", "toc.js", "recommend.js", "transition.js"]
        positions = [html.index(name) for name in order]
        assert positions == sorted(positions)

    def test_related_and_recommended_sections(self, tmp_path, config):
        html = render_blog_page(processed(make_item(tmp_path)), config, get_locale("en"), "en")

        assert 'id="relatedList"' in html
        assert 'id="recommendList"' in html


class TestPortfolioPage:
    """Tests for render_portfolio_page."""

    @pytest.fixture
    def config(self, tmp_path):
        return SiteConfig(root=tmp_path)

    def test_meta_line(self, tmp_path, config):
        item = make_item(tmp_path, id="work_0001", frontmatter={"role": "Lead", "tech": "Unity, C#"})

        html = render_portfolio_page(processed(item, toc_html=""), config)

        assert '<p class="work-detail__meta">2024-01-15 / Tech / Role: Lead</p>' in html
        assert '<p class="work-detail__meta">Tech: Unity, C#</p>' in html
        assert 'href="../portfolio.html?tag=Unity"' in html
        assert "<title>Title | PanKUN Portfolio</title>" in html

    def test_list_values_joined(self, tmp_path, config):
        item = make_item(tmp_path, frontmatter={"role": ["Lead", "Design"], "tech": ["Unity", "C#"]})

        html = render_portfolio_page(processed(item), config)

        assert "Role: Lead, Design</p>" in html
        assert '<p class="work-detail__meta">Tech: Unity, C#</p>' in html
        assert "['Unity'" not in html

    def test_meta_line_skips_missing_parts(self, tmp_path, config):
        item = make_item(tmp_path, date="", category="", frontmatter={})

        html = render_portfolio_page(processed(item), config)

        assert '<p class="work-detail__meta"></p>' in html
        assert "Tech:" not in html

    def test_escaping(self, tmp_path, config):
        item = make_item(tmp_path, title="<b>Work</b>", frontmatter={"role": "<r>"})

        html = outside_body(render_portfolio_page(processed(item), config))

        assert "<b>Work</b>" not in html
        assert "&lt;b&gt;Work&lt;/b&gt;" in html
        assert "Role: &lt;r&gt;" in html

    def test_no_toc(self, tmp_path, config):
        html = render_portfolio_page(processed(make_item(tmp_path)), config)

        assert "toc.js" not in html
        assert 'class="toc"' not in html
