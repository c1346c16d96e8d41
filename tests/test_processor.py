"""Tests for ContentProcessor class."""

import pytest
from unittest.mock import MagicMock

from site_publisher.core.discovery import ContentDiscovery
from site_publisher.core.processor import ContentProcessor
from site_publisher.images.thumbnails import ThumbnailStore
from site_publisher.transforms.frontmatter import blog_index_fields, portfolio_index_fields


class TestContentProcessor:
    """Tests for ContentProcessor class."""

    @pytest.fixture
    def session(self):
        session = MagicMock()
        session.get.return_value = MagicMock(ok=True, content=b"img", status_code=200, reason="OK")
        return session

    @pytest.fixture
    def thumbnails(self, tmp_path, session):
        return ThumbnailStore(tmp_path / "thumbs", session=session)

    def _create_item(self, tmp_path, content: str, item_id: str = "post_0001", frontmatter: str = ""):
        """Helper to write a content file and load it."""
        content_dir = tmp_path / "content"
        content_dir.mkdir(exist_ok=True)
        header = f"---\ntitle: Test Post\ndate: 2024-01-15\ntags: [a, b]\n{frontmatter}---\n"
        (content_dir / f"{item_id}.md").write_text(header + content, encoding="utf-8")
        return ContentDiscovery(content_dir).load(item_id)

    def test_body_and_toc(self, tmp_path, thumbnails):
        processor = ContentProcessor(thumbnails)
        item = self._create_item(tmp_path, "## One\n\ntext\n\n### Two\n\n#### Three\n")

        result = processor.process(item)

        assert '<h2 id="one">One</h2>' in result.body_html
        assert '<h4 id="three">Three</h4>' in result.body_html
        assert result.toc_html.count("<li") == 2
        assert result.item is item

    def test_no_headings_no_toc(self, tmp_path, thumbnails):
        processor = ContentProcessor(thumbnails)
        item = self._create_item(tmp_path, "Just a paragraph.\n")

        assert processor.process(item).toc_html == ""

    def test_image_prefix(self, tmp_path, thumbnails):
        processor = ContentProcessor(thumbnails)
        item = self._create_item(tmp_path, "![x](../assets/img/a.png)\n")

        result = processor.process(item, image_prefix="../..")

        assert 'src="../../assets/img/a.png"' in result.body_html

    def test_thumbnail_resolved(self, tmp_path, thumbnails):
        processor = ContentProcessor(thumbnails)
        item = self._create_item(tmp_path, "Body\n", frontmatter="thumbnail: https://example.com/t.webp\n")

        result = processor.process(item)

        assert result.thumbnail == "assets/img/thumbnails/post_0001.webp"
        assert (tmp_path / "thumbs" / "post_0001.webp").exists()

    def test_failed_thumbnail_falls_back(self, tmp_path, session, thumbnails):
        session.get.return_value = MagicMock(ok=False, status_code=500, reason="Server Error")
        processor = ContentProcessor(thumbnails)
        item = self._create_item(tmp_path, "Body\n", frontmatter="thumbnail: https://example.com/t.png\n")

        assert processor.process(item).thumbnail == ""

    def test_build_record_blog(self, tmp_path, thumbnails):
        processor = ContentProcessor(thumbnails, blog_index_fields())
        item = self._create_item(tmp_path, "Body\n", frontmatter="recommended: true\n")

        record = processor.build_record(processor.process(item), "blog/post_0001.html")

        assert record.to_dict() == {
            "id": "post_0001",
            "title": "Test Post",
            "date": "2024-01-15",
            "category": "",
            "description": "",
            "tags": ["a", "b"],
            "thumbnail": "",
            "contentPath": "blog/post_0001.html",
            "recommended": True,
        }

    def test_build_record_portfolio(self, tmp_path, thumbnails):
        processor = ContentProcessor(thumbnails, portfolio_index_fields())
        item = self._create_item(
            tmp_path, "Body\n", item_id="work_0001",
            frontmatter="role: Lead\ntech: Unity\nlinks:\n  - https://example.com\n",
        )

        record = processor.build_record(processor.process(item), "portfolio/work_0001.html")

        assert record.extra == {"role": "Lead", "tech": "Unity", "links": ["https://example.com"]}

    def test_build_record_without_transform(self, tmp_path, thumbnails):
        processor = ContentProcessor(thumbnails)
        item = self._create_item(tmp_path, "Body\n")

        record = processor.build_record(processor.process(item), "x.html")

        assert record.extra == {}
