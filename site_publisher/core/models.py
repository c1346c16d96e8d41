"""Data models for Site Publisher."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple


@dataclass
class ContentContext:
    """Location of a content file.

    Content is loaded lazily so that discovery never has to hold every
    post in memory.
    """
    path: Path

    def read_raw(self) -> str:
        """Read file contents on demand."""
        return self.path.read_text(encoding='utf-8')


@dataclass
class ContentItem:
    """One locale variant of a blog post or portfolio entry.

    Built once from a content file and never mutated afterwards.
    Missing front matter fields are already defaulted here.
    """
    context: ContentContext
    id: str
    locale: str
    title: str
    description: str
    date: str
    category: str
    tags: List[str]
    thumbnail: str
    frontmatter: Dict[str, Any]
    body: str

    @property
    def path(self) -> Path:
        """Convenience accessor for the source file path."""
        return self.context.path


@dataclass
class Heading:
    """A heading seen while rendering one document."""
    level: int
    text: str
    id: str


@dataclass
class RenderedDocument:
    """HTML body of a document plus the headings found in it."""
    html: str
    headings: List[Heading] = field(default_factory=list)


@dataclass
class ProcessedItem:
    """Everything the page assemblers need for one content item."""
    item: ContentItem
    body_html: str
    toc_html: str
    thumbnail: str


@dataclass
class IndexRecord:
    """Summary entry in a published list JSON file."""
    id: str
    title: str
    date: str
    category: str
    description: str
    tags: List[str]
    thumbnail: str
    content_path: str
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON shape consumed by the listing pages."""
        data: Dict[str, Any] = {
            'id': self.id,
            'title': self.title,
            'date': self.date,
            'category': self.category,
            'description': self.description,
            'tags': list(self.tags),
            'thumbnail': self.thumbnail,
            'contentPath': self.content_path,
        }
        data.update(self.extra)
        return data


@dataclass
class BuildResult:
    """Result of a build run."""
    generated: List[Path] = field(default_factory=list)
    skipped: List[Tuple[str, str]] = field(default_factory=list)
    indexes: List[Path] = field(default_factory=list)
    removed_thumbnails: List[Path] = field(default_factory=list)

    def merge(self, other: "BuildResult") -> None:
        """Fold another result into this one."""
        self.generated.extend(other.generated)
        self.skipped.extend(other.skipped)
        self.indexes.extend(other.indexes)
        self.removed_thumbnails.extend(other.removed_thumbnails)
