"""Transforms applied to front matter before publishing."""

from site_publisher.transforms.frontmatter import (
    IndexFieldsTransform,
    blog_index_fields,
    portfolio_index_fields,
    keep_keys,
)

__all__ = [
    "IndexFieldsTransform",
    "blog_index_fields",
    "portfolio_index_fields",
    "keep_keys",
]
