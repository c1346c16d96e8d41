"""Index field transform factories for Site Publisher.

These factories create transform functions that pick the kind-specific
fields of a content item's front matter for its index record.
"""

from typing import Any, Callable, Dict, List, TYPE_CHECKING

if TYPE_CHECKING:
    from site_publisher.core.models import ContentItem

IndexFieldsTransform = Callable[[Dict[str, Any], "ContentItem"], Dict[str, Any]]


def keep_keys(keys: List[str]) -> IndexFieldsTransform:
    """Create a transform that keeps only the given keys that are present.

    Args:
        keys: Front matter keys to keep

    Returns:
        A transform function
    """
    def transform(fm: Dict[str, Any], item: "ContentItem") -> Dict[str, Any]:
        return {k: v for k, v in fm.items() if k in keys}
    return transform


def scalar_or_list(value: Any) -> Any:
    """Lists pass through unchanged; anything else becomes a string."""
    if isinstance(value, list):
        return value
    if value is None:
        return ""
    return str(value)


def blog_index_fields() -> IndexFieldsTransform:
    """Create a transform producing the blog-only index fields.

    Output includes ``recommended`` (always, default False) and
    ``related`` when the post lists related post ids.

    Returns:
        A transform function for blog index records
    """
    keep_related = keep_keys(['related'])

    def transform(fm: Dict[str, Any], item: "ContentItem") -> Dict[str, Any]:
        result = keep_related(fm, item)
        result['recommended'] = bool(fm.get('recommended', False))
        return result
    return transform


def portfolio_index_fields() -> IndexFieldsTransform:
    """Create a transform producing the portfolio-only index fields.

    ``role`` and ``tech`` keep a YAML list as a list and are otherwise
    strings (default empty); ``links`` is a list, anything else becomes
    empty.

    Returns:
        A transform function for portfolio index records
    """
    def transform(fm: Dict[str, Any], item: "ContentItem") -> Dict[str, Any]:
        links = fm.get('links')
        return {
            'role': scalar_or_list(fm.get('role')),
            'tech': scalar_or_list(fm.get('tech')),
            'links': links if isinstance(links, list) else [],
        }
    return transform
