"""Fixed UI strings for blog pages, per locale."""

from typing import Dict

LOCALES: Dict[str, Dict[str, str]] = {
    "ja": {
        "lang": "ja",
        "site_title_suffix": " | PanKUN Blog",
        "share_title": "この記事をシェアする",
        "share_label_suffix": "でシェア",
        "breadcrumb_home": "ホーム",
        "breadcrumb_blog": "ブログ",
        "back_to_blog": "ブログ一覧へ戻る",
        "toc_title": "目次",
        "toc_button_label": "目次を開く",
        "toc_button_text": "目次",
        "related_title": "関連記事",
        "recommended_title": "おすすめ記事",
    },
    "en": {
        "lang": "en",
        "site_title_suffix": " | PanKUN Blog",
        "share_title": "Share this article",
        "share_label_suffix": " share",
        "breadcrumb_home": "Home",
        "breadcrumb_blog": "Blog",
        "back_to_blog": "Back to blog",
        "toc_title": "Contents",
        "toc_button_label": "Open table of contents",
        "toc_button_text": "Contents",
        "related_title": "Related posts",
        "recommended_title": "Recommended posts",
    },
}

DEFAULT_LOCALE = "ja"


def get_locale(lang: str) -> Dict[str, str]:
    """UI strings for ``lang``, falling back to the default locale."""
    return LOCALES.get(lang, LOCALES[DEFAULT_LOCALE])
