"""Blog post page assembler."""

from typing import Dict, Sequence

from site_publisher.core.config import SiteConfig
from site_publisher.core.dates import format_date
from site_publisher.core.models import ProcessedItem
from site_publisher.pages.common import (
    escape_html,
    json_ld,
    og_image_url,
    share_buttons_html,
    tags_html,
)


def path_prefix(locale: str, base_locale: str) -> str:
    """Relative path from a blog page back to the site root."""
    return ".." if locale == base_locale else "../.."


def blog_url(config: SiteConfig, item_id: str, locale: str) -> str:
    return f"{config.base_url}/{config.relative(config.blog_page_path(item_id, locale))}"


def build_blog_json_ld(processed: ProcessedItem, config: SiteConfig, canonical_url: str) -> Dict:
    """Structured data describing the post for search engines."""
    item = processed.item
    return {
        "@context": "https://schema.org",
        "@type": "BlogPosting",
        "mainEntityOfPage": {"@type": "WebPage", "@id": canonical_url},
        "headline": item.title,
        "description": item.description,
        "image": [og_image_url(processed.thumbnail, config.base_url)],
        "datePublished": item.date,
        "dateModified": item.date,
        "author": {"@type": "Person", "name": config.author, "url": config.base_url},
        "publisher": {
            "@type": "Organization",
            "name": config.site_name,
            "logo": {
                "@type": "ImageObject",
                "url": f"{config.base_url}/assets/img/favicon-192.png",
            },
        },
    }


def _toc_region(toc_html: str, locale: Dict[str, str]) -> Sequence[str]:
    """Sidebar and drawer controls; both empty when there is no TOC."""
    if not toc_html:
        return "", ""
    sidebar = f"""
          <aside class="post-sidebar">
            <div class="toc-sticky-container">
              <nav class="toc">
                <h2 class="toc__title">{locale['toc_title']}</h2>
                {toc_html}
              </nav>
            </div>
          </aside>"""
    drawer = f"""
      <div class="toc-overlay"></div>
      <button type="button" class="toc-toggle" aria-label="{escape_html(locale['toc_button_label'])}">
        <svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="currentColor" width="20" height="20" aria-hidden="true"><path d="M4 6h16v2H4zm0 5h16v2H4zm0 5h16v2H4z"></path></svg>
        <span>{locale['toc_button_text']}</span>
      </button>"""
    return sidebar, drawer


def render_blog_page(
    processed: ProcessedItem,
    config: SiteConfig,
    locale: Dict[str, str],
    lang: str,
    ad_script: str = "",
) -> str:
    """Assemble the complete HTML document for one blog post locale.

    Args:
        processed: Rendered body, TOC and resolved thumbnail of the post
        config: Site configuration (base URL, locales, site name)
        locale: Fixed UI strings for the page
        lang: Locale code the page is published under
        ad_script: Raw markup injected into the head

    Returns:
        HTML document string
    """
    item = processed.item
    prefix = path_prefix(lang, config.base_locale)

    safe_title = escape_html(item.title)
    safe_desc = escape_html(item.description)
    safe_date = escape_html(format_date(item.date))
    safe_category = escape_html(item.category)

    canonical_url = blog_url(config, item.id, lang)
    alternates = "\n    ".join(
        f'<link rel="alternate" hreflang="{code}" href="{escape_html(blog_url(config, item.id, code))}" />'
        for code in config.blog_locales
    )
    x_default = config.x_default_locale if config.x_default_locale in config.blog_locales else config.base_locale
    image_url = escape_html(og_image_url(processed.thumbnail, config.base_url))

    tags = tags_html(item.tags, f"{prefix}/blog.html", "post-detail__tags")
    share = share_buttons_html(
        item.title, canonical_url, locale['share_title'], locale['share_label_suffix']
    )
    meta = safe_date + (f" / {safe_category}" if safe_category else "")
    description = f'<p class="post-detail__description">{safe_desc}</p>' if safe_desc else ""
    sidebar, drawer = _toc_region(processed.toc_html, locale)
    structured = json_ld(build_blog_json_ld(processed, config, canonical_url))

    return f"""<!doctype html>
<html lang="{locale['lang']}">
  <head>
    <meta charset="UTF-8" />
    <title>{safe_title}{locale['site_title_suffix']}</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <meta name="description" content="{safe_desc}" />
    <meta name="view-transition" content="same">

    <link rel="canonical" href="{escape_html(canonical_url)}" />
    {alternates}
    <link rel="alternate" hreflang="x-default" href="{escape_html(blog_url(config, item.id, x_default))}" />
    {ad_script}
    <script type="application/ld+json">{structured}</script>
    <meta property="og:title" content="{safe_title}{locale['site_title_suffix']}" />
    <meta property="og:description" content="{safe_desc}" />
    <meta property="og:type" content="article" />
    <meta property="og:url" content="{escape_html(canonical_url)}" />
    <meta property="og:image" content="{image_url}" />
    <meta property="og:site_name" content="{escape_html(config.site_name)}" />
    <link rel="shortcut icon" href="{prefix}/../favicon.ico">
    <link rel="icon" type="image/png" href="{prefix}/assets/img/favicon-32.png" sizes="32x32">
    <link rel="icon" type="image/png" href="{prefix}/assets/img/favicon-192.png" sizes="192x192">
    <link rel="apple-touch-icon" href="{prefix}/assets/img/favicon-192.png">
    <link rel="stylesheet" href="{prefix}/assets/css/base.css" />
    <link rel="stylesheet" href="{prefix}/assets/css/layout.css" />
    <link rel="stylesheet" href="{prefix}/assets/css/blog.css" />
    <link rel="stylesheet" href="{prefix}/assets/css/transition.css" />
  </head>
  <body data-page="blog" view-transition-name="page">
    <div class="page-shell">
      <main class="main-container">
        <div class="post-layout">
          <div class="post-content">
            <article class="post-detail">
              <nav aria-label="breadcrumb" class="breadcrumb">
                <ol class="breadcrumb__list">
                  <li class="breadcrumb__item"><a href="{prefix}/index.html">{locale['breadcrumb_home']}</a></li>
                  <li class="breadcrumb__item"><a href="{prefix}/blog.html">{locale['breadcrumb_blog']}</a></li>
                  <li class="breadcrumb__item" aria-current="page">{safe_title}</li>
                </ol>
              </nav>
              <header class="post-detail__header">
                <p class="post-detail__meta">{meta}</p>
                <h1 class="post-detail__title">{safe_title}</h1>
                {description}
                {tags}
                {share}
              </header>
              <section class="post-detail__body markdown-body">{processed.body_html}</section>
              {share}
              <div class="post-detail__nav post-detail__nav--bottom">
                <a href="{prefix}/blog.html" class="btn btn--back">{locale['back_to_blog']}</a>
              </div>
            </article>
          </div>{sidebar}
        </div>
        <section class="section section--related">
          <h2 class="section__title">{locale['related_title']}</h2>
          <div id="relatedList" class="recommend-grid"></div>
        </section>
        <section class="section section--recommend">
          <h2 class="section__title">{locale['recommended_title']}</h2>
          <div id="recommendList" class="recommend-grid"></div>
        </section>
      </main>{drawer}
    </div>
    <script src="{prefix}/assets/js/layout.js" defer></script>
    <script src="{prefix}/assets/js/ui.js"></script>
    <canvas id="menuAnimationCanvas"></canvas>
    <script src="https://cdnjs.cloudflare.com/ajax/libs/p5.js/1.4.0/p5.min.js"></script>
    <script src="{prefix}/assets/js/particles.js"></script>
    <script src="{prefix}/assets/js/toc.js" defer></script>
    <script src="{prefix}/assets/js/recommend.js" defer></script>
    <script src="{prefix}/assets/js/transition.js"></script>
  </body>
</html>"""
