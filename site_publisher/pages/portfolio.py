"""Portfolio entry page assembler."""

from site_publisher.core.config import SiteConfig
from site_publisher.core.models import ProcessedItem
from site_publisher.pages.common import display_text, escape_html, og_image_url, tags_html


def render_portfolio_page(processed: ProcessedItem, config: SiteConfig) -> str:
    """Assemble the HTML document for one portfolio entry.

    Portfolio pages are published in a single locale and carry no table
    of contents.
    """
    item = processed.item
    fm = item.frontmatter

    safe_title = escape_html(item.title)
    safe_desc = escape_html(item.description)
    safe_role = escape_html(display_text(fm.get('role')))
    safe_tech = escape_html(display_text(fm.get('tech')))
    image_url = escape_html(og_image_url(processed.thumbnail, config.base_url))
    site_name = escape_html(config.site_name)

    meta_parts = [escape_html(item.date), escape_html(item.category)]
    if safe_role:
        meta_parts.append(f"Role: {safe_role}")
    meta_text = " / ".join(part for part in meta_parts if part)

    description = f'<p class="work-detail__description">{safe_desc}</p>' if safe_desc else ""
    tech = f'<p class="work-detail__meta">Tech: {safe_tech}</p>' if safe_tech else ""
    tags = tags_html(item.tags, "../portfolio.html", "work-detail__tags")

    return f"""<!doctype html>
<html lang="{escape_html(config.portfolio_locale)}">
  <head prefix="og: https://ogp.me/ns#">
    <meta charset="UTF-8" />
    <title>{safe_title} | {site_name} Portfolio</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <meta name="description" content="{safe_desc}" />
    <meta name="view-transition" content="same">

    <meta property="og:title" content="{safe_title} | {site_name} Portfolio" />
    <meta property="og:description" content="{safe_desc}" />
    <meta property="og:type" content="article" />
    <meta property="og:image" content="{image_url}" />
    <meta property="og:site_name" content="{site_name}" />
    <meta property="og:email" content="{escape_html(config.contact_email)}" />

    <meta name="twitter:card" content="summary_large_image" />
    <meta name="twitter:title" content="{safe_title}" />
    <meta name="twitter:description" content="{safe_desc}" />
    <meta name="twitter:image" content="{image_url}" />

    <link rel="shortcut icon" href="../favicon.ico">
    <link rel="icon" type="image/png" href="../assets/img/favicon-32.png" sizes="32x32">
    <link rel="icon" type="image/png" href="../assets/img/favicon-192.png" sizes="192x192">
    <link rel="apple-touch-icon" href="../assets/img/favicon-192.png">

    <link rel="stylesheet" href="../assets/css/base.css" />
    <link rel="stylesheet" href="../assets/css/layout.css" />
    <link rel="stylesheet" href="../assets/css/portfolio.css" />
    <link rel="stylesheet" href="../assets/css/transition.css" />
  </head>
  <body data-page="portfolio">
    <div class="page-shell">
      <main class="main-container">
        <article class="work-detail reveal-on-scroll">
          <header class="work-detail__header">
            <p class="work-detail__meta">{meta_text}</p>
            <h1 class="work-detail__title">{safe_title}</h1>
            {description}
            {tech}
            {tags}
          </header>

          <section class="work-detail__body markdown-body">
{processed.body_html}
          </section>
        </article>
      </main>
    </div>

    <script src="../assets/js/layout.js" defer></script>
    <script src="../assets/js/ui.js"></script>

    <canvas id="menuAnimationCanvas"></canvas>
    <script src="https://cdnjs.cloudflare.com/ajax/libs/p5.js/1.4.0/p5.min.js"></script>
    <script src="../assets/js/particles.js"></script>
    <script src="../assets/js/transition.js"></script>
  </body>
</html>"""
