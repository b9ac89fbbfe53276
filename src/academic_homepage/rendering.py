"""HTML assembly for publication entries and the page layout."""
from __future__ import annotations

import html
from typing import Callable, Dict, Iterable

from .models import Publication

NO_PUBLICATIONS_MESSAGE = "No publications found."
LOAD_FAILED_MESSAGE = "Unable to load publications. Please try again later."


def _external_link(url: str, label: str, css_class: str | None = None) -> str:
    class_attr = f' class="{css_class}"' if css_class else ""
    return f'<a href="{html.escape(url)}"{class_attr} target="_blank" rel="noopener">{label}</a>'


def render_publication(publication: Publication, author_html: str = "") -> str:
    """Return the ``<article>`` block for one publication."""
    title = html.escape(publication.title)
    link = publication.link
    title_html = _external_link(link, title) if link else title

    parts = [
        '<article class="publication">',
        f'<h3 class="pub-title">{title_html}</h3>',
    ]
    if author_html:
        parts.append(f'<p class="pub-authors">{author_html}</p>')
    venue = html.escape(publication.venue)
    year = f", {publication.year}" if publication.year else ""
    parts.append(f'<p class="pub-journal">{venue}{year}</p>')
    if link:
        parts.append(f'<div class="pub-links">{_external_link(link, "Paper", "pub-link")}</div>')
    parts.append("</article>")
    return "".join(parts)


def render_publications(
    publications: Iterable[Publication], format_authors: Callable[[Publication], str]
) -> str:
    return "".join(render_publication(pub, format_authors(pub)) for pub in publications)


def render_message(message: str) -> str:
    """Render a short status message for the publications container."""
    return f"<p>{html.escape(message)}</p>"


NAV_ITEMS = (
    ("research", "Research"),
    ("publications", "Publications"),
    ("talks", "Talks"),
    ("cv", "CV"),
)


def render_page(sections: Dict[str, str], publications_html: str, title: str = "Homepage") -> str:
    """Wrap the rendered sections in the drawer page layout."""

    nav = "".join(
        f'<button class="nav-item" data-section="{section_id}">{label}</button>'
        for section_id, label in NAV_ITEMS
    )
    drawer_sections = []
    for section_id, _label in NAV_ITEMS:
        if section_id == "publications":
            body = f'<h2>Publications</h2><div id="publications-list">{publications_html}</div>'
        else:
            body = sections.get(section_id, "")
        drawer_sections.append(f'<section id="{section_id}" class="drawer-section">{body}</section>')

    return f"""<!doctype html>
<html lang="en">
<head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{html.escape(title)}</title>
    <link rel="stylesheet" href="style.css" />
</head>
<body>
    <div class="profile-card">
        <nav class="nav">{nav}</nav>
    </div>
    <aside id="contentDrawer" class="drawer">
        <button id="drawerClose" class="drawer-close" aria-label="Close">&times;</button>
        {''.join(drawer_sections)}
    </aside>
    <script src="script.js"></script>
</body>
</html>
"""
