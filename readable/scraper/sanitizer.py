"""Boilerplate removal applied to rendered HTML before extraction."""

from __future__ import annotations

from bs4 import BeautifulSoup

# Non-content elements that only confuse the readability scoring.
REMOVED_TAGS = (
    "script",
    "style",
    "noscript",
    "iframe",
    "svg",
    "form",
    "footer",
    "nav",
    "aside",
)


def sanitize_html(html: str) -> str:
    """Return *html* with every element in :data:`REMOVED_TAGS` deleted.

    Removal is recursive: a ``<nav>`` inside an ``<article>`` goes too, along
    with everything nested inside a removed element.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(list(REMOVED_TAGS)):
        if not tag.decomposed:
            tag.decompose()
    return str(soup)
