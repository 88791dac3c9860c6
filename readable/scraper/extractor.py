"""Content extraction: turns a :class:`RawPage` into an :class:`Article`."""

from __future__ import annotations

import logging
from typing import Tuple

import trafilatura
from bs4 import BeautifulSoup
from readability import Document
from readability.readability import Unparseable

from readable.scraper.errors import ArticleNotFoundError
from readable.scraper.models import Article, Engine, RawPage
from readable.scraper.sanitizer import sanitize_html

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _extract_title(html: str) -> str:
    """Return the text of the document's ``<title>``, or empty string."""
    soup = BeautifulSoup(html, "html.parser")
    if soup.title is None:
        return ""
    return soup.title.get_text(strip=True)


def _with_readability(html: str, url: str) -> Tuple[str, str]:
    """Score the DOM with readability-lxml; return ``(title, text)``."""
    doc = Document(html, url=url)
    try:
        # summary() parses the document and wraps parser failures as Unparseable
        summary = doc.summary(html_partial=True)
    except Unparseable as exc:
        raise ArticleNotFoundError(f"Could not parse document from {url}: {exc}") from exc

    text = BeautifulSoup(summary, "html.parser").get_text()
    return doc.short_title().strip(), text


def _with_trafilatura(html: str, url: str) -> Tuple[str, str]:
    """Run trafilatura's extractor; return ``(title, text)``."""
    text = trafilatura.extract(
        html,
        url=url,
        include_links=False,
        include_images=False,
        include_tables=True,
    )
    metadata = trafilatura.extract_metadata(html, default_url=url)
    title = (metadata.title if metadata is not None else None) or _extract_title(html)
    return title.strip(), text or ""


_ENGINES = {
    Engine.readability: _with_readability,
    Engine.trafilatura: _with_trafilatura,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_content(raw: RawPage, engine: Engine = Engine.readability) -> Article:
    """Extract the main article of *raw*.

    The HTML is sanitized first (see :func:`~readable.scraper.sanitizer.sanitize_html`),
    then handed to *engine*.  The article text is the engine's plain text,
    trimmed of surrounding whitespace.

    Raises:
        ArticleNotFoundError: If the engine finds no article text.
    """
    engine = Engine(engine)
    clean_html = sanitize_html(raw.html)
    if not clean_html.strip():
        raise ArticleNotFoundError(f"Empty document from {raw.url}")

    logger.info("Parsing %s with %s", raw.url, engine.value)
    title, text = _ENGINES[engine](clean_html, raw.url)

    content = text.strip()
    if not content:
        raise ArticleNotFoundError(f"Failed to parse article content from {raw.url}")

    return Article.from_url(raw.url, title=title, content=content)
