"""Extraction pipeline for a single URL.

``extract_url`` runs the whole flow for one page:

    fetch (headless browser) → sanitize → extract → [save debug artifacts]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from readable.config import settings
from readable.scraper.artifacts import save_debug_artifacts
from readable.scraper.errors import ConfigError
from readable.scraper.extractor import extract_content
from readable.scraper.fetcher import fetch_url
from readable.scraper.models import Article, Engine

logger = logging.getLogger(__name__)


def resolve_engine(engine: Optional[Union[Engine, str]] = None) -> Engine:
    """Return *engine* as an :class:`Engine`, falling back to ``settings.engine``.

    Raises:
        ConfigError: If the name is not a known engine.
    """
    name = engine or settings.engine
    try:
        return Engine(name)
    except ValueError as exc:
        choices = ", ".join(e.value for e in Engine)
        raise ConfigError(f"Unknown extraction engine {name!r}: expected one of {choices}") from exc


def extract_url(
    url: str,
    debug_dir: Optional[Union[str, Path]] = None,
    engine: Optional[Engine] = None,
    timeout: Optional[float] = None,
) -> Article:
    """Fetch *url*, extract its main article and return it.

    Args:
        url: The web page to extract.
        debug_dir: When given, the raw HTML, title and content are also
            written there (see :func:`~readable.scraper.artifacts.save_debug_artifacts`).
            Nothing is written when extraction fails.
        engine: Extraction engine.  Defaults to ``settings.engine``.
        timeout: Navigation bound in seconds.  Defaults to
            ``settings.navigation_timeout``.

    Raises:
        ScraperError: Any navigation, extraction or debug-write failure, or an
            unknown engine (``ConfigError``).
    """
    engine = resolve_engine(engine)

    raw = fetch_url(url, timeout=timeout)
    article = extract_content(raw, engine=engine)
    logger.info("Extracted %d characters from %s", len(article.content), url)

    if debug_dir is not None:
        save_debug_artifacts(debug_dir, raw.html, article)

    return article
