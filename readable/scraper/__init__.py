"""Scraper package - headless fetch, sanitizing & article extraction."""

from readable.scraper.artifacts import save_debug_artifacts
from readable.scraper.errors import (
    ArticleNotFoundError,
    ConfigError,
    DebugWriteError,
    NavigationError,
    ScraperError,
)
from readable.scraper.extractor import extract_content
from readable.scraper.fetcher import fetch_url
from readable.scraper.models import Article, Engine, RawPage
from readable.scraper.sanitizer import sanitize_html

__all__ = [
    "fetch_url",
    "sanitize_html",
    "extract_content",
    "save_debug_artifacts",
    "Article",
    "Engine",
    "RawPage",
    "ScraperError",
    "NavigationError",
    "ArticleNotFoundError",
    "DebugWriteError",
    "ConfigError",
]
