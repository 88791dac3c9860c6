"""readable - extract the main article of a web page through a headless browser."""

from readable.pipeline import extract_url
from readable.scraper.models import Article, Engine

__all__ = ["extract_url", "Article", "Engine"]

__version__ = "0.1.0"
