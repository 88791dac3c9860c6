"""Errors raised by the scraper pipeline.

Every failure the pipeline reports on purpose derives from
:class:`ScraperError`, so callers (the CLI in particular) can turn them into a
single terminal failure of the run.
"""


class ScraperError(Exception):
    """Base class for all pipeline failures."""


class NavigationError(ScraperError):
    """The page could not be loaded (bad URL, network error, timeout)."""


class ArticleNotFoundError(ScraperError):
    """The extractor found no article content in the page."""


class DebugWriteError(ScraperError):
    """Debug artifacts could not be written to disk."""


class ConfigError(ScraperError):
    """A setting or option has a value the pipeline cannot run with."""
