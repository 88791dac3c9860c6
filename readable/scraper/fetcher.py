"""Headless-browser fetcher: renders a URL with Playwright and returns its HTML."""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlparse

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Route
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from readable.config import settings
from readable.scraper.errors import ConfigError, NavigationError
from readable.scraper.models import RawPage

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Resource blocking
# ---------------------------------------------------------------------------
# Request types that never carry article text.  Aborting them keeps page
# loads fast and avoids downloading media.
BLOCKED_RESOURCE_TYPES = frozenset(
    {
        "image",
        "stylesheet",
        "font",
        "media",
        "imageset",
        "object",
        "beacon",
        "csp_report",
    }
)

_SUPPORTED_SCHEMES = ("http", "https", "file")


def _block_resources(route: Route) -> None:
    """Abort non-essential requests, let everything else through."""
    request = route.request
    if request.resource_type in BLOCKED_RESOURCE_TYPES:
        logger.debug("Blocked %s request: %s", request.resource_type, request.url)
        route.abort()
    else:
        route.continue_()


def _check_url(url: str) -> None:
    parsed = urlparse(url)
    if parsed.scheme not in _SUPPORTED_SCHEMES:
        raise NavigationError(
            f"Unsupported URL {url!r}: expected one of {', '.join(_SUPPORTED_SCHEMES)}"
        )
    if parsed.scheme != "file" and not parsed.netloc:
        raise NavigationError(f"Unsupported URL {url!r}: missing host")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def fetch_url(url: str, timeout: Optional[float] = None) -> RawPage:
    """Render *url* in headless Chromium and return a :class:`RawPage`.

    The page is loaded with the configured user agent and with images,
    stylesheets, fonts and media blocked.  Navigation waits for
    ``domcontentloaded``; afterwards the fetcher gives the page a short,
    bounded chance to produce a ``<body>`` before reading the DOM.

    The browser is always closed before this function returns or raises.

    Args:
        url: Page to render (``http``, ``https`` or ``file``).
        timeout: Navigation bound in seconds.  Defaults to
            ``settings.navigation_timeout``.

    Raises:
        NavigationError: If the URL is unsupported, the browser cannot be
            started, navigation fails, or the page does not reach
            ``domcontentloaded`` within *timeout*.
        ConfigError: If *timeout* or the body wait is not a positive number
            of seconds (Playwright treats ``0`` as "no timeout").
    """
    _check_url(url)
    timeout_ms = int(timeout * 1000) if timeout is not None else settings.navigation_timeout_ms
    body_wait_ms = settings.body_wait_timeout_ms
    if timeout_ms <= 0:
        raise ConfigError(f"Navigation timeout must be positive, got {timeout_ms / 1000:g}s")
    if body_wait_ms <= 0:
        raise ConfigError(f"Body wait timeout must be positive, got {body_wait_ms / 1000:g}s")

    with sync_playwright() as pw:
        logger.info("Launching browser (headless=%s)", settings.headless)
        try:
            browser = pw.chromium.launch(
                headless=settings.headless,
                args=list(settings.browser_args),
            )
        except PlaywrightError as exc:
            raise NavigationError(f"Could not launch browser: {exc.message}") from exc

        try:
            try:
                context = browser.new_context(user_agent=settings.user_agent)
                page = context.new_page()
                page.route("**/*", _block_resources)
            except PlaywrightError as exc:
                raise NavigationError(f"Could not open a browser page: {exc.message}") from exc

            logger.info("Navigating to %s", url)
            try:
                response = page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
            except PlaywrightTimeoutError as exc:
                raise NavigationError(
                    f"Timed out after {timeout_ms / 1000:g}s loading {url}"
                ) from exc
            except PlaywrightError as exc:
                raise NavigationError(f"Could not load {url}: {exc.message}") from exc

            try:
                page.wait_for_selector("body", timeout=body_wait_ms)
            except PlaywrightTimeoutError:
                logger.debug("No <body> after %sms, reading DOM anyway", body_wait_ms)
            except PlaywrightError as exc:
                raise NavigationError(f"Page {url} failed while loading: {exc.message}") from exc

            try:
                html = page.content()
            except PlaywrightError as exc:
                raise NavigationError(f"Could not read page content for {url}: {exc.message}") from exc
        finally:
            browser.close()

    status_code = response.status if response is not None else None
    if status_code is not None and status_code >= 400:
        logger.warning("%s answered HTTP %s, extracting from the error page", url, status_code)

    return RawPage(url=url, html=html, status_code=status_code)
