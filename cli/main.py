"""readable CLI - extract the main article of a web page as JSON.

Usage:
    readable https://example.com/post
    readable https://example.com/post --debug-dir ./debug
    python cli/main.py --help

The JSON record goes to stdout; progress and errors go to stderr so the output
can be piped straight into other tools.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from readable.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
import logging
from typing import Optional

import typer

from readable.config import settings
from readable.pipeline import extract_url, resolve_engine
from readable.scraper.errors import ConfigError, ScraperError
from readable.scraper.models import Engine

app = typer.Typer(
    name="readable",
    help="Extract the main article of a web page through a headless browser.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.command()
def main(
    url: str = typer.Argument(..., help="URL of the page to extract."),
    debug_dir: Optional[Path] = typer.Option(
        None,
        "--debug-dir",
        "-d",
        help="Also write original.html, title.txt and content.txt to this directory.",
    ),
    engine: Optional[Engine] = typer.Option(
        None,
        "--engine",
        help="Extraction engine: readability | trafilatura (default: READABLE_ENGINE or readability).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Navigation timeout in seconds (default: READABLE_TIMEOUT or 60).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
) -> None:
    """Fetch URL, extract its article and print {title, content, domain, url} as JSON."""
    _configure_logging(verbose)
    if timeout is not None and timeout <= 0:
        raise typer.BadParameter("must be greater than 0", param_hint="'--timeout'")
    try:
        engine = resolve_engine(engine)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--engine' / READABLE_ENGINE") from exc

    typer.echo(f"[readable] Fetching {url!r} …", err=True)
    try:
        article = extract_url(url, debug_dir=debug_dir, engine=engine, timeout=timeout)
    except ScraperError as exc:
        typer.echo(f"[readable] Failed: {exc}", err=True)
        raise typer.Exit(code=1)

    if debug_dir is not None:
        typer.echo(f"[readable] Debug artifacts saved to {debug_dir}", err=True)

    typer.echo(json.dumps(article.to_dict(), indent=2, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
