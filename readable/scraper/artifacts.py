"""Debug artifacts: the raw HTML, title and content of one run, written to disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Union

from readable.scraper.errors import DebugWriteError
from readable.scraper.models import Article

logger = logging.getLogger(__name__)

HTML_FILENAME = "original.html"
TITLE_FILENAME = "title.txt"
CONTENT_FILENAME = "content.txt"


def save_debug_artifacts(
    debug_dir: Union[str, Path],
    raw_html: str,
    article: Article,
) -> Dict[str, Path]:
    """Write ``original.html``, ``title.txt`` and ``content.txt`` into *debug_dir*.

    The directory (and any missing parents) is created when absent.  Files from
    a previous run in the same directory are overwritten.

    Returns:
        Mapping of artifact name (``html``, ``title``, ``content``) to the
        path it was written to.

    Raises:
        DebugWriteError: If the directory or any of the files cannot be written.
    """
    debug_dir = Path(debug_dir)
    artifacts = {
        "html": (debug_dir / HTML_FILENAME, raw_html),
        "title": (debug_dir / TITLE_FILENAME, article.title),
        "content": (debug_dir / CONTENT_FILENAME, article.content),
    }

    written: Dict[str, Path] = {}
    try:
        debug_dir.mkdir(parents=True, exist_ok=True)
        for name, (path, text) in artifacts.items():
            path.write_text(text, encoding="utf-8")
            logger.info("Saved %s to: %s", name, path)
            written[name] = path
    except OSError as exc:
        raise DebugWriteError(f"Could not write debug artifacts to {debug_dir}: {exc}") from exc

    return written
