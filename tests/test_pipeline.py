"""Tests for ``readable.pipeline.extract_url``.

The browser is replaced by patching ``fetch_url`` where the pipeline imports
it; sanitizing, extraction and debug writing run for real.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from readable.pipeline import extract_url
from readable.scraper.errors import ArticleNotFoundError, ConfigError, NavigationError
from readable.scraper.models import Article, Engine, RawPage

_FIXTURES = Path(__file__).resolve().parent / "fixtures"
_ARTICLE_HTML = (_FIXTURES / "article.html").read_text(encoding="utf-8")
_NO_ARTICLE_HTML = (_FIXTURES / "no_article.html").read_text(encoding="utf-8")

_URL = "https://news.example.com/2024/batteries"


def _raw(html: str) -> RawPage:
    return RawPage(url=_URL, html=html, status_code=200)


class TestExtractUrl:
    def test_returns_article(self) -> None:
        with patch("readable.pipeline.fetch_url", return_value=_raw(_ARTICLE_HTML)) as mock_fetch:
            article = extract_url(_URL)

        mock_fetch.assert_called_once_with(_URL, timeout=None)
        assert isinstance(article, Article)
        assert article.title == "Battery Chemistry Explained"
        assert article.domain == "news.example.com"
        assert "Iron phosphate cathodes" in article.content

    def test_timeout_is_forwarded(self) -> None:
        with patch("readable.pipeline.fetch_url", return_value=_raw(_ARTICLE_HTML)) as mock_fetch:
            extract_url(_URL, timeout=5.0)
        mock_fetch.assert_called_once_with(_URL, timeout=5.0)

    def test_engine_defaults_to_settings(self, monkeypatch) -> None:
        monkeypatch.setattr("readable.config.settings.engine", "trafilatura")
        with patch("readable.pipeline.fetch_url", return_value=_raw(_ARTICLE_HTML)), patch(
            "readable.pipeline.extract_content",
            return_value=Article.from_url(_URL, "T", "C"),
        ) as mock_extract:
            extract_url(_URL)

        assert mock_extract.call_args.kwargs["engine"] is Engine.trafilatura

    def test_debug_dir_receives_artifacts(self, tmp_path: Path) -> None:
        debug_dir = tmp_path / "debug"
        with patch("readable.pipeline.fetch_url", return_value=_raw(_ARTICLE_HTML)):
            article = extract_url(_URL, debug_dir=debug_dir)

        assert sorted(p.name for p in debug_dir.iterdir()) == [
            "content.txt",
            "original.html",
            "title.txt",
        ]
        # The unsanitized page is what gets saved.
        assert (debug_dir / "original.html").read_text(encoding="utf-8") == _ARTICLE_HTML
        assert (debug_dir / "title.txt").read_text(encoding="utf-8") == article.title
        assert (debug_dir / "content.txt").read_text(encoding="utf-8") == article.content

    def test_no_artifacts_when_extraction_fails(self, tmp_path: Path) -> None:
        debug_dir = tmp_path / "debug"
        with patch("readable.pipeline.fetch_url", return_value=_raw(_NO_ARTICLE_HTML)):
            with pytest.raises(ArticleNotFoundError):
                extract_url(_URL, debug_dir=debug_dir)

        assert not debug_dir.exists()

    def test_navigation_error_propagates(self) -> None:
        with patch("readable.pipeline.fetch_url", side_effect=NavigationError("boom")):
            with pytest.raises(NavigationError, match="boom"):
                extract_url(_URL)

    def test_unknown_engine_fails_before_fetch(self) -> None:
        with patch("readable.pipeline.fetch_url") as mock_fetch:
            with pytest.raises(ConfigError, match="boilerpipe"):
                extract_url(_URL, engine="boilerpipe")
        mock_fetch.assert_not_called()
