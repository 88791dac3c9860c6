"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional
from urllib.parse import urlparse


class Engine(str, Enum):
    """Third-party extractors that can turn sanitized HTML into an article."""

    readability = "readability"
    trafilatura = "trafilatura"


@dataclass
class RawPage:
    """The rendered HTML of a single URL, as returned by the browser."""

    url: str
    html: str
    status_code: Optional[int] = None


@dataclass
class Article:
    """The extracted article: the one record a run produces."""

    title: str
    content: str
    domain: str
    url: str

    @classmethod
    def from_url(cls, url: str, title: str, content: str) -> Article:
        """Build an :class:`Article`, deriving ``domain`` from *url*'s hostname."""
        return cls(
            title=title,
            content=content,
            domain=urlparse(url).hostname or "",
            url=url,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "domain": self.domain,
            "url": self.url,
        }
