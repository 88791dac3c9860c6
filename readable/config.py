"""Centralised settings for readable.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

_DEFAULT_BROWSER_ARGS = "--no-sandbox --disable-setuid-sandbox --disable-dev-shm-usage"


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Browser
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get("READABLE_USER_AGENT", _DEFAULT_USER_AGENT)
    )
    navigation_timeout: float = field(
        default_factory=lambda: float(os.environ.get("READABLE_TIMEOUT", "60.0"))
    )
    body_wait_timeout: float = field(
        default_factory=lambda: float(os.environ.get("READABLE_BODY_WAIT", "5.0"))
    )
    headless: bool = field(
        default_factory=lambda: _env_bool("READABLE_HEADLESS", "true")
    )
    browser_args: List[str] = field(
        default_factory=lambda: os.environ.get(
            "READABLE_BROWSER_ARGS", _DEFAULT_BROWSER_ARGS
        ).split()
    )

    # ------------------------------------------------------------------
    # Extraction
    # ------------------------------------------------------------------
    engine: str = field(
        default_factory=lambda: os.environ.get("READABLE_ENGINE", "readability")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("READABLE_LOG_LEVEL", "WARNING").upper()
    )

    def __post_init__(self) -> None:
        # Validated on use by readable.pipeline.resolve_engine.
        self.engine = self.engine.strip().lower()

    @property
    def navigation_timeout_ms(self) -> int:
        """Navigation bound in milliseconds, as Playwright expects it."""
        return int(self.navigation_timeout * 1000)

    @property
    def body_wait_timeout_ms(self) -> int:
        return int(self.body_wait_timeout * 1000)


# Module-level singleton - import this everywhere:
#   from readable.config import settings
settings = Settings()
