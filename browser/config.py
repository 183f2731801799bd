"""Centralised settings for termbrowse.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _optional_float(name: str) -> Optional[float]:
    """Read a float from the environment; empty or missing means ``None``."""
    value = os.environ.get(name, "").strip()
    return float(value) if value else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    # ``None`` disables the timeout entirely; a slow server blocks the UI
    # until it answers.
    request_timeout: Optional[float] = field(
        default_factory=lambda: _optional_float("REQUEST_TIMEOUT")
    )

    # ------------------------------------------------------------------
    # Extractor
    # ------------------------------------------------------------------
    html_parser: str = field(
        default_factory=lambda: os.environ.get("HTML_PARSER", "html.parser")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    config_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("TERMBROWSE_HOME", Path.home() / ".termbrowse")
        )
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("TERMBROWSE_LOG_LEVEL", "INFO")
    )

    @property
    def log_file(self) -> Path:
        """Absolute path to the log file (the terminal belongs to the UI)."""
        override = os.environ.get("TERMBROWSE_LOG_FILE")
        if override:
            return Path(override)
        return self.config_dir / "termbrowse.log"


# Module-level singleton — import this everywhere:
#   from browser.config import settings
settings = Settings()
