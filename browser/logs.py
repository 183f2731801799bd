"""Logging setup.

The terminal is owned by the UI while the app runs, so log records go to a
file instead of stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from browser.config import settings

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(log_file: Optional[Path] = None, level: Optional[str] = None) -> Path:
    """Route the root logger to *log_file* and return the path used."""
    path = log_file or settings.log_file
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(path),
        format=_FORMAT,
        level=(level or settings.log_level).upper(),
        force=True,
    )
    return path
