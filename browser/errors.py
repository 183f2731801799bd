"""Exception types raised by the fetch → extract pipeline."""

from __future__ import annotations

from typing import Optional


class BrowserError(Exception):
    """Base class for every error the view controller knows how to display."""


class FetchError(BrowserError):
    """The page could not be retrieved (transport failure or HTTP error status)."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(BrowserError):
    """The response body could not be parsed as HTML at all."""
