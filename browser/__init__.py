"""termbrowse backend: normalise a URL, fetch the page, extract its readable text."""

from browser.errors import BrowserError, FetchError, ParseError

__all__ = ["BrowserError", "FetchError", "ParseError"]
