"""Content extraction: turns a :class:`RawPage` into a :class:`CleanPage`.

Only three kinds of element carry content for the viewer: ``title``, the
six heading levels and ``p``.  Everything else is walked through but adds
nothing of its own.
"""

from __future__ import annotations

import logging
from typing import List

from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from browser.config import settings
from browser.errors import ParseError
from browser.scraper.models import HEADING, PARAGRAPH, Block, CleanPage, RawPage

logger = logging.getLogger(__name__)

_HEADINGS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _parse(html: str) -> BeautifulSoup:
    try:
        return BeautifulSoup(html, settings.html_parser)
    except ParserRejectedMarkup as exc:
        raise ParseError(str(exc) or "markup rejected by parser") from exc
    except FeatureNotFound as exc:
        raise ParseError(f"HTML parser {settings.html_parser!r} is not available") from exc


def _inner_text(tag: Tag) -> str:
    """Concatenate every descendant text node of *tag*, then trim the result.

    Comments, doctypes and other declarations are skipped; nested elements
    are flattened into plain text.
    """
    parts = [
        str(node)
        for node in tag.descendants
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString)
    ]
    return "".join(parts).strip()


def _walk(root: PageElement):
    """Yield the elements under *root* in document (pre-order) order.

    Uses an explicit stack so deeply nested documents cannot exhaust the
    interpreter's recursion limit.
    """
    stack: List[PageElement] = [root]
    while stack:
        node = stack.pop()
        if not isinstance(node, Tag):
            continue
        yield node
        stack.extend(reversed(node.contents))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_content(raw: RawPage) -> CleanPage:
    """Extract the title, headings and paragraphs of *raw*.

    Headings and paragraphs are kept only once the walk has entered ``body``.
    The flag is never cleared, so anything a lenient parser leaves after the
    closing ``</body>`` is still treated as body content.  When several
    ``title`` elements exist the last one wins.

    Raises:
        ParseError: If the parser rejects the markup outright.
    """
    soup = _parse(raw.html)

    title = ""
    blocks: List[Block] = []
    in_body = False

    for tag in _walk(soup):
        name = tag.name
        if name == "title":
            title = _inner_text(tag)
        elif name == "body":
            in_body = True
        elif name in _HEADINGS:
            if in_body:
                blocks.append(Block(HEADING, _inner_text(tag), level=_HEADINGS[name]))
        elif name == "p":
            if in_body:
                blocks.append(Block(PARAGRAPH, _inner_text(tag)))

    logger.debug("Extracted %d block(s) from %s", len(blocks), raw.url)
    return CleanPage(url=raw.url, title=title, blocks=blocks)
