"""Turn an extracted page into styled text for the page pane."""

from __future__ import annotations

from rich.text import Text

from browser.scraper.models import CleanPage

TITLE_STYLE = "bold green"
HEADING_STYLE = "bold yellow"


def _from_page_text(text: str, style: str = "") -> Text:
    """Wrap page text, translating any raw ANSI escapes it carries.

    Page text is never parsed as console markup, so stray ``[brackets]`` in
    a document are shown literally.
    """
    result = Text.from_ansi(text)
    if style:
        result.stylize(style)
    return result


def render_page(page: CleanPage) -> Text:
    """Compose the display for *page*.

    Layout::

        Title: <title>
        <blank>
        <blank>
        <heading or paragraph>
        <blank>
        ...

    Each block is preceded and followed by a line break; headings are bold
    yellow, paragraphs carry no style.
    """
    display = Text()
    display.append("Title: ", style=TITLE_STYLE)
    display.append_text(_from_page_text(page.title, TITLE_STYLE))
    display.append("\n\n")

    for block in page.blocks:
        display.append("\n")
        display.append_text(_from_page_text(block.text, HEADING_STYLE if block.is_heading else ""))
        display.append("\n")

    return display
